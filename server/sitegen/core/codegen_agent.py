# sitegen/core/codegen_agent.py
"""
Code Generation Agent
- Exposes:
    async def generate(payload, options=None) -> Dict[str, Any]
- Single place that sequences one request through the pipeline:
    validate -> compose prompt -> backend call -> sanitize
  and decides when the local template replaces the remote result.

Per-request only: nothing here outlives a call, and mode switches arrive
through `options` rather than module state.
"""
import logging
from enum import Enum
from typing import Any, Dict, Optional

from sitegen.core.errors import (
    OPERATOR_KINDS,
    ErrorKind,
    GenerationError,
    fallback_notice,
    is_fallback_eligible,
)
from sitegen.core.fallback import generate_fallback_site
from sitegen.core.llm_client import call_generation
from sitegen.core.prompts import build_prompt
from sitegen.core.sanitizer import sanitize_code
from sitegen.core.validator import validate_input
from sitegen.models import GenerationRequest
from sitegen.utils import config

logger = logging.getLogger(__name__)


class Stage(str, Enum):
    VALIDATING = "validating"
    COMPOSING = "composing"
    GENERATING_REMOTE = "generating_remote"
    GENERATING_LOCAL = "generating_local"
    SANITIZING = "sanitizing"
    DONE = "done"
    FAILED = "failed"


def _enter(stage: Stage, request_name: str = ""):
    logger.debug("generate[%s]: %s", request_name, stage.value)


def _result(code: str, source: str, degraded: bool = False, notice: Optional[str] = None) -> Dict[str, Any]:
    return {
        "code": code,
        "degraded": degraded,
        "notice": notice,
        "source": source,
        "message": "Website generated successfully" if not degraded
        else "Website generated from local template",
    }


def _log_fallback(exc: GenerationError, request: GenerationRequest):
    if exc.kind in OPERATOR_KINDS:
        # operator error, not load: keep it visible
        logger.error("Backend configuration problem for %r (%s): %s; using local template",
                     request.name, exc.kind.value, exc)
    elif exc.kind in (ErrorKind.EMPTY_GENERATION, ErrorKind.SANITIZATION):
        logger.warning("Unusable backend output for %r (%s): %s; using local template",
                       request.name, exc.kind.value, exc)
    else:
        logger.warning("Backend unavailable for %r (%s): %s; using local template",
                       request.name, exc.kind.value, exc)


# ----------------------------
# Main: generate
# ----------------------------
async def generate(payload: Any, options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Run one request through the pipeline.

    options:
      - local (bool): skip the backend and render the local template
      - timeout (float): seconds allowed for the backend call
      - debug (bool): write prompt and raw output to the log dir

    Returns {"code", "degraded", "notice", "source", "message"}.
    Raises ValidationError for bad input. Backend and sanitization failures
    never escape: they are replaced by the local template with degraded=True
    and a notice the UI can show.
    """
    options = options or {}
    local = bool(options.get("local", config.LOCAL_MODE))
    debug = bool(options.get("debug", False))
    timeout = options.get("timeout")

    _enter(Stage.VALIDATING)
    try:
        request = validate_input(payload)
    except GenerationError:
        _enter(Stage.FAILED)
        raise

    if local:
        _enter(Stage.GENERATING_LOCAL, request.name)
        code = generate_fallback_site(request)
        _enter(Stage.DONE, request.name)
        return _result(code, source="local")

    try:
        _enter(Stage.COMPOSING, request.name)
        prompt = build_prompt(request)

        _enter(Stage.GENERATING_REMOTE, request.name)
        raw = await call_generation(prompt, timeout=timeout, debug=debug)

        _enter(Stage.SANITIZING, request.name)
        code = sanitize_code(raw)
    except GenerationError as e:
        if not is_fallback_eligible(e):
            _enter(Stage.FAILED, request.name)
            raise
        _log_fallback(e, request)
        _enter(Stage.GENERATING_LOCAL, request.name)
        code = generate_fallback_site(request)
        _enter(Stage.DONE, request.name)
        return _result(code, source="local", degraded=True, notice=fallback_notice(e))

    _enter(Stage.DONE, request.name)
    return _result(code, source="remote")
