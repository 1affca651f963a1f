# sitegen/core/llm_client.py
import os
import json
import time
import asyncio
import logging
import uuid
from typing import Any, Dict, Optional

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from sitegen.core.errors import (
    AccessDenied,
    AuthenticationFailed,
    BackendError,
    BackendFailure,
    EmptyGeneration,
    RateLimited,
)
from sitegen.core.prompts import build_system_prompt
from sitegen.utils import config

logger = logging.getLogger(__name__)

# message fragments seen in provider errors that lack a usable status code
_RATE_LIMIT_HINTS = ("rate limit", "rate_limit", "resource exhausted", "resource_exhausted", "quota")
_AUTH_HINTS = ("api key not valid", "api_key_invalid", "invalid api key", "unauthenticated")
_ACCESS_HINTS = ("permission denied", "permission_denied", "billing")


# -------------------------
# LLM init
# -------------------------
def get_llm(model: Optional[str] = None):
    api_key = config.get_api_key()
    if not api_key:
        raise AuthenticationFailed(
            "No generation backend credential. Set GEMINI_API_KEY to enable remote generation."
        )
    return ChatGoogleGenerativeAI(
        model=model or config.AI_MODEL,
        temperature=config.AI_TEMPERATURE,
        max_output_tokens=config.AI_MAX_TOKENS,
        google_api_key=api_key,
        max_retries=1,  # single attempt; retrying costs quota and is the caller's decision
    )


def _save_debug_log(prefix: str, payload: Dict[str, Any]):
    fname = f"{int(time.time())}_{uuid.uuid4().hex[:8]}_{prefix}.json"
    try:
        os.makedirs(config.LOG_DIR, exist_ok=True)
        with open(os.path.join(config.LOG_DIR, fname), "w", encoding="utf-8") as fh:
            json.dump(payload, fh, indent=2, ensure_ascii=False)
    except Exception:
        logger.exception("Failed to write debug log")


# -------------------------
# Response / error normalisation
# -------------------------
def _extract_text(message: Any) -> str:
    """
    Pull the generated text out of a chat response. Gemini may return content
    as a plain string or as a list of parts ({"type": "text", "text": ...}).
    """
    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and isinstance(part.get("text"), str):
                parts.append(part["text"])
        return "".join(parts)
    return ""


def _status_of(exc: BaseException) -> Optional[int]:
    # openai/httpx style first, then google api_core / google-genai style
    seen = set()
    cur: Optional[BaseException] = exc
    while cur is not None and id(cur) not in seen:
        seen.add(id(cur))
        for attr in ("status_code", "code", "status"):
            val = getattr(cur, attr, None)
            if isinstance(val, int) and 100 <= val < 600:
                return val
        response = getattr(cur, "response", None)
        val = getattr(response, "status_code", None)
        if isinstance(val, int):
            return val
        cur = cur.__cause__ or cur.__context__
    return None


def classify_backend_error(exc: BaseException) -> BackendFailure:
    """
    Map a provider exception onto the adapter taxonomy. Status codes win;
    message hints cover providers that only report a status string.
    """
    if isinstance(exc, BackendFailure):
        return exc
    if isinstance(exc, asyncio.TimeoutError):
        return BackendError("Generation backend timed out", timeout=True)

    status = _status_of(exc)
    message = str(exc) or exc.__class__.__name__
    lowered = message.lower()

    if status == 429:
        return RateLimited(f"Generation backend rate limit exceeded: {message}")
    if status == 401:
        return AuthenticationFailed(f"Generation backend rejected the credential: {message}")
    if status == 403:
        return AccessDenied(f"Generation backend access denied: {message}")
    if any(h in lowered for h in _RATE_LIMIT_HINTS):
        return RateLimited(f"Generation backend rate limit exceeded: {message}")
    if any(h in lowered for h in _AUTH_HINTS):
        return AuthenticationFailed(f"Generation backend rejected the credential: {message}")
    if any(h in lowered for h in _ACCESS_HINTS):
        return AccessDenied(f"Generation backend access denied: {message}")
    if "timeout" in lowered or "timed out" in lowered or "deadline" in lowered:
        return BackendError(f"Generation backend timed out: {message}", timeout=True, status=status)
    return BackendError(f"Generation backend error: {message}", status=status)


# -------------------------
# Public: call_generation
# -------------------------
async def call_generation(prompt: str,
                          timeout: Optional[float] = None,
                          debug: bool = False) -> str:
    """
    Send one prompt to the generation backend and return the raw text.

    Exactly one backend call per invocation, bounded by `timeout` seconds.
    Raises RateLimited, AuthenticationFailed, AccessDenied, EmptyGeneration
    or BackendError.
    """
    timeout = config.AI_TIMEOUT if timeout is None else timeout
    messages = [SystemMessage(content=build_system_prompt()), HumanMessage(content=prompt)]

    start_ts = time.time()
    try:
        llm = get_llm()
        result = await asyncio.wait_for(llm.ainvoke(messages), timeout=timeout)
    except Exception as e:
        failure = classify_backend_error(e)
        logger.warning("Generation call failed after %.2fs: %s (%s)",
                       time.time() - start_ts, failure.kind.value, e)
        if debug:
            _save_debug_log("llm_error", {"prompt": prompt, "error": repr(e), "kind": failure.kind.value})
        if failure is e:
            raise
        raise failure from e

    text = _extract_text(result)
    if debug:
        _save_debug_log("llm_attempt", {"prompt": prompt, "raw_result": text,
                                        "duration_s": time.time() - start_ts})
    if not text.strip():
        raise EmptyGeneration("No code generated by the backend")
    return text
