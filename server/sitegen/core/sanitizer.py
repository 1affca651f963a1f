# sitegen/core/sanitizer.py
"""
Best-effort cleaning of generated code before it reaches the preview iframe.

The text is handled as text, not parsed: backend output is not guaranteed to
be well-formed before cleaning. The iframe sandbox is the real isolation
boundary; this pass strips what would throw in a classic script (module
syntax) and what the preview has no business doing (eval, storage, network).

Passes are repeated until the text stops changing, so a removal that glues
two fragments into a new match is caught on the next round. That makes
sanitize_code idempotent.
"""
import logging
import re
from typing import List, Pattern, Tuple

from sitegen.core.errors import SanitizationError

logger = logging.getLogger(__name__)

MIN_CODE_LENGTH = 50

Rule = Tuple[Pattern[str], str]


def _rules(*pairs: Tuple[str, str], flags: int = 0) -> List[Rule]:
    return [(re.compile(p, flags), r) for p, r in pairs]


# 1. markdown fences, with optional language tag (```javascript, ```jsx ...)
FENCE_RULES = _rules(
    (r"```[\w+-]*[ \t]*\n?", ""),
)

# 2. module imports and require()
IMPORT_RULES = _rules(
    # import X from 'y' / import { a, b } from "y" / import * as X from 'y' (may span lines)
    (r"\bimport\s+[^;'\"()]*?\bfrom\s*['\"][^'\"\n]*['\"][ \t]*;?[ \t]*\n?", ""),
    # import('dynamic')
    (r"\bimport\s*\([^()]*\)", ""),
    # const x = require('y');
    (r"\b(?:const|let|var)\s+[\w${},:\s]+?=\s*require\s*\([^()]*\)[ \t]*;?[ \t]*\n?", ""),
    (r"\brequire\s*\([^()]*\)", ""),
) + _rules(
    # import 'side-effect.css' (statement position only, so string literals survive)
    (r"^[ \t]*import\s*['\"][^'\"\n]*['\"][ \t]*;?[ \t]*\n?", ""),
    flags=re.MULTILINE,
)

# 3. module exports
EXPORT_RULES = _rules(
    (r"\bexport\s+default\b\s*", ""),
    (r"\bexport\s*\{[^{}]*\}(?:\s*from\s*['\"][^'\"\n]*['\"])?[ \t]*;?[ \t]*\n?", ""),
    (r"\bexport\s+(?=(?:async\s+)?function\b|class\b|const\b|let\b|var\b)", ""),
    (r"\bmodule\.exports(?:\.\w+)?\s*=\s*[^;\n]*;?", ""),
)

# 4. dynamic code evaluation: drop the callee, keep a harmless parenthesised expression
EVAL_RULES = _rules(
    (r"\beval\s*\(", "("),
    (r"(?:\bnew\s+)?\bFunction\s*\(", "("),
)

# 5. persistent browser storage
STORAGE_RULES = _rules(
    (r"\b(?:window\s*\.\s*)?(?:localStorage|sessionStorage)\b\s*\.?", ""),
)

# 6. outbound network calls
NETWORK_RULES = _rules(
    (r"\bnew\s+XMLHttpRequest\s*\(\s*\)", "null"),
    (r"\bXMLHttpRequest\b", ""),
    (r"\b(?:window\s*\.\s*)?fetch\s*\(", "("),
    (r"\bnavigator\s*\.\s*sendBeacon\s*\(", "("),
    (r"\bnew\s+WebSocket\s*\(", "("),
)

ALL_RULES: List[Rule] = (
    FENCE_RULES + IMPORT_RULES + EXPORT_RULES + EVAL_RULES + STORAGE_RULES + NETWORK_RULES
)


def _single_pass(code: str) -> str:
    for pattern, replacement in ALL_RULES:
        code = pattern.sub(replacement, code)
    return code.strip()


def sanitize_code(code: str) -> str:
    """
    Clean raw generated text into a code string for the preview iframe.

    Raises SanitizationError when the input is not a non-empty string, or when
    fewer than MIN_CODE_LENGTH characters survive cleaning.
    """
    if not isinstance(code, str) or not code.strip():
        raise SanitizationError("Invalid code: must be a non-empty string")

    # every rule shortens the text or leaves it alone, so this terminates
    cleaned = code
    passes = 0
    while True:
        nxt = _single_pass(cleaned)
        passes += 1
        if nxt == cleaned:
            break
        cleaned = nxt
    if passes > 2:
        logger.debug("sanitizer settled after %d passes", passes)

    if len(cleaned) < MIN_CODE_LENGTH:
        raise SanitizationError(
            f"Sanitized code is too short ({len(cleaned)} chars) - generation may have failed"
        )
    return cleaned
