# sitegen/core/validator.py
from typing import Any, Dict, List, Mapping

from sitegen.core.errors import ValidationError
from sitegen.models import GenerationRequest

# Limits (characters / entries)
MAX_NAME_LEN = 100
MAX_INDUSTRY_LEN = 100
MAX_AUDIENCE_LEN = 200
MAX_COLOR_LEN = 50
MAX_SECTIONS = 10

# (field, label) for the required free-text fields, in check order
REQUIRED_FIELDS = [
    ("name", "Business name"),
    ("industry", "Industry"),
    ("audience", "Target audience"),
]

# ----------------------------
# Field checks
# ----------------------------
def _require_text(data: Mapping[str, Any], field: str, label: str) -> str:
    value = data.get(field)
    if not isinstance(value, str) or value.strip() == "":
        raise ValidationError(f"Invalid input: '{field}' ({label}) is required")
    return value

def _check_length(value: str, field: str, label: str, limit: int):
    if len(value) > limit:
        raise ValidationError(
            f"Invalid input: '{field}' ({label}) is too long (max {limit} characters)"
        )

# ----------------------------
# Public: validate_input
# ----------------------------
def validate_input(data: Any) -> GenerationRequest:
    """
    Validate a decoded request body and build the immutable GenerationRequest.

    Checks run in a fixed order and stop at the first violation:
      object -> name/industry/audience present -> sections is an array
      -> name/industry/audience/color lengths -> section count

    Raises ValidationError naming the offending field. An empty sections list
    is valid; defaults are applied later by the prompt composer.
    """
    if not isinstance(data, Mapping):
        raise ValidationError("Invalid input: data must be an object")

    texts: Dict[str, str] = {}
    for field, label in REQUIRED_FIELDS:
        texts[field] = _require_text(data, field, label)

    sections = data.get("sections")
    if not isinstance(sections, list):
        raise ValidationError("Invalid input: 'sections' must be an array")

    _check_length(texts["name"], "name", "Business name", MAX_NAME_LEN)
    _check_length(texts["industry"], "industry", "Industry", MAX_INDUSTRY_LEN)
    _check_length(texts["audience"], "audience", "Target audience", MAX_AUDIENCE_LEN)

    color = data.get("color")
    if color is not None and color != "":
        if not isinstance(color, str):
            raise ValidationError("Invalid input: 'color' (Color theme) must be a string")
        _check_length(color, "color", "Color theme", MAX_COLOR_LEN)
    else:
        color = None

    if len(sections) > MAX_SECTIONS:
        raise ValidationError(f"Invalid input: too many 'sections' (max {MAX_SECTIONS})")

    cleaned: List[str] = []
    for s in sections:
        if not isinstance(s, str):
            raise ValidationError("Invalid input: 'sections' entries must be strings")
        cleaned.append(s)

    return GenerationRequest(
        name=texts["name"],
        industry=texts["industry"],
        audience=texts["audience"],
        color=color,
        sections=tuple(cleaned),
    )
