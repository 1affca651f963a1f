# sitegen/core/theme.py
from typing import Optional, Tuple

DEFAULT_THEME = "modern blue gradient"
DEFAULT_PALETTE: Tuple[str, str] = ("#4F46E5", "#818CF8")

# (keyword, primary, accent); first keyword found in the hint wins
PALETTE = [
    ("blue", "#4F46E5", "#818CF8"),
    ("purple", "#9333EA", "#C084FC"),
    ("green", "#10B981", "#34D399"),
    ("red", "#EF4444", "#F87171"),
]


def resolve_palette(color: Optional[str]) -> Tuple[str, str]:
    """
    Map a free-text theme hint ("Deep Purple and gold") to a (primary, accent)
    color pair. Matching is a case-insensitive substring test.
    """
    if not color:
        return DEFAULT_PALETTE
    hint = color.lower()
    for keyword, primary, accent in PALETTE:
        if keyword in hint:
            return primary, accent
    return DEFAULT_PALETTE
