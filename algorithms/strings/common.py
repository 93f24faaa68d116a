"""Shared helpers for the string-matching family."""

from typing import Any, Dict, List, Optional, Tuple

from algorithms.validate import BLANK_TEXT, InvalidInput, require_string

MATCH    = "match"
MISMATCH = "mismatch"

SAMPLE_TEXT = "ABABDABACDABABCABAB"


def check_text(state: Dict[str, Any], limit: int = 200) -> Tuple[str, str]:
    text    = require_string(state, "text", BLANK_TEXT, allow_empty=True)
    pattern = require_string(state, "pattern", BLANK_TEXT)
    if len(text) > limit:
        raise InvalidInput(f"'text' is limited to {limit} characters.", BLANK_TEXT)
    return text, pattern


def search_marks(text: str, pattern: str, **extra) -> Dict[str, Any]:
    """The shared keys at the start of a search phase."""
    marks: Dict[str, Any] = {
        "offset":            0,
        "text_highlight":    [None] * len(text),
        "pattern_highlight": [None] * len(pattern),
        "matches":           [],
        "comparisons":       0,
        "phase":             "search",
    }
    marks.update(extra)
    return marks


def clear(highlight: List[Optional[str]]) -> None:
    highlight[:] = [None] * len(highlight)


def summary(pattern: str, matches: List[int], comparisons: int) -> str:
    if not matches:
        return f"Pattern '{pattern}' not found ({comparisons} comparisons)."
    where = ", ".join(str(m) for m in matches)
    return f"Pattern '{pattern}' found at index {where} ({comparisons} comparisons)."
