"""Shared helpers for the dynamic-programming family."""

from typing import Any, Dict, List

from algorithms.validate import InvalidInput, require_string


def empty_table(rows: int, cols: int, fill: Any = None) -> List[List[Any]]:
    return [[fill] * cols for _ in range(rows)]


def two_strings(state: Dict[str, Any], blank: Dict[str, Any], limit: int = 30):
    """`string1` / `string2` from the state, either may be empty, at most `limit` long."""
    a = require_string(state, "string1", blank, allow_empty=True)
    b = require_string(state, "string2", blank, allow_empty=True)
    if len(a) > limit or len(b) > limit:
        raise InvalidInput(f"Strings are limited to {limit} characters.", blank)
    return a, b
