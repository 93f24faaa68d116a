"""
formatting.py — Display & JSON Helpers
=======================================
Trace states keep real floats (float("inf") for "unreachable"), which
JSON cannot carry.  These helpers produce the wire form the web layer
and Recorder.export() hand out, and the compact number formatting
used inside step descriptions.
"""

import math
from typing import Any

INFINITY_SYMBOL = "∞"


def fmt(value: Any) -> str:
    """Number → short display string: ∞ for infinities, 7 instead of 7.0."""
    if isinstance(value, float):
        if math.isinf(value):
            return INFINITY_SYMBOL if value > 0 else "-" + INFINITY_SYMBOL
        if value.is_integer():
            return str(int(value))
        return f"{value:.4g}"
    return str(value)


def jsonable(obj: Any) -> Any:
    """Recursively convert a state value into something json.dumps accepts."""
    if isinstance(obj, float):
        if math.isinf(obj):
            return INFINITY_SYMBOL if obj > 0 else "-" + INFINITY_SYMBOL
        if math.isnan(obj):
            return None
        return obj
    if isinstance(obj, dict):
        return {str(k): jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [jsonable(v) for v in obj]
    if isinstance(obj, (set, frozenset)):
        return [jsonable(v) for v in sorted(obj, key=repr)]
    return obj
