"""
karatsuba.py — Karatsuba Multiplication
========================================
Splits x = a·10^m + b and y = c·10^m + d and uses three recursive
products instead of four:

    z2 = a·c,  z0 = b·d,  z1 = (a + b)(c + d) - z2 - z0
    x·y = z2·10^(2m) + z1·10^m + z0

Recursion stops at single-digit operands.  `calls` lists every call
with its operands, depth and (once known) result.
"""

from typing import Any, Dict, List, Optional

from algorithms.step import Tracer
from algorithms.validate import require_int


PSEUDOCODE: List[str] = [
    "def karatsuba(x, y):",                            # 0
    "    if x < 10 or y < 10: return x·y",             # 1
    "    m ← ⌊max(digits(x), digits(y)) / 2⌋",         # 2
    "    a, b ← split(x, m); c, d ← split(y, m)",      # 3
    "    z2 ← karatsuba(a, c)",                        # 4
    "    z0 ← karatsuba(b, d)",                        # 5
    "    z1 ← karatsuba(a+b, c+d) - z2 - z0",          # 6
    "    return z2·10^(2m) + z1·10^m + z0",            # 7
]

BLANK = {"x": 0, "y": 0, "calls": []}


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"x": 1234, "y": 5678}


def karatsuba(t: Tracer) -> None:
    x = require_int(t.state, "x", BLANK, minimum=0, maximum=10 ** 12)
    y = require_int(t.state, "y", BLANK, minimum=0, maximum=10 ** 12)

    t.emit(f"Multiply {x} × {y} with Karatsuba's method.", 0)

    t.emit("Start the recursion.", 0, calls=[], current_call=None, depth=0)
    result = _mult(t, x, y, 0)
    t.finish(f"{x} × {y} = {result}.", 7, current_call=None, depth=0, result=result)


def _mult(t: Tracer, x: int, y: int, depth: int) -> int:
    calls: List[Dict[str, Any]] = t.state["calls"]
    call = {"x": x, "y": y, "depth": depth, "result": None}
    calls.append(call)
    me = len(calls) - 1

    if x < 10 or y < 10:
        call["result"] = x * y
        t.emit(f"Base case: {x} × {y} = {x * y}.", 1, current_call=me, depth=depth)
        return x * y

    m = max(len(str(x)), len(str(y))) // 2
    p = 10 ** m
    a, b = divmod(x, p)
    c, d = divmod(y, p)
    t.emit(f"Split at m = {m}: {x} = {a}·10^{m} + {b}, {y} = {c}·10^{m} + {d}.", 3,
           current_call=me, depth=depth)

    z2 = _mult(t, a, c, depth + 1)
    t.emit(f"z2 = {a} × {c} = {z2}.", 4, current_call=me, depth=depth)
    z0 = _mult(t, b, d, depth + 1)
    t.emit(f"z0 = {b} × {d} = {z0}.", 5, current_call=me, depth=depth)
    mid = _mult(t, a + b, c + d, depth + 1)
    z1 = mid - z2 - z0
    t.emit(f"z1 = ({a}+{b})({c}+{d}) - z2 - z0 = {mid} - {z2} - {z0} = {z1}.", 6,
           current_call=me, depth=depth)

    result = z2 * p * p + z1 * p + z0
    call["result"] = result
    t.emit(f"Combine: {z2}·10^{2 * m} + {z1}·10^{m} + {z0} = {result}.", 7, current_call=me, depth=depth)
    return result
