"""
fibonacci.py — Fibonacci by Tabulation
=======================================
dp[0] = 0, dp[1] = 1, dp[i] = dp[i-1] + dp[i-2].

State:
  • dp           – the table, None for cells not yet written
  • current_cell – [i] being written
  • dependencies – [[i-1], [i-2]] read by the current write
"""

from typing import List, Optional

from algorithms.step import Tracer
from algorithms.validate import require_int


PSEUDOCODE: List[str] = [
    "def fib(n):",                           # 0
    "    dp ← array of n+1 cells",           # 1
    "    dp[0] ← 0",                         # 2
    "    dp[1] ← 1",                         # 3
    "    for i in 2 … n:",                   # 4
    "        dp[i] ← dp[i-1] + dp[i-2]",     # 5
    "    return dp[n]",                      # 6
]

BLANK = {"n": 0, "dp": []}


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"n": 10}


def fibonacci(t: Tracer) -> None:
    n = require_int(t.state, "n", BLANK, minimum=0, maximum=90)

    t.emit(f"Compute F({n}) bottom-up.", 0)

    dp: List[Optional[int]] = [None] * (n + 1)
    t.emit(f"Allocate a table of {n + 1} cells.", 1, title="Base cases",
           dp=dp, current_cell=None, dependencies=[])
    dp[0] = 0
    t.emit("Base case: dp[0] = 0.", 2, current_cell=[0])
    if n >= 1:
        dp[1] = 1
        t.emit("Base case: dp[1] = 1.", 3, current_cell=[1])

    for i in range(2, n + 1):
        dp[i] = dp[i - 1] + dp[i - 2]
        t.emit(f"dp[{i}] = dp[{i - 1}] + dp[{i - 2}] = {dp[i - 1]} + {dp[i - 2]} = {dp[i]}.", 5,
               title="Fill" if i == 2 else None,
               current_cell=[i], dependencies=[[i - 1], [i - 2]])

    t.finish(f"F({n}) = {dp[n]}.", 6, current_cell=[n], dependencies=[], result=dp[n])
