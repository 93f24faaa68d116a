"""
subset_sum.py — Subset Sum
===========================
dp[i][s] is True when some subset of the first i numbers sums to s.
When dp[n][target] holds, the traceback recovers one such subset.
"""

from typing import List, Optional

from algorithms.dynamic_programming.common import empty_table
from algorithms.step import Tracer
from algorithms.validate import require_int, require_numbers


PSEUDOCODE: List[str] = [
    "def subsetSum(S, T):",                                        # 0
    "    dp[i][0] ← true; dp[0][s] ← false for s > 0",             # 1
    "    for i in 1 … n, s in 1 … T:",                             # 2
    "        if S[i] > s: dp[i][s] ← dp[i-1][s]",                  # 3
    "        else: dp[i][s] ← dp[i-1][s] or dp[i-1][s-S[i]]",      # 4
    "    if dp[n][T]: trace back the chosen numbers",              # 5
    "    return dp[n][T]",                                         # 6
]

BLANK = {"numbers": [], "target": 0, "table": []}


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"numbers": [3, 34, 4, 12, 5, 2], "target": 9}


def subset_sum(t: Tracer) -> None:
    nums   = require_numbers(t.state, "numbers", BLANK, integers=True, non_negative=True)
    target = require_int(t.state, "target", BLANK, minimum=0, maximum=500)
    n = len(nums)

    t.emit(f"Is there a subset of {nums} summing to {target}?", 0)

    dp = empty_table(n + 1, target + 1)
    t.emit(f"Allocate a {n + 1} × {target + 1} table.", 1, title="Base cases",
           table=dp, current_cell=None, dependencies=[], subset=[])
    for i in range(n + 1):
        dp[i][0] = True
    t.emit("Column 0: the empty subset always sums to 0.", 1)
    for s in range(1, target + 1):
        dp[0][s] = False
    t.emit("Row 0: with no numbers, no positive sum is reachable.", 1)

    for i in range(1, n + 1):
        x = nums[i - 1]
        for s in range(1, target + 1):
            if x > s:
                dp[i][s] = dp[i - 1][s]
                t.emit(f"{x} > {s}: dp[{i}][{s}] = dp[{i - 1}][{s}] = {dp[i][s]}.", 3,
                       current_cell=[i, s], dependencies=[[i - 1, s]])
            else:
                dp[i][s] = dp[i - 1][s] or dp[i - 1][s - x]
                t.emit(f"dp[{i}][{s}] = dp[{i - 1}][{s}] or dp[{i - 1}][{s - x}] = "
                       f"{dp[i - 1][s]} or {dp[i - 1][s - x]} = {dp[i][s]}.", 4,
                       current_cell=[i, s], dependencies=[[i - 1, s], [i - 1, s - x]])

    if not dp[n][target]:
        t.finish(f"No subset sums to {target}.", 6, current_cell=[n, target], dependencies=[], result=False)
        return

    subset: List[int] = []
    s = target
    t.emit(f"dp[{n}][{target}] is true. Trace back one subset.", 5,
           title="Traceback", current_cell=[n, target], dependencies=[])
    for i in range(n, 0, -1):
        if s == 0:
            break
        if not dp[i - 1][s]:
            s -= nums[i - 1]
            subset.insert(0, i - 1)
            t.emit(f"dp[{i - 1}][{s + nums[i - 1]}] is false, so {nums[i - 1]} is used; {s} left.", 5,
                   current_cell=[i - 1, s], subset=subset)
        else:
            t.emit(f"dp[{i - 1}][{s}] is already true: skip {nums[i - 1]}.", 5, current_cell=[i - 1, s])

    values = " + ".join(str(nums[i]) for i in subset)
    t.finish(f"Subset found: {values} = {target}.", 6, current_cell=None, result=True)
