"""
edit_distance.py — Levenshtein Edit Distance
=============================================
dp[i][j] = fewest insertions, deletions and substitutions turning
string1[:i] into string2[:j].  The traceback lists the operations.
"""

from typing import List, Optional

from algorithms.dynamic_programming.common import empty_table, two_strings
from algorithms.step import Tracer


PSEUDOCODE: List[str] = [
    "def editDistance(A, B):",                                 # 0
    "    dp[i][0] ← i; dp[0][j] ← j",                          # 1
    "    for i in 1 … m, j in 1 … n:",                         # 2
    "        if A[i] = B[j]: dp[i][j] ← dp[i-1][j-1]",         # 3
    "        else: dp[i][j] ← 1 + min(dp[i-1][j],",            # 4
    "                   dp[i][j-1], dp[i-1][j-1])",            # 5
    "    trace back the operations",                           # 6
    "    return dp[m][n]",                                     # 7
]

BLANK = {"string1": "", "string2": "", "table": []}


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"string1": "kitten", "string2": "sitting"}


def edit_distance(t: Tracer) -> None:
    a, b = two_strings(t.state, BLANK)
    m, n = len(a), len(b)

    t.emit(f"Edit distance from '{a}' to '{b}'.", 0)

    dp = empty_table(m + 1, n + 1)
    t.emit(f"Allocate a {m + 1} × {n + 1} table.", 1, title="Base cases",
           table=dp, current_cell=None, dependencies=[], operations=[], trace_path=[])
    for i in range(m + 1):
        dp[i][0] = i
    t.emit("Column 0: turning a prefix into '' takes i deletions.", 1)
    for j in range(1, n + 1):
        dp[0][j] = j
    t.emit("Row 0: turning '' into a prefix takes j insertions.", 1)

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if a[i - 1] == b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
                t.emit(f"'{a[i - 1]}' = '{b[j - 1]}': no edit, dp[{i}][{j}] = {dp[i][j]}.", 3,
                       current_cell=[i, j], dependencies=[[i - 1, j - 1]])
            else:
                delete, insert, replace = dp[i - 1][j], dp[i][j - 1], dp[i - 1][j - 1]
                dp[i][j] = 1 + min(delete, insert, replace)
                t.emit(f"'{a[i - 1]}' ≠ '{b[j - 1]}': dp[{i}][{j}] = 1 + min(del {delete}, ins {insert}, "
                       f"sub {replace}) = {dp[i][j]}.", 4,
                       current_cell=[i, j], dependencies=[[i - 1, j], [i, j - 1], [i - 1, j - 1]])

    ops: List[str] = []
    i, j = m, n
    path = [[i, j]]
    t.emit(f"Distance is {dp[m][n]}. Trace back the operations.", 6,
           title="Traceback", current_cell=[i, j], dependencies=[], trace_path=path)
    while i > 0 or j > 0:
        if i > 0 and j > 0 and a[i - 1] == b[j - 1] and dp[i][j] == dp[i - 1][j - 1]:
            op = f"keep '{a[i - 1]}'"
            i, j = i - 1, j - 1
        elif i > 0 and j > 0 and dp[i][j] == dp[i - 1][j - 1] + 1:
            op = f"substitute '{a[i - 1]}' → '{b[j - 1]}'"
            i, j = i - 1, j - 1
        elif i > 0 and dp[i][j] == dp[i - 1][j] + 1:
            op = f"delete '{a[i - 1]}'"
            i -= 1
        else:
            op = f"insert '{b[j - 1]}'"
            j -= 1
        ops.insert(0, op)
        path.append([i, j])
        t.emit(f"Step back to dp[{i}][{j}]: {op}.", 6, current_cell=[i, j], operations=ops)

    edits = sum(1 for op in ops if not op.startswith("keep"))
    t.finish(f"Edit distance from '{a}' to '{b}' is {dp[m][n]} ({edits} edit operations).", 7,
             current_cell=None, result=dp[m][n])
