"""
scs.py — Shortest Common Supersequence
=======================================
dp[i][j] = length of the shortest string having both string1[:i] and
string2[:j] as subsequences.

    dp[i][0] = i,  dp[0][j] = j
    dp[i][j] = dp[i-1][j-1] + 1                   if X[i] = Y[j]
             = min(dp[i-1][j], dp[i][j-1]) + 1    otherwise

The traceback builds the supersequence right to left; once one string
is exhausted the rest of the other is copied in.
"""

from typing import List, Optional

from algorithms.dynamic_programming.common import empty_table, two_strings
from algorithms.step import Tracer


PSEUDOCODE: List[str] = [
    "def SCS(X, Y):",                                          # 0
    "    dp[i][0] ← i; dp[0][j] ← j",                          # 1
    "    for i in 1 … m, j in 1 … n:",                         # 2
    "        if X[i] = Y[j]: dp[i][j] ← dp[i-1][j-1] + 1",     # 3
    "        else: dp[i][j] ← min(dp[i-1][j], dp[i][j-1]) + 1",  # 4
    "    build the string from dp[m][n] backwards",            # 5
    "    return dp[m][n]",                                     # 6
]

BLANK = {"string1": "", "string2": "", "table": []}


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"string1": "ABCBDAB", "string2": "BDCABA"}


def scs(t: Tracer) -> None:
    x, y = two_strings(t.state, BLANK)
    m, n = len(x), len(y)

    t.emit(f"Shortest common supersequence of '{x}' and '{y}'.", 0)

    dp = empty_table(m + 1, n + 1)
    t.emit(f"Allocate a {m + 1} × {n + 1} table.", 1, title="Base cases",
           table=dp, current_cell=None, dependencies=[], trace_path=[], supersequence="")
    for j in range(n + 1):
        dp[0][j] = j
    t.emit("Row 0: with the first string empty, copy j characters of the second.", 1)
    for i in range(1, m + 1):
        dp[i][0] = i
    t.emit("Column 0: with the second string empty, copy i characters of the first.", 1)

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if x[i - 1] == y[j - 1]:
                dp[i][j] = dp[i - 1][j - 1] + 1
                t.emit(f"'{x[i - 1]}' = '{y[j - 1]}': share it, dp[{i}][{j}] = {dp[i - 1][j - 1]} + 1 "
                       f"= {dp[i][j]}.", 3,
                       current_cell=[i, j], dependencies=[[i - 1, j - 1]])
            else:
                dp[i][j] = min(dp[i - 1][j], dp[i][j - 1]) + 1
                t.emit(f"'{x[i - 1]}' ≠ '{y[j - 1]}': dp[{i}][{j}] = min({dp[i - 1][j]}, {dp[i][j - 1]}) + 1 "
                       f"= {dp[i][j]}.", 4,
                       current_cell=[i, j], dependencies=[[i - 1, j], [i, j - 1]])

    i, j = m, n
    path = [[i, j]]
    out = ""
    t.emit(f"Supersequence length is {dp[m][n]}. Build it from dp[{m}][{n}].", 5,
           title="Traceback", current_cell=[i, j], dependencies=[], trace_path=path)
    while i > 0 or j > 0:
        if i > 0 and j > 0 and x[i - 1] == y[j - 1]:
            ch, i, j = x[i - 1], i - 1, j - 1
            how = "common character"
        elif j == 0 or (i > 0 and dp[i - 1][j] <= dp[i][j - 1]):
            ch, i = x[i - 1], i - 1
            how = "from the first string"
        else:
            ch, j = y[j - 1], j - 1
            how = "from the second string"
        out = ch + out
        path.append([i, j])
        t.emit(f"Prepend '{ch}' ({how}): '{out}'.", 5, current_cell=[i, j], supersequence=out)

    t.finish(f"Shortest common supersequence: '{out}' (length {dp[m][n]}).", 6,
             current_cell=None, result=dp[m][n])
