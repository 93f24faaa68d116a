"""
lcs.py — Longest Common Subsequence
====================================
dp[i][j] = LCS length of string1[:i] and string2[:j].
Traceback walks from dp[m][n] towards the origin: a diagonal move on a
character match, otherwise towards the larger neighbour (up on ties).
"""

from typing import List, Optional

from algorithms.dynamic_programming.common import empty_table, two_strings
from algorithms.step import Tracer


PSEUDOCODE: List[str] = [
    "def LCS(X, Y):",                                          # 0
    "    dp[i][0] ← 0; dp[0][j] ← 0",                          # 1
    "    for i in 1 … m:",                                     # 2
    "        for j in 1 … n:",                                 # 3
    "            if X[i] = Y[j]: dp[i][j] ← dp[i-1][j-1] + 1",  # 4
    "            else: dp[i][j] ← max(dp[i-1][j], dp[i][j-1])",  # 5
    "    traceback from dp[m][n]",                             # 6
    "    return dp[m][n]",                                     # 7
]

BLANK = {"string1": "", "string2": "", "table": []}


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"string1": "ABCBDAB", "string2": "BDCABA"}


def lcs(t: Tracer) -> None:
    x, y = two_strings(t.state, BLANK)
    m, n = len(x), len(y)

    t.emit(f"Longest common subsequence of '{x}' and '{y}'.", 0)

    dp = empty_table(m + 1, n + 1)
    t.emit(f"Allocate a {m + 1} × {n + 1} table.", 1, title="Base cases",
           table=dp, current_cell=None, dependencies=[], trace_path=[], lcs="")
    for j in range(n + 1):
        dp[0][j] = 0
    t.emit("Row 0: an empty prefix of the first string shares nothing.", 1)
    for i in range(1, m + 1):
        dp[i][0] = 0
    t.emit("Column 0: an empty prefix of the second string shares nothing.", 1)

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if x[i - 1] == y[j - 1]:
                dp[i][j] = dp[i - 1][j - 1] + 1
                t.emit(f"'{x[i - 1]}' = '{y[j - 1]}': dp[{i}][{j}] = dp[{i - 1}][{j - 1}] + 1 = {dp[i][j]}.", 4,
                       title="Fill" if (i, j) == (1, 1) else None,
                       current_cell=[i, j], dependencies=[[i - 1, j - 1]])
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])
                t.emit(f"'{x[i - 1]}' ≠ '{y[j - 1]}': dp[{i}][{j}] = max({dp[i - 1][j]}, {dp[i][j - 1]}) "
                       f"= {dp[i][j]}.", 5,
                       title="Fill" if (i, j) == (1, 1) else None,
                       current_cell=[i, j], dependencies=[[i - 1, j], [i, j - 1]])

    i, j = m, n
    path = [[i, j]]
    out = ""
    t.emit(f"LCS length is {dp[m][n]}. Trace back from dp[{m}][{n}].", 6,
           title="Traceback", current_cell=[i, j], dependencies=[], trace_path=path)
    while i > 0 and j > 0:
        if x[i - 1] == y[j - 1]:
            out = x[i - 1] + out
            i, j = i - 1, j - 1
            path.append([i, j])
            t.emit(f"'{x[i]}' matches: prepend it, LCS so far '{out}'; move diagonally.", 6,
                   current_cell=[i, j], lcs=out)
        elif dp[i - 1][j] >= dp[i][j - 1]:
            i -= 1
            path.append([i, j])
            t.emit(f"No match; dp[{i}][{j}] ≥ dp[{i + 1}][{j - 1}], move up.", 6, current_cell=[i, j])
        else:
            j -= 1
            path.append([i, j])
            t.emit(f"No match; dp[{i}][{j}] > dp[{i - 1}][{j + 1}], move left.", 6, current_cell=[i, j])

    t.finish(f"Longest common subsequence: '{out}' (length {dp[m][n]}).", 7,
             current_cell=None, result=dp[m][n])
