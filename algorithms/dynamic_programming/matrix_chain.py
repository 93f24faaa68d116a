"""
matrix_chain.py — Matrix-Chain Multiplication
==============================================
Matrix A_i has shape dims[i-1] × dims[i].  m[i][j] is the cheapest
scalar-multiplication count for A_i … A_j; s[i][j] records the split.
Tables are 0-based over the n matrices.

Records a step for:
  1. The diagonal base cases m[i][i] = 0
  2. Every split point k tried for a cell, and the cell write itself
  3. Each split while building the optimal parenthesisation
"""

from typing import List, Optional

from algorithms.dynamic_programming.common import empty_table
from algorithms.step import Tracer
from algorithms.validate import InvalidInput, require_numbers


PSEUDOCODE: List[str] = [
    "def matrixChain(d):",                                         # 0
    "    m[i][i] ← 0",                                             # 1
    "    for L in 2 … n:",                                         # 2
    "        for i in 1 … n-L+1:  j ← i+L-1",                      # 3
    "            for k in i … j-1:",                               # 4
    "                cost ← m[i][k] + m[k+1][j] + d[i-1]·d[k]·d[j]",  # 5
    "                if cost < m[i][j]: m[i][j] ← cost; s[i][j] ← k",  # 6
    "    parenthesise(s, 1, n)",                                   # 7
    "    return m[1][n]",                                          # 8
]

BLANK = {"dimensions": [], "table": []}


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"dimensions": [30, 35, 15, 5, 10, 20, 25]}


def matrix_chain(t: Tracer) -> None:
    dims = require_numbers(t.state, "dimensions", BLANK, integers=True)
    if len(dims) < 2 or any(d <= 0 for d in dims):
        raise InvalidInput("'dimensions' needs at least two positive integers.", BLANK)
    n = len(dims) - 1

    t.emit(f"Multiply a chain of {n} matrices: " + ", ".join(
        f"A{i + 1}({dims[i]}×{dims[i + 1]})" for i in range(n)) + ".", 0)

    m = empty_table(n, n)
    s = empty_table(n, n)
    for i in range(n):
        m[i][i] = 0
    t.emit("A single matrix costs nothing: m[i][i] = 0.", 1, title="Base cases",
           table=m, split_table=s, current_cell=None, current_k=None, dependencies=[],
           parenthesization=None)

    for length in range(2, n + 1):
        for i in range(n - length + 1):
            j = i + length - 1
            best, best_k = None, None
            for k in range(i, j):
                cost = m[i][k] + m[k + 1][j] + dims[i] * dims[k + 1] * dims[j + 1]
                better = best is None or cost < best
                if better:
                    best, best_k = cost, k
                t.emit(f"A{i + 1}..A{j + 1} split after A{k + 1}: {m[i][k]} + {m[k + 1][j]} + "
                       f"{dims[i]}·{dims[k + 1]}·{dims[j + 1]} = {cost}"
                       + (" (new best)." if better else f" (best stays {best})."), 5,
                       title=f"Chains of length {length}" if (i, k) == (0, 0) else None,
                       current_cell=[i, j], current_k=k, dependencies=[[i, k], [k + 1, j]])
            m[i][j], s[i][j] = best, best_k
            t.emit(f"m[{i + 1}][{j + 1}] = {best}, split after A{best_k + 1}.", 6,
                   current_k=best_k, dependencies=[])

    t.emit(f"Minimum cost {m[0][n - 1]}. Recover the parenthesisation from the split table.", 7,
           title="Traceback", current_cell=[0, n - 1], current_k=None)
    text = _parenthesise(t, s, 0, n - 1)
    t.finish(f"Optimal order {text} costs {m[0][n - 1]} scalar multiplications.", 8,
             current_cell=None, parenthesization=text, result=m[0][n - 1])


def _parenthesise(t: Tracer, s: List[List[Optional[int]]], i: int, j: int) -> str:
    if i == j:
        return f"A{i + 1}"
    k = s[i][j]
    t.emit(f"A{i + 1}..A{j + 1} splits after A{k + 1}.", 7, current_cell=[i, j], current_k=k)
    return f"({_parenthesise(t, s, i, k)} × {_parenthesise(t, s, k + 1, j)})"
