"""
n_queens.py — N-Queens
=======================
Places one queen per column, left to right, trying rows top to bottom.
A candidate square is "exploring" while it is checked against the
queens already placed; a safe square becomes "placed", and a placement
whose subtree fails is marked "backtracked" and removed.

State:
  • board       – n×n grid, 1 where a queen stands
  • cell_states – CellState value per square
  • queens      – row of the queen in each column (None if empty)
  • conflicts   – [[row, col]] of queens attacking the candidate
"""

from typing import List, Optional

from algorithms.backtracking.common import CellState, blank_cells
from algorithms.step import Tracer
from algorithms.validate import require_int


PSEUDOCODE: List[str] = [
    "def solve(col):",                             # 0
    "    if col = n: return true",                 # 1
    "    for row in 0 … n-1:",                     # 2
    "        if safe(row, col):",                  # 3
    "            place queen at (row, col)",       # 4
    "            if solve(col + 1): return true",  # 5
    "            remove queen (backtrack)",        # 6
    "    return false",                            # 7
]

BLANK = {"n": 0, "board": []}


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"n": 8}


def n_queens(t: Tracer) -> None:
    n = require_int(t.state, "n", BLANK, minimum=1, maximum=12)

    t.emit(f"Place {n} queens on a {n}×{n} board so that none attack each other.", 0)

    t.emit("Start with an empty board.", 0,
           board=[[0] * n for _ in range(n)], cell_states=blank_cells(n, n),
           queens=[None] * n, current=None, conflicts=[])

    if _solve(t, n, 0):
        rows = t.state["queens"]
        t.finish("Solution found: queens at " + ", ".join(
            f"({r + 1},{c + 1})" for c, r in enumerate(rows)) + ".", 1,
            current=None, conflicts=[], solved=True)
    else:
        t.finish(f"No solution exists for n = {n}.", 7, current=None, conflicts=[], solved=False)


def _attackers(queens: List[Optional[int]], row: int, col: int) -> List[List[int]]:
    out = []
    for c in range(col):
        r = queens[c]
        if r is not None and (r == row or abs(r - row) == col - c):
            out.append([r, c])
    return out


def _solve(t: Tracer, n: int, col: int) -> bool:
    if col == n:
        return True
    board  = t.state["board"]
    cells  = t.state["cell_states"]
    queens = t.state["queens"]
    for row in range(n):
        cells[row][col] = CellState.EXPLORING.value
        t.emit(f"Column {col + 1}: try row {row + 1}.", 3, current=[row, col], conflicts=[])
        attackers = _attackers(queens, row, col)
        if attackers:
            cells[row][col] = CellState.UNVISITED.value
            r, c = attackers[0]
            t.emit(f"({row + 1},{col + 1}) is attacked by the queen at ({r + 1},{c + 1}).", 3,
                   conflicts=attackers)
            continue

        board[row][col] = 1
        queens[col] = row
        cells[row][col] = CellState.PLACED.value
        t.emit(f"Safe: place a queen at ({row + 1},{col + 1}).", 4, conflicts=[])
        if _solve(t, n, col + 1):
            return True

        board[row][col] = 0
        queens[col] = None
        cells[row][col] = CellState.BACKTRACKED.value
        t.emit(f"No safe square in column {col + 2}: remove the queen at ({row + 1},{col + 1}).", 6,
               current=[row, col], conflicts=[])
    # leave the column clean for the next attempt one level up
    for row in range(n):
        cells[row][col] = CellState.UNVISITED.value
    return False
