"""
sudoku.py — Sudoku Solver
==========================
Fills empty cells (0) in row-major order, trying digits 1-9 and
checking row, column and 3×3 box before each placement.
"""

from typing import List, Optional

from algorithms.backtracking.common import CellState, blank_cells
from algorithms.step import Tracer
from algorithms.validate import InvalidInput, require_grid


PSEUDOCODE: List[str] = [
    "def solve(board):",                               # 0
    "    find the next empty cell (r, c)",             # 1
    "    if none: return true",                        # 2
    "    for d in 1 … 9:",                             # 3
    "        if d is valid at (r, c):",                # 4
    "            board[r][c] ← d",                     # 5
    "            if solve(board): return true",        # 6
    "            board[r][c] ← 0   (backtrack)",       # 7
    "    return false",                                # 8
]

PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

BLANK = {"board": []}


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"board": [row[:] for row in PUZZLE]}


def _conflict(board, r: int, c: int, d: int) -> Optional[str]:
    if d in board[r]:
        return f"row {r + 1}"
    if any(board[i][c] == d for i in range(9)):
        return f"column {c + 1}"
    br, bc = 3 * (r // 3), 3 * (c // 3)
    if any(board[i][j] == d for i in range(br, br + 3) for j in range(bc, bc + 3)):
        return "its 3×3 box"
    return None


def sudoku(t: Tracer) -> None:
    board = require_grid(t.state, "board", BLANK, square=True)
    if len(board) != 9 or any(not isinstance(v, int) or not 0 <= v <= 9 for row in board for v in row):
        raise InvalidInput("'board' must be 9×9 with digits 0-9 (0 = empty).", BLANK)
    for r in range(9):
        for c in range(9):
            d = board[r][c]
            if d:
                board[r][c] = 0
                clash = _conflict(board, r, c, d)
                board[r][c] = d
                if clash:
                    raise InvalidInput(f"Given {d} at ({r + 1},{c + 1}) repeats in {clash}.", BLANK)

    empties = sum(v == 0 for row in board for v in row)
    t.emit(f"Solve the puzzle: {empties} empty cells.", 0)

    cells = blank_cells(9, 9)
    for r in range(9):
        for c in range(9):
            if board[r][c]:
                cells[r][c] = CellState.PLACED.value
    t.emit("Given digits are fixed.", 0, cell_states=cells, given=[[v != 0 for v in row] for row in board],
           current=None, candidate=None)

    if _solve(t, board):
        t.finish("Puzzle solved.", 2, current=None, candidate=None, solved=True)
    else:
        t.finish("No solution exists for this puzzle.", 8, current=None, candidate=None, solved=False)


def _solve(t: Tracer, board) -> bool:
    cells = t.state["cell_states"]
    spot = next(((r, c) for r in range(9) for c in range(9) if board[r][c] == 0), None)
    if spot is None:
        return True
    r, c = spot
    cells[r][c] = CellState.EXPLORING.value
    t.emit(f"Next empty cell: ({r + 1},{c + 1}).", 1, current=[r, c], candidate=None)
    for d in range(1, 10):
        if _conflict(board, r, c, d):
            continue
        board[r][c] = d
        cells[r][c] = CellState.PLACED.value
        t.emit(f"Place {d} at ({r + 1},{c + 1}).", 5, current=[r, c], candidate=d)
        if _solve(t, board):
            return True
        board[r][c] = 0
        cells[r][c] = CellState.BACKTRACKED.value
        t.emit(f"{d} at ({r + 1},{c + 1}) leads to a dead end: backtrack.", 7, current=[r, c], candidate=None)
    cells[r][c] = CellState.UNVISITED.value
    return False
