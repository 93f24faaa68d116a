"""
knights_tour.py — Knight's Tour
================================
Plain backtracking (no Warnsdorff ordering): from each square the
eight knight moves are tried in a fixed order.  The search is long, so
the registry caps this trace at 100 recorded steps; the final step
still reports the outcome.

State:
  • solution – move number per square, -1 if unvisited
  • current  – [row, col] of the knight
  • move_number
"""

from typing import List, Optional

from algorithms.backtracking.common import CellState, blank_cells
from algorithms.step import Tracer
from algorithms.validate import InvalidInput, require_int


PSEUDOCODE: List[str] = [
    "def solve(x, y, move):",                              # 0
    "    if move = n² - 1: return true",                   # 1
    "    for (dx, dy) in knight moves:",                   # 2
    "        (nx, ny) ← (x + dx, y + dy)",                 # 3
    "        if on board and unvisited:",                  # 4
    "            solution[nx][ny] ← move + 1",             # 5
    "            if solve(nx, ny, move + 1): return true",  # 6
    "            solution[nx][ny] ← -1   (backtrack)",     # 7
    "    return false",                                    # 8
]

X_MOVES = [2, 1, -1, -2, -2, -1, 1, 2]
Y_MOVES = [1, 2, 2, 1, -1, -2, -2, -1]

BLANK = {"size": 0, "solution": []}


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"size": 5, "start": [0, 0]}


def knights_tour(t: Tracer) -> None:
    n = require_int(t.state, "size", BLANK, minimum=1, maximum=8)
    start = t.state.get("start", [0, 0])
    if (not isinstance(start, list) or len(start) != 2
            or not all(isinstance(v, int) and 0 <= v < n for v in start)):
        raise InvalidInput("'start' must be [row, col] on the board.", BLANK)
    x, y = start

    t.emit(f"Knight's tour on a {n}×{n} board from ({x + 1},{y + 1}).", 0)

    solution = [[-1] * n for _ in range(n)]
    cells = blank_cells(n, n)
    solution[x][y] = 0
    cells[x][y] = CellState.PLACED.value
    t.emit(f"Place the knight on ({x + 1},{y + 1}) as move 0.", 5,
           solution=solution, cell_states=cells, current=[x, y], candidate=None, move_number=0)

    if _solve(t, n, x, y, 0):
        t.finish(f"Tour complete: all {n * n} squares visited exactly once.", 1,
                 candidate=None, solved=True)
    else:
        t.finish("No solution exists for this board.", 8, candidate=None, solved=False)


def _solve(t: Tracer, n: int, x: int, y: int, move: int) -> bool:
    if move == n * n - 1:
        return True
    sol   = t.state["solution"]
    cells = t.state["cell_states"]
    for dx, dy in zip(X_MOVES, Y_MOVES):
        nx, ny = x + dx, y + dy
        t.emit(f"From ({x + 1},{y + 1}) explore ({nx + 1},{ny + 1}).", 3,
               current=[x, y], candidate=[nx, ny], move_number=move)
        if not (0 <= nx < n and 0 <= ny < n and sol[nx][ny] == -1):
            continue
        sol[nx][ny] = move + 1
        cells[nx][ny] = CellState.PLACED.value
        t.emit(f"Place the knight on ({nx + 1},{ny + 1}) as move {move + 1}.", 5,
               current=[nx, ny], candidate=None, move_number=move + 1)
        if _solve(t, n, nx, ny, move + 1):
            return True
        sol[nx][ny] = -1
        cells[nx][ny] = CellState.BACKTRACKED.value
        t.emit(f"({nx + 1},{ny + 1}) leads nowhere: backtrack to ({x + 1},{y + 1}).", 7,
               current=[x, y], candidate=None, move_number=move)
    return False
