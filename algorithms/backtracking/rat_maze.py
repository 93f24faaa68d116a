"""
rat_maze.py — Rat in a Maze
============================
The rat starts top-left and must reach bottom-right moving only down
or right (down is tried first).  `maze` holds 1 for open cells and 0
for walls; `solution` marks the cells on the current route.

Random mazes block about 30 % of the cells, then reopen the first row
and the last column, so a route always exists.
"""

import random
from typing import List, Optional

from algorithms.backtracking.common import CellState, blank_cells
from algorithms.step import Tracer
from algorithms.validate import BLANK_GRID, require_grid


PSEUDOCODE: List[str] = [
    "def solve(x, y):",                                # 0
    "    if (x, y) is the exit: mark it, return true",  # 1
    "    if maze[x][y] is open:",                      # 2
    "        solution[x][y] ← 1",                      # 3
    "        if solve(x + 1, y): return true",         # 4
    "        if solve(x, y + 1): return true",         # 5
    "        solution[x][y] ← 0   (backtrack)",        # 6
    "    return false",                                # 7
]

MOVES = [(1, 0, "down"), (0, 1, "right")]


def build_initial_state(seed: Optional[int] = None, size: int = 5) -> dict:
    rng = random.Random(seed)
    maze = [[1] * size for _ in range(size)]
    for i in range(size):
        for j in range(size):
            if (i, j) in ((0, 0), (size - 1, size - 1)):
                continue
            if rng.random() < 0.3:
                maze[i][j] = 0
    for i in range(size):
        maze[0][i] = 1
        maze[i][size - 1] = 1
    return {"grid": maze}


def rat_maze(t: Tracer) -> None:
    maze = require_grid(t.state, "grid", BLANK_GRID)
    rows, cols = len(maze), len(maze[0])

    t.emit(f"Find a route through the {rows}×{cols} maze from the top-left to the bottom-right.", 0)

    t.emit("The rat starts at (1,1) and may move down or right.", 0,
           solution=[[0] * cols for _ in range(rows)], cell_states=blank_cells(rows, cols),
           current=None, route=[])

    if _solve(t, maze, 0, 0):
        t.finish(f"Exit reached in {len(t.state['route'])} cells.", 1, current=None, solved=True)
    else:
        t.finish("No solution exists: every route is blocked.", 7, current=None, solved=False)


def _solve(t: Tracer, maze, x: int, y: int) -> bool:
    rows, cols = len(maze), len(maze[0])
    sol   = t.state["solution"]
    cells = t.state["cell_states"]
    route = t.state["route"]
    if x >= rows or y >= cols:
        return False

    cells[x][y] = CellState.EXPLORING.value
    t.emit(f"Explore ({x + 1},{y + 1}).", 2, current=[x, y])
    if not maze[x][y]:
        cells[x][y] = CellState.BACKTRACKED.value
        t.emit(f"({x + 1},{y + 1}) is a wall.", 2)
        return False

    sol[x][y] = 1
    route.append([x, y])
    cells[x][y] = CellState.PLACED.value
    if x == rows - 1 and y == cols - 1:
        t.emit(f"({x + 1},{y + 1}) is the exit.", 1)
        return True
    t.emit(f"({x + 1},{y + 1}) is open: add it to the route.", 3)

    for dx, dy, name in MOVES:
        nx, ny = x + dx, y + dy
        if nx >= rows or ny >= cols:
            continue
        t.emit(f"From ({x + 1},{y + 1}) try moving {name}.", 4 if name == "down" else 5, current=[x, y])
        if _solve(t, maze, nx, ny):
            return True

    sol[x][y] = 0
    route.pop()
    cells[x][y] = CellState.BACKTRACKED.value
    t.emit(f"Dead end at ({x + 1},{y + 1}): backtrack.", 6, current=[x, y])
    return False
