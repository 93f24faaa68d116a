"""Shared pieces of the backtracking family."""

from enum import Enum
from typing import List


class CellState(Enum):
    UNVISITED   = "unvisited"
    EXPLORING   = "exploring"    # candidate under test
    PLACED      = "placed"       # part of the partial solution
    BACKTRACKED = "backtracked"  # undone after a dead end


def blank_cells(rows: int, cols: int) -> List[List[str]]:
    return [[CellState.UNVISITED.value] * cols for _ in range(rows)]
