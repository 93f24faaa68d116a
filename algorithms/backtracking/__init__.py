"""
algorithms/backtracking/
------------------------
Depth-first searches that place, recurse and undo.  Each board cell
moves through CellState: unvisited → exploring → placed | backtracked.
Every descent and every undo is a step; exhaustive searches are bounded
by TraceLimits.search_limit.
"""
