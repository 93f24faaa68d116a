"""
algorithms/dynamic_programming/
-------------------------------
Tabulation algorithms.  The working state carries the table at its
current fill level; every cell write is its own step, base cases are
seeded by explicit steps first, and problems with a reconstructible
answer finish with a traceback phase.
"""
