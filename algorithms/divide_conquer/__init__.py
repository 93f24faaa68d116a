"""
algorithms/divide_conquer/
--------------------------
Split, solve the halves recursively, combine.  The tracer is passed
down the recursion; `depth` in the state records the current level.
"""
