"""
algorithms/greedy/
------------------
Sort-then-choose algorithms: each step either takes the locally best
candidate or explains why it is rejected.
"""
