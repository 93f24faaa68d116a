"""
algorithms/sorting/
-------------------
Comparison and distribution sorts over `{"array": [...]}`.
Each module exports PSEUDOCODE, build_initial_state(seed) and its
trace function.
"""
