"""
algorithms/searching/
---------------------
Searches over `{"array": [...], "target": x}`.  All but linear search
expect the array sorted ascending.
"""
