"""
algorithms/graphs/
------------------
Traversal, shortest-path, spanning-tree, ordering and flow algorithms
over the generic graph shape (see graph/graph.py).  Shared sample
graphs and input checks live in common.py.
"""
