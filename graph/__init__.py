"""
graph/
-----
Generic graph shape shared by every graph-family algorithm.

    from graph import Graph, Node, Edge
    from graph import NodeState, EdgeState
    from graph import update_path, reconstruct, path_edges
"""

from graph.node  import Node,  NodeState
from graph.edge  import Edge,  EdgeState
from graph.graph import Graph, update_path, reconstruct, path_edges

__all__ = [
    "Node",      "NodeState",
    "Edge",      "EdgeState",
    "Graph",
    "update_path", "reconstruct", "path_edges",
]
