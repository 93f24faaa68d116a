"""
hamiltonian_cycle.py — Hamiltonian Cycle
=========================================
The input is an adjacency matrix; the graph shape (nodes on a circle,
one edge per 1 in the upper triangle) is derived from it so the
renderer can draw the search.  Vertex 0 is fixed as the start and the
remaining positions are filled by backtracking over vertices in index
order.
"""

from typing import List, Optional

from algorithms.backtracking.common import CellState
from algorithms.graphs.common import fresh_colours, names
from algorithms.step import Tracer
from algorithms.validate import InvalidInput, require_grid
from graph import EdgeState, Graph, NodeState, path_edges


PSEUDOCODE: List[str] = [
    "def hamiltonian(graph):",                             # 0
    "    path ← [0]",                                      # 1
    "    def solve(pos):",                                 # 2
    "        if pos = n: return edge(path[-1], path[0])",  # 3
    "        for v in 1 … n-1:",                           # 4
    "            if adjacent(path[-1], v) and v ∉ path:",  # 5
    "                path.append(v)",                      # 6
    "                if solve(pos + 1): return true",      # 7
    "                path.pop()   (backtrack)",            # 8
    "        return false",                                # 9
]

SAMPLE = [
    [0, 1, 0, 1, 0],
    [1, 0, 1, 1, 1],
    [0, 1, 0, 0, 1],
    [1, 1, 0, 0, 1],
    [0, 1, 1, 1, 0],
]

BLANK = {"matrix": [], "nodes": [], "edges": []}


def build_initial_state(seed: Optional[int] = None) -> dict:
    matrix = [row[:] for row in SAMPLE]
    shape = Graph.from_adjacency_matrix(matrix).to_dict()
    shape["matrix"] = matrix
    return shape


def hamiltonian_cycle(t: Tracer) -> None:
    matrix = require_grid(t.state, "matrix", BLANK, square=True)
    if any(matrix[i][j] != matrix[j][i] for i in range(len(matrix)) for j in range(len(matrix))):
        raise InvalidInput("'matrix' must be symmetric.", BLANK)
    g = Graph.from_adjacency_matrix(matrix)
    n = g.node_count()

    t.emit(f"Search for a cycle through all {n} vertices.", 0)

    colours = fresh_colours(g)
    colours["node_states"][0] = NodeState.SOURCE.value
    shape = g.to_dict()
    t.emit(f"Start the path at {g.label(0)}.", 1, nodes=shape["nodes"], edges=shape["edges"],
           node_states=colours["node_states"], edge_states=colours["edge_states"],
           vertex_states=[CellState.PLACED.value] + [CellState.UNVISITED.value] * (n - 1),
           route=[0], path=[], current_node=0)

    if _solve(t, g, 1):
        route = t.state["route"]
        closing = g.edge_between(route[-1], route[0])
        t.state["edge_states"][closing] = EdgeState.CHOSEN.value
        t.finish(f"Hamiltonian cycle found: {names(g, route + [route[0]])}.", 3,
                 path=path_edges(route + [route[0]]), current_node=None, solved=True)
    else:
        t.finish("No solution exists: the graph has no Hamiltonian cycle.", 9,
                 current_node=None, solved=False)


def _solve(t: Tracer, g: Graph, pos: int) -> bool:
    n     = g.node_count()
    route = t.state["route"]
    ns    = t.state["node_states"]
    es    = t.state["edge_states"]
    vs    = t.state["vertex_states"]
    last  = route[-1]

    if pos == n:
        closing = g.edge_between(last, route[0])
        if closing is None:
            t.emit(f"All vertices used, but {g.label(last)} is not adjacent to {g.label(route[0])}.", 3)
            return False
        t.emit(f"All vertices used and {g.label(last)}–{g.label(route[0])} closes the cycle.", 3)
        return True

    for v in range(1, n):
        idx = g.edge_between(last, v)
        if idx is None or v in route:
            continue
        vs[v] = CellState.EXPLORING.value
        t.emit(f"Explore {g.label(last)} → {g.label(v)}.", 5, current_node=v)
        route.append(v)
        vs[v] = CellState.PLACED.value
        ns[v] = NodeState.PATH.value
        es[idx] = EdgeState.CHOSEN.value
        t.emit(f"Add {g.label(v)} at position {pos}: {names(g, route)}.", 6, path=path_edges(route))
        if _solve(t, g, pos + 1):
            return True
        route.pop()
        vs[v] = CellState.BACKTRACKED.value
        ns[v] = NodeState.UNVISITED.value
        es[idx] = EdgeState.IGNORED.value
        t.emit(f"Remove {g.label(v)}: it does not lead to a cycle.", 8,
               current_node=last, path=path_edges(route))
    return False
