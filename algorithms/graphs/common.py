"""
Shared pieces of the graph family: sample graphs, input checks and
the node/edge colouring lists every graph trace carries.

Working-state keys common to the family:
    node_states  – one NodeState value per node
    edge_states  – one EdgeState value per edge (edge-list order)
    current_node – node being expanded (or None)
    path         – [{"source", "target"}] best-known edges, one per target
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from algorithms.validate import BLANK_GRAPH, InvalidInput, require_graph, require_node
from graph import EdgeState, Graph, NodeState

INF = float("inf")

LETTERS = "ABCDEFGH"


def make_shape(
    labels: Sequence[str],
    edges: Sequence[Tuple],
    directed: bool = False,
    positions: Optional[Sequence[Tuple[float, float]]] = None,
) -> Dict[str, Any]:
    """(u, v) or (u, v, w) tuples → generic graph shape."""
    nodes = []
    for i, label in enumerate(labels):
        node: Dict[str, Any] = {"label": label}
        if positions:
            node["position"] = list(positions[i])
        nodes.append(node)
    out = []
    for e in edges:
        edge: Dict[str, Any] = {"source": e[0], "target": e[1]}
        if len(e) > 2:
            edge["weight"] = e[2]
        if directed:
            edge["directed"] = True
        out.append(edge)
    return {"nodes": nodes, "edges": out}


# ---------------------------------------------------------------------------
# Sample graphs
# ---------------------------------------------------------------------------
SAMPLE_TOPOLOGY = [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (2, 6), (3, 7), (4, 7), (5, 7), (6, 7)]
SAMPLE_WEIGHTS  = [4, 3, 5, 2, 6, 1, 3, 7, 8, 4]


def sample_unweighted() -> Dict[str, Any]:
    """The 8-node A–H graph used by BFS / DFS."""
    return make_shape(LETTERS, SAMPLE_TOPOLOGY)


def sample_weighted() -> Dict[str, Any]:
    """Same topology with weights (Dijkstra)."""
    return make_shape(LETTERS, [(u, v, w) for (u, v), w in zip(SAMPLE_TOPOLOGY, SAMPLE_WEIGHTS)])


def sample_mst() -> Dict[str, Any]:
    """7-node undirected graph; its MST has 6 edges of total weight 39."""
    return make_shape(LETTERS[:7], [
        (0, 1, 7), (0, 3, 5), (1, 2, 8), (1, 3, 9), (1, 4, 7), (2, 4, 5),
        (3, 4, 15), (3, 5, 6), (4, 5, 8), (4, 6, 9), (5, 6, 11),
    ])


def random_connected(seed: Optional[int], num_nodes: int = 8, weighted: bool = True) -> Dict[str, Any]:
    shape = Graph.generate_random(num_nodes=num_nodes, edge_probability=0.3, seed=seed).to_dict()
    if not weighted:
        for e in shape["edges"]:
            e.pop("weight", None)
    return shape


# ---------------------------------------------------------------------------
# Input checks
# ---------------------------------------------------------------------------
def load_graph(state: Dict[str, Any], weighted: bool = False, capacities: bool = False) -> Graph:
    require_graph(state, weighted=weighted, capacities=capacities)
    return Graph.from_dict(state)


def start_node(state: Dict[str, Any], key: str = "start_node", default: Optional[int] = 0) -> int:
    if key not in state and default is not None:
        return default
    return require_node(state, key)


def optional_node(state: Dict[str, Any], key: str) -> Optional[int]:
    if state.get(key) is None:
        return None
    return require_node(state, key)


def require_non_negative(g: Graph, algorithm: str) -> None:
    if g.has_negative_edges():
        raise InvalidInput(f"{algorithm} requires non-negative edge weights.", BLANK_GRAPH)


# ---------------------------------------------------------------------------
# Colouring
# ---------------------------------------------------------------------------
def fresh_colours(g: Graph) -> Dict[str, List[str]]:
    return {
        "node_states": [NodeState.UNVISITED.value] * g.node_count(),
        "edge_states": [EdgeState.DEFAULT.value] * g.edge_count(),
    }


def names(g: Graph, nodes: Sequence[int]) -> str:
    return " → ".join(g.label(n) for n in nodes)


def listing(g: Graph, nodes: Sequence[int]) -> str:
    return ", ".join(g.label(n) for n in nodes)
