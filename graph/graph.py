"""
graph.py — Generic Graph Shape & Derived Views
===============================================
Every graph algorithm receives the same plain-data shape in its
initial state:

    {
        "nodes": [{"label": "A", "position": [x, y]?}, …],
        "edges": [{"source": 0, "target": 1, "weight": 4?, "directed": True?, "capacity": 10?}, …],
    }

Nodes are addressed by list index.  This module turns that shape into
a Graph object once per run so algorithms never rebuild adjacency on
their own.

Responsibilities:
  1. Shape ⇄ object round-trip              (from_dict / to_dict)
  2. Adjacency queries                      (neighbours, arcs, edge_between)
  3. Seeded random generation               (generate_random, always connected)
  4. Import from an adjacency matrix        (Hamiltonian cycle input)
  5. Path upkeep helpers                    (update_path, reconstruct)

Design decisions:
  - Adjacency is built ONCE in __init__:  `_adj[u] → [(v, weight, edge_index)]`.
    An edge without `directed: true` is inserted in both directions.
  - Neighbour order follows edge-list order, which keeps traces
    deterministic for a given input.
"""

import math
import random
from typing import Any, Dict, List, Optional, Sequence, Tuple

from graph.edge import Edge
from graph.node import Node


class Graph:
    """
    Attributes:
        nodes : [Node]   — indexed by position
        edges : [Edge]   — indexed by position (edge-state lists follow this order)
        _adj  : {node_index: [(neighbour_index, weight, edge_index), …]}
    """

    def __init__(self, nodes: Sequence[Node], edges: Sequence[Edge]):
        self.nodes: List[Node] = list(nodes)
        self.edges: List[Edge] = list(edges)
        self._adj:  List[List[Tuple[int, float, int]]] = [[] for _ in self.nodes]
        for idx, e in enumerate(self.edges):
            self._adj[e.source].append((e.target, e.weight, idx))
            if not e.directed:
                self._adj[e.target].append((e.source, e.weight, idx))

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Graph":
        nodes = [Node.from_dict(nd, i) for i, nd in enumerate(data.get("nodes", []))]
        edges = [Edge.from_dict(ed) for ed in data.get("edges", [])]
        return cls(nodes, edges)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node: int) -> List[Tuple[int, float, int]]:
        """[(neighbour, weight, edge_index)] in edge-list order."""
        return self._adj[node]

    def arcs(self) -> List[Tuple[int, int, float, int]]:
        """Every traversable (u, v, weight, edge_index); undirected edges appear twice."""
        out = []
        for idx, e in enumerate(self.edges):
            out.append((e.source, e.target, e.weight, idx))
            if not e.directed:
                out.append((e.target, e.source, e.weight, idx))
        return out

    def edge_between(self, a: int, b: int) -> Optional[int]:
        """Index of the first edge usable from a to b, or None."""
        for nbr, _, idx in self._adj[a]:
            if nbr == b:
                return idx
        return None

    def label(self, node: int) -> str:
        return self.nodes[node].label

    def position(self, node: int) -> Optional[Tuple[float, float]]:
        return self.nodes[node].position

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def has_negative_edges(self) -> bool:
        return any(e.weight < 0 for e in self.edges)

    # ==================================================================
    # GENERATORS: Factory class-methods
    # ==================================================================
    @classmethod
    def generate_random(
        cls,
        num_nodes: int = 8,
        edge_probability: float = 0.3,
        directed: bool = False,
        weight_range: Tuple[int, int] = (1, 10),
        seed: Optional[int] = None,
        canvas_w: float = 600,
        canvas_h: float = 400,
    ) -> "Graph":
        """
        Erdős–Rényi style random graph with a spanning backbone, so the
        result is always connected.  Uses its own Random instance:
        the same seed always yields the same graph.
        """
        rng = random.Random(seed)
        margin = 40

        nodes = []
        for i in range(num_nodes):
            angle  = 2 * math.pi * i / num_nodes
            radius = min(canvas_w, canvas_h) * 0.35
            x = canvas_w / 2 + radius * math.cos(angle) + rng.uniform(-20, 20)
            y = canvas_h / 2 + radius * math.sin(angle) + rng.uniform(-20, 20)
            x = max(margin, min(canvas_w - margin, x))
            y = max(margin, min(canvas_h - margin, y))
            nodes.append(Node(label=str(i), position=(round(x, 1), round(y, 1))))

        edges: List[Edge] = []
        present = set()
        for i in range(num_nodes):
            for j in range(i + 1, num_nodes):
                if rng.random() < edge_probability:
                    edges.append(Edge(i, j, rng.randint(*weight_range), directed))
                    present.add(frozenset((i, j)))

        # spanning-tree backbone (directed backbone follows the shuffled order)
        order = list(range(num_nodes))
        rng.shuffle(order)
        for k in range(1, num_nodes):
            a, b = order[k - 1], order[k]
            if frozenset((a, b)) not in present:
                edges.append(Edge(a, b, rng.randint(*weight_range), directed))
                present.add(frozenset((a, b)))

        return cls(nodes, edges)

    @classmethod
    def from_adjacency_matrix(
        cls,
        matrix: Sequence[Sequence[float]],
        labels: Optional[Sequence[str]] = None,
        directed: bool = False,
        canvas_w: float = 600,
        canvas_h: float = 400,
    ) -> "Graph":
        """
        0 means "no edge"; any other value is the weight.  Undirected
        matrices only read the upper triangle.  Nodes are laid out on a circle.
        """
        n = len(matrix)
        labels = list(labels) if labels else [str(i) for i in range(n)]
        cx, cy = canvas_w / 2, canvas_h / 2
        radius = min(canvas_w, canvas_h) * 0.35
        nodes = []
        for i in range(n):
            angle = 2 * math.pi * i / n - math.pi / 2
            nodes.append(Node(
                label=labels[i],
                position=(round(cx + radius * math.cos(angle), 1), round(cy + radius * math.sin(angle), 1)),
            ))
        edges = []
        for i in range(n):
            cols = range(n) if directed else range(i + 1, n)
            for j in cols:
                if i != j and matrix[i][j]:
                    edges.append(Edge(i, j, matrix[i][j], directed))
        return cls(nodes, edges)

    def __repr__(self) -> str:
        return f"<Graph nodes={self.node_count()} edges={self.edge_count()}>"


# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------
def update_path(path: List[Dict[str, int]], source: int, target: int) -> None:
    """
    Record (source → target) as the best-known edge into `target`.
    Any stale edge into `target` is removed first, so every target
    appears at most once in the path list.
    """
    path[:] = [p for p in path if p["target"] != target]
    path.append({"source": source, "target": target})


def reconstruct(previous: Sequence[Optional[int]], target: int) -> List[int]:
    """Walk predecessor links back from target.  [] if unreachable."""
    out: List[int] = []
    cur: Optional[int] = target
    seen = set()
    while cur is not None and cur not in seen:
        seen.add(cur)
        out.append(cur)
        cur = previous[cur]
    out.reverse()
    return out


def path_edges(nodes: Sequence[int]) -> List[Dict[str, int]]:
    return [{"source": nodes[i], "target": nodes[i + 1]} for i in range(len(nodes) - 1)]
