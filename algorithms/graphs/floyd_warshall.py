"""
floyd_warshall.py — Floyd–Warshall (All-Pairs Shortest Paths)
===============================================================
The signature "matrix algorithm".  The state carries the full N×N
distance matrix at every step so a renderer can draw it as a live grid.

Structure:
  for k in nodes:          ← "intermediate" node
      for i in nodes:
          for j in nodes:
              if dist[i][k] + dist[k][j] < dist[i][j]:
                  dist[i][j] = dist[i][k] + dist[k][j]

Records a step for:
  1. Initialisation (edge list → matrix)
  2. Each (i, j) comparison where the detour through k is finite
     (pairs with an ∞ leg cannot improve and are skipped silently)
  3. End of each k-round
  4. Negative-cycle check on the diagonal, then the final matrix
"""

from typing import List, Optional

from algorithms.formatting import fmt
from algorithms.graphs.common import INF, load_graph, make_shape
from algorithms.step import Tracer
from graph import Graph


PSEUDOCODE: List[str] = [
    "def FloydWarshall(graph):",                   # 0
    "    dist ← adjacency matrix",                 # 1
    "    next ← initialise next-hop matrix",       # 2
    "    for k in 0 … n-1:",                       # 3
    "        for i in 0 … n-1:",                   # 4
    "            for j in 0 … n-1:",               # 5
    "                if dist[i][k]+dist[k][j]",    # 6
    "                      < dist[i][j]:",         # 7
    "                    dist[i][j] = …",          # 8
    "                    next[i][j] = next[i][k]", # 9
    "    if some dist[v][v] < 0: NEGATIVE CYCLE",  # 10
    "    return dist, next",                       # 11
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return make_shape(["0", "1", "2", "3", "4"], [
        (0, 1, 3), (0, 2, 8), (1, 2, 4), (1, 3, 1), (2, 4, 7), (3, 2, -5), (3, 4, 6),
    ], directed=True)


def initial_matrix(g: Graph):
    n = g.node_count()
    dist: List[List[float]]          = [[INF] * n for _ in range(n)]
    nxt:  List[List[Optional[int]]]  = [[None] * n for _ in range(n)]
    for i in range(n):
        dist[i][i] = 0
        nxt[i][i] = i
    for u, v, w, _ in g.arcs():
        if w < dist[u][v]:
            dist[u][v] = w
            nxt[u][v] = v
    return dist, nxt


def floyd_warshall(t: Tracer) -> None:
    g = load_graph(t.state, weighted=True)
    n = g.node_count()

    t.emit(f"Floyd–Warshall on {n} nodes: shortest paths between every pair.", 0)

    dist, nxt = initial_matrix(g)
    t.emit("Initialise the matrix: 0 on the diagonal, edge weights where edges exist, ∞ elsewhere.", 1,
           complexity=f"O(V³) = {n ** 3} relaxation checks",
           distance_matrix=dist, next_hop=nxt, k=None, i=None, j=None)

    for k in range(n):
        t.emit(f"Allow {g.label(k)} as an intermediate node.", 3,
               title=f"k = {g.label(k)}", k=k, i=None, j=None)
        for i in range(n):
            if dist[i][k] == INF:
                continue
            for j in range(n):
                if dist[k][j] == INF:
                    continue
                via = dist[i][k] + dist[k][j]
                if via < dist[i][j]:
                    old = dist[i][j]
                    dist[i][j] = via
                    nxt[i][j] = nxt[i][k]
                    t.emit(f"dist[{g.label(i)}][{g.label(j)}]: {fmt(dist[i][k])} + {fmt(dist[k][j])} = "
                           f"{fmt(via)} < {fmt(old)}, route through {g.label(k)}.", 8, i=i, j=j)
                else:
                    t.emit(f"dist[{g.label(i)}][{g.label(j)}]: via {g.label(k)} = {fmt(via)} "
                           f"≥ {fmt(dist[i][j])}, keep.", 6, i=i, j=j)
        t.emit(f"Round k = {g.label(k)} complete.", 3, i=None, j=None)

    t.emit("Check the diagonal for negative values.", 10, title="Negative-cycle check", k=None)
    bad = [v for v in range(n) if dist[v][v] < 0]
    if bad:
        t.finish(f"Negative cycle detected through {', '.join(g.label(v) for v in bad)}: "
                 f"shortest paths are undefined.", 10, negative_cycle_nodes=bad, has_negative_cycle=True)
        return
    routes = [
        {"source": i, "target": j, "nodes": matrix_path(nxt, i, j)}
        for i in range(n) for j in range(n) if i != j and dist[i][j] != INF
    ]
    t.finish("No negative cycle. The matrix now holds every shortest-path distance.", 11,
             routes=routes, has_negative_cycle=False)


def matrix_path(nxt: List[List[Optional[int]]], i: int, j: int) -> List[int]:
    """Node sequence i → … → j from the next-hop matrix ([] if unreachable)."""
    if nxt[i][j] is None:
        return []
    route = [i]
    while i != j:
        i = nxt[i][j]
        route.append(i)
        if len(route) > len(nxt):
            return []
    return route
