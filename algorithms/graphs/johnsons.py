"""
johnsons.py — Johnson's Algorithm (All-Pairs, sparse graphs)
=============================================================
  1. Add a virtual vertex q joined to every node by a 0-weight edge.
  2. Bellman–Ford from q gives potentials h(v); an edge that still
     relaxes on the extra pass means a negative cycle, and the run stops.
  3. Reweight: w'(u, v) = w(u, v) + h(u) - h(v) ≥ 0.
  4. Dijkstra from every source on w', then undo the reweighting:
     d(u, v) = d'(u, v) - h(u) + h(v).

`phase` names the current stage; each stage gets its own titled steps.
"""

from typing import List, Optional

from algorithms.formatting import fmt
from algorithms.graphs.common import INF, load_graph, make_shape
from algorithms.step import Tracer
from graph import Graph


PSEUDOCODE: List[str] = [
    "def Johnson(graph):",                                 # 0
    "    add vertex q with edges q→v of weight 0",         # 1
    "    h ← BellmanFord(graph + q, q)",                   # 2
    "    if negative cycle: return NEGATIVE CYCLE",        # 3
    "    for each edge (u, v): w'(u,v) ← w + h[u] - h[v]",  # 4
    "    for each u in V:",                                # 5
    "        d' ← Dijkstra(graph, u) using w'",            # 6
    "        for each v: D[u][v] ← d'[v] - h[u] + h[v]",   # 7
    "    return D",                                        # 8
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return make_shape(["0", "1", "2", "3", "4", "5"], [
        (0, 1, 3), (0, 2, 2), (1, 2, -2), (1, 3, 1), (2, 4, 4), (3, 4, -3), (3, 5, 2), (4, 5, 2),
    ], directed=True)


def johnsons(t: Tracer) -> None:
    g = load_graph(t.state, weighted=True)
    n = g.node_count()
    arcs = g.arcs()

    t.emit(f"Johnson's algorithm on {n} nodes and {len(arcs)} directed edge(s).", 0)

    # -- phase 1: potentials ------------------------------------------------
    h: List[float] = [0] * n
    t.emit("Add virtual vertex q with a 0-weight edge to every node; h(v) starts at 0.", 1,
           title="Bellman–Ford from q", phase="bellman_ford", potentials=h, current_edge=None)
    for rnd in range(1, n + 1):
        changed = False
        for u, v, w, idx in arcs:
            if h[u] + w < h[v]:
                old = h[v]
                h[v] = h[u] + w
                changed = True
                t.emit(f"Round {rnd}: relax {g.label(u)}→{g.label(v)}: h = {fmt(h[u])} + {fmt(w)} = "
                       f"{fmt(h[v])} < {fmt(old)}.", 2, current_edge=idx)
        if not changed:
            break
    t.emit("Extra pass: look for an edge that still relaxes.", 3,
           title="Negative-cycle check", current_edge=None)
    for u, v, w, idx in arcs:
        if h[u] + w < h[v]:
            t.finish(f"Negative cycle detected at edge {g.label(u)}→{g.label(v)}: "
                     f"all-pairs distances are undefined.", 3, current_edge=idx, has_negative_cycle=True)
            return

    # -- phase 2: reweight ---------------------------------------------------
    reweighted: List[Optional[float]] = [None] * g.edge_count()
    t.emit("Potentials fixed: h = [" + ", ".join(fmt(x) for x in h) + "]. Reweight every edge.", 4,
           title="Reweight", phase="reweight", reweighted=reweighted)
    for idx, e in enumerate(g.edges):
        reweighted[idx] = e.weight + h[e.source] - h[e.target]
        t.emit(f"w'({g.label(e.source)},{g.label(e.target)}) = {fmt(e.weight)} + {fmt(h[e.source])} - "
               f"{fmt(h[e.target])} = {fmt(reweighted[idx])}.", 4, current_edge=idx)

    # -- phase 3: Dijkstra from every source ---------------------------------
    matrix: List[List[float]] = [[INF] * n for _ in range(n)]
    t.emit("Run Dijkstra from every node on the non-negative weights.", 5,
           title="Dijkstra per source", phase="dijkstra", distance_matrix=matrix, current_edge=None)
    adj = _reweighted_adjacency(g, h)
    for src in range(n):
        dist = _dijkstra(t, g, adj, src)
        for v in range(n):
            if dist[v] != INF:
                matrix[src][v] = dist[v] - h[src] + h[v]
        t.emit(f"Row {g.label(src)}: undo the reweighting, D[{g.label(src)}][v] = d'(v) - h({g.label(src)}) + h(v).",
               7, current_source=src, dijkstra_distances=None)

    t.finish("No negative cycle. All-pairs shortest distances are in the matrix.", 8,
             phase="done", current_source=None, has_negative_cycle=False)


def _reweighted_adjacency(g: Graph, h: List[float]):
    """w' per arc; the reverse arc of an undirected edge gets its own value."""
    adj: List[List[tuple]] = [[] for _ in range(g.node_count())]
    for u, v, w, idx in g.arcs():
        adj[u].append((v, w + h[u] - h[v], idx))
    return adj


def _dijkstra(t: Tracer, g: Graph, adj, src: int) -> List[float]:
    n = g.node_count()
    dist: List[float] = [INF] * n
    dist[src] = 0
    done: List[bool] = [False] * n
    t.emit(f"Dijkstra from {g.label(src)}.", 6, current_source=src, dijkstra_distances=dist)
    while True:
        u, best = None, INF
        for v in range(n):
            if not done[v] and dist[v] < best:
                u, best = v, dist[v]
        if u is None:
            return dist
        done[u] = True
        for v, w, idx in adj[u]:
            if not done[v] and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                t.emit(f"From {g.label(src)}: relax {g.label(u)}→{g.label(v)}, d'({g.label(v)}) = {fmt(dist[v])}.",
                       6, current_edge=idx)
