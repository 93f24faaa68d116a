"""
bellman_ford.py — Bellman–Ford Algorithm
=========================================
The single-source shortest-path algorithm that handles NEGATIVE edge
weights and detects negative cycles.

Structure:
  • Up to V-1 rounds of relaxing every edge (stops early once a round
    changes nothing).
  • One extra "detector" pass: any edge that still relaxes proves a
    negative cycle reachable from the source.

Records a step for:
  1. Each successful relaxation (dist improved)
  2. Each failed relaxation (no improvement, shown as IGNORED)
  3. Start and end of every round
  4. The detector pass and its verdict

State:
  • round              – current round number (1-indexed)
  • distances          – current distance per node
  • has_negative_cycle – set on the terminal step
"""

from typing import List, Optional

from algorithms.formatting import fmt
from algorithms.graphs.common import INF, LETTERS, fresh_colours, load_graph, make_shape, start_node
from algorithms.step import Tracer
from graph import EdgeState, Graph, NodeState, update_path


PSEUDOCODE: List[str] = [
    "def BellmanFord(graph, source):",             # 0
    "    dist ← {v: ∞ for v in V}",                # 1
    "    dist[source] ← 0",                        # 2
    "    for i in 1 … |V|-1:",                     # 3
    "        for each edge (u, v, w):",            # 4
    "            if dist[u] + w < dist[v]:",       # 5
    "                dist[v] ← dist[u] + w",       # 6
    "                parent[v] ← u",               # 7
    "    for each edge (u, v, w):",                # 8
    "        if dist[u] + w < dist[v]:",           # 9
    "            return NEGATIVE CYCLE",           # 10
    "    return dist, parent",                     # 11
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    shape = make_shape(LETTERS[:7], [
        (0, 1, 6), (0, 2, 5), (0, 3, 5), (1, 4, -1), (2, 1, -2),
        (2, 4, 1), (3, 2, -2), (3, 5, -1), (4, 6, 3), (5, 6, 3),
    ], directed=True)
    shape["start_node"] = 0
    return shape


def bellman_ford(t: Tracer) -> None:
    g      = load_graph(t.state, weighted=True)
    source = start_node(t.state)
    V      = g.node_count()
    arcs   = g.arcs()

    t.emit(f"Bellman–Ford from {g.label(source)} over {len(arcs)} directed edge(s).", 0)

    colours  = fresh_colours(g)
    ns, es   = colours["node_states"], colours["edge_states"]
    dist:     List[float]         = [INF] * V
    previous: List[Optional[int]] = [None] * V
    path:     List[dict]          = []
    dist[source] = 0
    ns[source] = NodeState.SOURCE.value
    t.emit(f"dist[{g.label(source)}] = 0, all others = ∞. Up to {V - 1} rounds.", 2,
           node_states=ns, edge_states=es, distances=dist, previous=previous, path=path,
           round=0, current_edge=None)

    for round_idx in range(1, V):
        changed = False
        t.emit(f"Round {round_idx} of {V - 1}: scan all edges.", 3, round=round_idx, current_edge=None)
        for u, v, w, idx in arcs:
            if dist[u] == INF:
                continue
            candidate = dist[u] + w
            if candidate < dist[v]:
                old = dist[v]
                dist[v] = candidate
                previous[v] = u
                changed = True
                update_path(path, u, v)
                es[idx] = EdgeState.RELAXED.value
                if v != source:
                    ns[v] = NodeState.FRONTIER.value
                t.emit(f"Relax {g.label(u)}→{g.label(v)} (w={fmt(w)}): {fmt(dist[u])} + {fmt(w)} = "
                       f"{fmt(candidate)} < {fmt(old)}, update dist[{g.label(v)}].", 6,
                       current_edge=idx)
            else:
                t.emit(f"Edge {g.label(u)}→{g.label(v)} (w={fmt(w)}): {fmt(dist[u])} + {fmt(w)} = "
                       f"{fmt(candidate)} ≥ {fmt(dist[v])}, no change.", 5, current_edge=idx)
        if not changed:
            t.emit(f"Round {round_idx}: no relaxation, distances have converged.", 3, current_edge=None)
            break
        t.emit(f"Round {round_idx} complete.", 3, current_edge=None)

    _detect(t, g, arcs, dist)


def _detect(t: Tracer, g: Graph, arcs, dist: List[float]) -> None:
    t.emit("Detector pass: one more scan over every edge.", 8,
           title="Negative-cycle check", current_edge=None)
    for u, v, w, idx in arcs:
        if dist[u] != INF and dist[u] + w < dist[v]:
            t.state["edge_states"][idx] = EdgeState.ACTIVE.value
            t.finish(f"Negative cycle detected: edge {g.label(u)}→{g.label(v)} still relaxes "
                     f"({fmt(dist[u])} + {fmt(w)} < {fmt(dist[v])}). Shortest paths are undefined.",
                     10, current_edge=idx, has_negative_cycle=True)
            return
    ns = t.state["node_states"]
    for v in range(g.node_count()):
        if dist[v] != INF:
            ns[v] = NodeState.VISITED.value
    t.finish("No negative cycle. Final distances: "
             + ", ".join(f"{g.label(v)}={fmt(dist[v])}" for v in range(g.node_count())) + ".",
             11, current_edge=None, has_negative_cycle=False)
