"""
dijkstra.py — Dijkstra's Algorithm
===================================
Array-scan variant: each round picks the unvisited node with the
smallest finite distance.  The scan uses strict `<`, so on ties the
lowest-index node wins and the trace is deterministic.

Stops early once `end_node` (if given) is settled.

Records a step for:
  1. Initialisation (dist[source] = 0, all others ∞)
  2. Each node selected as the current minimum
  3. Each edge relaxation, whether it improves a distance or not
  4. Final: distances and the route to `end_node`
"""

from typing import List, Optional

from algorithms.graphs.common import (
    INF, fresh_colours, listing, load_graph, names, optional_node, random_connected,
    require_non_negative, sample_weighted, start_node,
)
from algorithms.step import Tracer
from algorithms.formatting import fmt
from graph import EdgeState, NodeState, path_edges, reconstruct, update_path


PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source):",                    # 0
    "    dist ← {v: ∞}; dist[source] ← 0",             # 1
    "    while some unvisited v has dist[v] < ∞:",     # 2
    "        u ← unvisited node with minimum dist",    # 3
    "        if u = goal: break",                      # 4
    "        mark u visited",                          # 5
    "        for (v, w) in neighbours(u):",            # 6
    "            if dist[u] + w < dist[v]:",           # 7
    "                dist[v] ← dist[u] + w",           # 8
    "                prev[v] ← u",                     # 9
    "    return dist, prev",                           # 10
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    shape = sample_weighted() if seed is None else random_connected(seed)
    shape["start_node"] = 0
    shape["end_node"] = len(shape["nodes"]) - 1
    return shape


def dijkstra(t: Tracer) -> None:
    g      = load_graph(t.state, weighted=True)
    source = start_node(t.state)
    goal   = optional_node(t.state, "end_node")
    require_non_negative(g, "Dijkstra's algorithm")
    n      = g.node_count()

    target_note = f" to {g.label(goal)}" if goal is not None else ""
    t.emit(f"Dijkstra's shortest paths from {g.label(source)}{target_note}.", 0)

    colours  = fresh_colours(g)
    ns, es   = colours["node_states"], colours["edge_states"]
    dist:     List[float]         = [INF] * n
    previous: List[Optional[int]] = [None] * n
    visited:  List[int]           = []
    path:     List[dict]          = []
    dist[source] = 0
    ns[source] = NodeState.FRONTIER.value
    t.emit(f"dist[{g.label(source)}] = 0, every other distance = ∞.", 1,
           node_states=ns, edge_states=es, distances=dist, previous=previous,
           visited_nodes=visited, path=path, current_node=None)

    while True:
        u, best = None, INF
        for v in range(n):
            if v not in visited and dist[v] < best:
                u, best = v, dist[v]
        if u is None:
            break

        ns[u] = NodeState.CURRENT.value
        t.emit(f"Select {g.label(u)}: smallest tentative distance {fmt(best)}.", 3, current_node=u)

        if u == goal:
            visited.append(u)
            ns[u] = NodeState.VISITED.value
            route = reconstruct(previous, goal)
            for node in route:
                ns[node] = NodeState.PATH.value
            t.finish(
                f"Reached {g.label(goal)}. Shortest path {names(g, route)} with cost {fmt(dist[goal])}.",
                4, current_node=None, shortest_path=route, route_edges=path_edges(route),
            )
            return

        visited.append(u)
        for v, w, idx in g.neighbours(u):
            if v in visited:
                continue
            candidate = dist[u] + w
            if candidate < dist[v]:
                old = dist[v]
                dist[v] = candidate
                previous[v] = u
                update_path(path, u, v)
                es[idx] = EdgeState.RELAXED.value
                ns[v] = NodeState.FRONTIER.value
                t.emit(f"Relax {g.label(u)}→{g.label(v)}: {fmt(dist[u])} + {fmt(w)} = {fmt(candidate)} "
                       f"< {fmt(old)}, update dist[{g.label(v)}].", 8)
            else:
                if es[idx] == EdgeState.DEFAULT.value:
                    es[idx] = EdgeState.IGNORED.value
                t.emit(f"Edge {g.label(u)}→{g.label(v)}: {fmt(dist[u])} + {fmt(w)} = {fmt(candidate)} "
                       f"≥ {fmt(dist[v])}, no change.", 7)
        ns[u] = NodeState.VISITED.value
        t.emit(f"{g.label(u)} is settled at distance {fmt(dist[u])}.", 5, current_node=None)

    if goal is not None:
        t.finish(f"No path from {g.label(source)} to {g.label(goal)}: it is unreachable.", 10,
                 current_node=None, shortest_path=[], route_edges=[])
        return
    unreachable = [v for v in range(n) if dist[v] == INF]
    summary = "All reachable nodes settled. Distances: " + ", ".join(
        f"{g.label(v)}={fmt(dist[v])}" for v in range(n)) + "."
    if unreachable:
        summary += f" Unreachable: {listing(g, unreachable)}."
    t.finish(summary, 10, current_node=None)
