"""
astar.py — A* Search
=====================
f(n) = g(n) + h(n), where h is the Euclidean distance to the goal,
taken from node positions and divided by `heuristic_scale` so it stays
admissible for the sample weights.

Selection scans `open_set` in insertion order with strict `<` on f:
the first-encountered minimum wins ties.  Stops as soon as the goal
is selected.

Records a step for:
  1. Initialisation (h computed for every node, start in the open set)
  2. Each node selected from the open set
  3. Each neighbour considered (closed / no improvement / improved)
  4. Final: path found, or open set exhausted
"""

import math
from typing import List, Optional

from algorithms.formatting import fmt
from algorithms.graphs.common import (
    INF, fresh_colours, load_graph, make_shape, names, optional_node, require_non_negative, start_node,
)
from algorithms.step import Tracer
from algorithms.validate import BLANK_GRAPH, InvalidInput, require_number
from graph import EdgeState, Graph, NodeState, path_edges, reconstruct, update_path


PSEUDOCODE: List[str] = [
    "def AStar(graph, start, goal):",                      # 0
    "    open ← {start}; closed ← {}",                     # 1
    "    g[start] ← 0; f[start] ← h(start)",               # 2
    "    while open is not empty:",                        # 3
    "        current ← node in open with lowest f",        # 4
    "        if current = goal: return path",              # 5
    "        move current from open to closed",            # 6
    "        for each neighbour n of current:",            # 7
    "            if n in closed: continue",                # 8
    "            tentative ← g[current] + w(current, n)",  # 9
    "            if n not in open or tentative < g[n]:",   # 10
    "                cameFrom[n] ← current",               # 11
    "                g[n] ← tentative; f[n] ← g[n] + h(n)",  # 12
    "    return failure",                                  # 13
]

DEFAULT_SCALE = 40


def build_initial_state(seed: Optional[int] = None) -> dict:
    shape = make_shape(
        ["S", "A", "B", "C", "D", "E", "F", "G"],
        [(0, 1, 3), (0, 2, 2), (1, 3, 3), (1, 4, 5), (2, 4, 4), (2, 5, 3),
         (3, 6, 4), (4, 6, 2), (4, 5, 2), (5, 7, 6), (6, 7, 4)],
        positions=[(100, 150), (200, 75), (200, 225), (300, 50),
                   (300, 150), (300, 250), (400, 100), (500, 150)],
    )
    shape.update(start_node=0, end_node=7, heuristic_scale=DEFAULT_SCALE)
    return shape


def heuristic(g: Graph, node: int, goal: int, scale: float) -> float:
    a, b = g.position(node), g.position(goal)
    if a is None or b is None:
        return 0.0
    return math.hypot(a[0] - b[0], a[1] - b[1]) / scale


def astar(t: Tracer) -> None:
    g      = load_graph(t.state, weighted=True)
    source = start_node(t.state)
    goal   = optional_node(t.state, "end_node")
    if goal is None:
        raise InvalidInput("A* needs an 'end_node' to search for.", BLANK_GRAPH)
    require_non_negative(g, "A* search")
    scale = DEFAULT_SCALE
    if t.state.get("heuristic_scale") is not None:
        scale = require_number(t.state, "heuristic_scale", BLANK_GRAPH)
        if scale <= 0:
            raise InvalidInput("'heuristic_scale' must be positive.", BLANK_GRAPH)
    n = g.node_count()

    t.emit(f"A* search from {g.label(source)} to {g.label(goal)}.", 0)

    colours = fresh_colours(g)
    ns, es  = colours["node_states"], colours["edge_states"]
    h       = [round(heuristic(g, v, goal, scale), 2) for v in range(n)]
    g_score:  List[float]         = [INF] * n
    f_score:  List[float]         = [INF] * n
    previous: List[Optional[int]] = [None] * n
    open_set:   List[int] = [source]
    closed_set: List[int] = []
    path:       List[dict] = []
    g_score[source] = 0
    f_score[source] = h[source]
    ns[source] = NodeState.FRONTIER.value
    t.emit(f"Open set = {{{g.label(source)}}}, g = 0, f = h = {fmt(h[source])}.", 2,
           complexity=f"h({g.label(source)}) = {fmt(h[source])}",
           node_states=ns, edge_states=es, heuristic=h, g_score=g_score, f_score=f_score,
           previous=previous, open_set=open_set, closed_set=closed_set, path=path, current_node=None)

    while open_set:
        current, best = open_set[0], f_score[open_set[0]]
        for v in open_set[1:]:
            if f_score[v] < best:
                current, best = v, f_score[v]
        ns[current] = NodeState.CURRENT.value
        t.emit(f"Pick {g.label(current)} from the open set: lowest f = {fmt(best)}.", 4,
               current_node=current)

        if current == goal:
            route = reconstruct(previous, goal)
            for node in route:
                ns[node] = NodeState.PATH.value
            t.finish(f"Goal {g.label(goal)} reached. Path {names(g, route)} with cost {fmt(g_score[goal])}.",
                     5, current_node=None, shortest_path=route, route_edges=path_edges(route))
            return

        open_set.remove(current)
        closed_set.append(current)
        for v, w, idx in g.neighbours(current):
            if v in closed_set:
                t.emit(f"{g.label(v)} is already closed; skip.", 8)
                continue
            tentative = g_score[current] + w
            if v not in open_set or tentative < g_score[v]:
                previous[v] = current
                g_score[v] = tentative
                f_score[v] = round(tentative + h[v], 2)
                if v not in open_set:
                    open_set.append(v)
                update_path(path, current, v)
                ns[v] = NodeState.FRONTIER.value
                es[idx] = EdgeState.RELAXED.value
                t.emit(f"Update {g.label(v)}: g = {fmt(tentative)}, h = {fmt(h[v])}, "
                       f"f = {fmt(f_score[v])}.", 12)
            else:
                if es[idx] == EdgeState.DEFAULT.value:
                    es[idx] = EdgeState.IGNORED.value
                t.emit(f"Path to {g.label(v)} through {g.label(current)} costs {fmt(tentative)} "
                       f"≥ g = {fmt(g_score[v])}; keep the old one.", 10)
        ns[current] = NodeState.VISITED.value
        t.emit(f"{g.label(current)} moves to the closed set.", 6, current_node=None)

    t.finish(f"Open set is empty: no path from {g.label(source)} to {g.label(goal)}.", 13,
             current_node=None, shortest_path=[], route_edges=[])
