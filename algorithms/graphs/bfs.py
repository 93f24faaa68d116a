"""
bfs.py — Breadth-First Search
==============================
FIFO queue.  Visits nodes layer by layer from `start_node`.  Each
node is discovered once, through the edge that first reached it; those
discovery edges form the BFS tree held in `path`.

Records a step for:
  1. Enqueue of the source
  2. Each dequeue
  3. Each neighbour inspected (discovered or already seen)
  4. Each node finished
  5. Final step: visit order, plus the hop-shortest route to `end_node`
     when the state names one

State:
  • queue          – FIFO contents
  • visited_nodes  – dequeue order
  • previous       – BFS-tree parent per node
"""

from collections import deque
from typing import List, Optional

from algorithms.graphs.common import (
    fresh_colours, load_graph, names, optional_node, random_connected, sample_unweighted, start_node,
)
from algorithms.step import Tracer
from graph import EdgeState, NodeState, path_edges, reconstruct, update_path


PSEUDOCODE: List[str] = [
    "def BFS(graph, source):",                  # 0
    "    queue ← [source]",                     # 1
    "    visited ← {source}",                   # 2
    "    while queue is not empty:",            # 3
    "        u ← queue.dequeue()",              # 4
    "        for v in neighbours(u):",          # 5
    "            if v not in visited:",         # 6
    "                visited.add(v)",           # 7
    "                parent[v] ← u",            # 8
    "                queue.enqueue(v)",         # 9
    "    return parent",                        # 10
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    shape = sample_unweighted() if seed is None else random_connected(seed, weighted=False)
    shape["start_node"] = 0
    return shape


def bfs(t: Tracer) -> None:
    g      = load_graph(t.state)
    source = start_node(t.state)
    goal   = optional_node(t.state, "end_node")
    n      = g.node_count()

    t.emit(f"Breadth-first search from {g.label(source)}.", 0)

    colours  = fresh_colours(g)
    ns, es   = colours["node_states"], colours["edge_states"]
    queue    = deque([source])
    seen     = {source}
    order:    List[int]           = []
    previous: List[Optional[int]] = [None] * n
    path:     List[dict]          = []
    ns[source] = NodeState.FRONTIER.value

    t.emit(f"Enqueue the source {g.label(source)} and mark it discovered.", 1,
           node_states=ns, edge_states=es, queue=list(queue), visited_nodes=order,
           previous=previous, path=path, current_node=None)

    while queue:
        u = queue.popleft()
        order.append(u)
        ns[u] = NodeState.CURRENT.value
        t.emit(f"Dequeue {g.label(u)}.", 4, current_node=u, queue=list(queue))

        for v, _, idx in g.neighbours(u):
            if v in seen:
                t.emit(f"{g.label(v)} was already discovered; skip edge {g.label(u)}–{g.label(v)}.", 6)
                continue
            seen.add(v)
            previous[v] = u
            queue.append(v)
            ns[v]   = NodeState.FRONTIER.value
            es[idx] = EdgeState.CHOSEN.value
            update_path(path, u, v)
            t.emit(f"Discover {g.label(v)} via {g.label(u)}; enqueue it.", 9, queue=list(queue))

        ns[u] = NodeState.VISITED.value
        t.emit(f"{g.label(u)} is fully explored.", 3, current_node=None)

    summary = f"BFS complete. Visit order: {names(g, order)}."
    if goal is not None:
        route = reconstruct(previous, goal) if goal in seen else []
        if route:
            for node in route:
                ns[node] = NodeState.PATH.value
            summary += f" Fewest-hop route to {g.label(goal)}: {names(g, route)} ({len(route) - 1} hops)."
        else:
            summary += f" {g.label(goal)} is unreachable from {g.label(source)}."
        t.finish(summary, 10, shortest_path=route, route_edges=path_edges(route))
        return

    if len(order) < n:
        summary += f" {n - len(order)} node(s) are unreachable from {g.label(source)}."
    t.finish(summary, 10)
