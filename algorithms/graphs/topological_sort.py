"""
topological_sort.py — Kahn's Algorithm
=======================================
Every edge is read as source → target, whatever its `directed` flag.
Nodes with in-degree 0 enter a FIFO queue; removing a node lowers the
in-degree of its successors.  If the queue empties before every node
is output, the remaining nodes sit on a cycle.
"""

from collections import deque
from typing import List, Optional

from algorithms.graphs.common import fresh_colours, listing, load_graph, make_shape
from algorithms.step import Tracer
from graph import EdgeState, NodeState


PSEUDOCODE: List[str] = [
    "def TopologicalSort(graph):",                     # 0
    "    compute in_degree[v] for all v",              # 1
    "    queue ← all v with in_degree[v] = 0",         # 2
    "    while queue not empty:",                      # 3
    "        u ← queue.popleft(); order.append(u)",    # 4
    "        for v in successors(u):",                 # 5
    "            in_degree[v] -= 1",                   # 6
    "            if in_degree[v] = 0: queue.append(v)",  # 7
    "    if |order| < |V|: CYCLE DETECTED",            # 8
    "    return order",                                # 9
]

LABELS = ["A", "B", "C", "D", "E", "F", "G"]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return make_shape(LABELS, [
        (0, 1), (0, 2), (1, 3), (1, 4), (2, 4), (2, 5), (3, 6), (4, 6), (5, 6),
    ], directed=True)


def topological_sort(t: Tracer) -> None:
    g = load_graph(t.state)
    n = g.node_count()

    t.emit(f"Topological sort of {n} nodes using Kahn's algorithm.", 0)

    succ: List[List[tuple]] = [[] for _ in range(n)]
    in_degree = [0] * n
    for idx, e in enumerate(g.edges):
        succ[e.source].append((e.target, idx))
        in_degree[e.target] += 1
    colours = fresh_colours(g)
    ns, es  = colours["node_states"], colours["edge_states"]
    t.emit("In-degrees: " + ", ".join(f"{g.label(v)}={in_degree[v]}" for v in range(n)) + ".", 1,
           node_states=ns, edge_states=es, in_degree=in_degree, current_node=None)

    queue = deque(v for v in range(n) if in_degree[v] == 0)
    for v in queue:
        ns[v] = NodeState.FRONTIER.value
    order: List[int] = []
    t.emit(f"Queue the nodes with no incoming edges: {listing(g, queue) or 'none'}.", 2,
           queue=list(queue), order=order)

    while queue:
        u = queue.popleft()
        order.append(u)
        ns[u] = NodeState.CURRENT.value
        t.emit(f"Output {g.label(u)} (position {len(order)}).", 4,
               current_node=u, queue=list(queue))
        for v, idx in succ[u]:
            in_degree[v] -= 1
            es[idx] = EdgeState.CHOSEN.value
            if in_degree[v] == 0:
                queue.append(v)
                ns[v] = NodeState.FRONTIER.value
                t.emit(f"Remove {g.label(u)}→{g.label(v)}: in_degree[{g.label(v)}] = 0, enqueue it.", 7,
                       queue=list(queue))
            else:
                t.emit(f"Remove {g.label(u)}→{g.label(v)}: in_degree[{g.label(v)}] = {in_degree[v]}.", 6)
        ns[u] = NodeState.VISITED.value

    if len(order) < n:
        stuck = [v for v in range(n) if v not in order]
        t.finish(f"Cycle detected: {listing(g, stuck)} never reach in-degree 0, "
                 f"so no topological order exists.", 8,
                 current_node=None, has_cycle=True, cycle_nodes=stuck)
        return
    t.finish(f"Topological order: {listing(g, order)}.", 9, current_node=None, has_cycle=False)
