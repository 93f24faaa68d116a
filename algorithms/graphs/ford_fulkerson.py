"""
ford_fulkerson.py — Maximum Flow (Edmonds–Karp)
================================================
Ford–Fulkerson with breadth-first augmenting paths.  Every edge is a
directed arc source → target with a capacity (`capacity`, falling back
to `weight`).  The residual network has a forward arc with
capacity - flow and a backward arc with flow.

Records a step for:
  1. Each BFS discovery in the residual network
  2. The augmenting path found and its bottleneck
  3. Each flow update along that path
  4. The final cut: no augmenting path remains

State:
  • flow             – flow per edge (edge-list order)
  • residual         – capacity - flow per edge
  • augmenting_path  – [{"source", "target"}] of the current path
  • max_flow         – running total
"""

from collections import deque
from typing import List, Optional

from algorithms.formatting import fmt
from algorithms.graphs.common import fresh_colours, listing, load_graph, make_shape, start_node
from algorithms.step import Tracer
from algorithms.validate import BLANK_GRAPH, InvalidInput
from graph import EdgeState, Graph, NodeState


PSEUDOCODE: List[str] = [
    "def EdmondsKarp(graph, s, t):",                       # 0
    "    flow[e] ← 0 for every edge",                      # 1
    "    while BFS finds an s→t path P in the residual:",  # 2
    "        b ← min residual capacity along P",           # 3
    "        for each arc (u, v) in P:",                   # 4
    "            push b along (u, v)",                     # 5
    "        max_flow += b",                               # 6
    "    return max_flow",                                 # 7
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    shape = make_shape(["S", "A", "B", "C", "D", "T"], [
        (0, 1, 10), (0, 2, 8), (1, 2, 2), (1, 3, 5), (2, 3, 4),
        (2, 4, 10), (3, 5, 10), (4, 3, 6), (4, 5, 10),
    ], directed=True)
    for e in shape["edges"]:
        e["capacity"] = e.pop("weight")
    shape["start_node"] = 0
    shape["end_node"]   = 5
    return shape


def _capacity(g: Graph, idx: int) -> float:
    e = g.edges[idx]
    return e.capacity if e.capacity is not None else e.weight


def ford_fulkerson(t: Tracer) -> None:
    g    = load_graph(t.state, capacities=True)
    n    = g.node_count()
    src  = start_node(t.state)
    sink = start_node(t.state, "end_node", default=n - 1)
    if src == sink:
        raise InvalidInput("Source and sink must be different nodes.", BLANK_GRAPH)
    if any(_capacity(g, i) < 0 for i in range(g.edge_count())):
        raise InvalidInput("Capacities must be non-negative.", BLANK_GRAPH)

    t.emit(f"Maximum flow from {g.label(src)} to {g.label(sink)}.", 0)

    colours  = fresh_colours(g)
    ns, es   = colours["node_states"], colours["edge_states"]
    flow     = [0] * g.edge_count()
    residual = [_capacity(g, i) for i in range(g.edge_count())]
    ns[src], ns[sink] = NodeState.SOURCE.value, NodeState.TARGET.value
    total = 0
    t.emit("Start with zero flow on every edge.", 1,
           node_states=ns, edge_states=es, flow=flow, residual=residual,
           augmenting_path=[], bottleneck=None, max_flow=total, iteration=0)

    # residual arcs: (v, edge_index, forward?)
    out: List[List[tuple]] = [[] for _ in range(n)]
    for idx, e in enumerate(g.edges):
        out[e.source].append((e.target, idx, True))
        out[e.target].append((e.source, idx, False))

    iteration = 0
    while True:
        iteration += 1
        parent = _bfs(t, g, out, flow, src, sink, iteration)
        if parent[sink] is None:
            break

        arcs = []
        v = sink
        while v != src:
            u, idx, forward = parent[v]
            arcs.append((u, v, idx, forward))
            v = u
        arcs.reverse()
        bottleneck = min(
            _capacity(g, idx) - flow[idx] if forward else flow[idx]
            for _, _, idx, forward in arcs
        )
        nodes = [src] + [v for _, v, _, _ in arcs]
        for idx in range(g.edge_count()):
            es[idx] = EdgeState.DEFAULT.value
        for _, _, idx, _ in arcs:
            es[idx] = EdgeState.ACTIVE.value
        t.emit(f"Augmenting path {listing(g, nodes)} with bottleneck {fmt(bottleneck)}.", 3,
               title=f"Augmentation {iteration}",
               augmenting_path=[{"source": u, "target": v} for u, v, _, _ in arcs],
               bottleneck=bottleneck)

        for u, v, idx, forward in arcs:
            if forward:
                flow[idx] += bottleneck
                t.emit(f"Push {fmt(bottleneck)} along {g.label(u)}→{g.label(v)}: "
                       f"flow {fmt(flow[idx])}/{fmt(_capacity(g, idx))}.", 5)
            else:
                flow[idx] -= bottleneck
                t.emit(f"Cancel {fmt(bottleneck)} on {g.label(v)}→{g.label(u)}: "
                       f"flow {fmt(flow[idx])}/{fmt(_capacity(g, idx))}.", 5)
            residual[idx] = _capacity(g, idx) - flow[idx]
            es[idx] = EdgeState.CHOSEN.value if residual[idx] == 0 else EdgeState.RELAXED.value
        total += bottleneck
        t.emit(f"Total flow is now {fmt(total)}.", 6, max_flow=total)

    reachable = [v for v in range(n) if ns[v] == NodeState.VISITED.value or v == src]
    for idx in range(g.edge_count()):
        es[idx] = EdgeState.CHOSEN.value if flow[idx] > 0 else EdgeState.DEFAULT.value
    t.finish(f"No augmenting path remains. Maximum flow = {fmt(total)} "
             f"(source side of the minimum cut: {listing(g, reachable)}).", 7,
             augmenting_path=[], bottleneck=None, min_cut=reachable)


def _bfs(t: Tracer, g: Graph, out, flow: List[float], src: int, sink: int, iteration: int):
    ns = t.state["node_states"]
    for v in range(g.node_count()):
        if v not in (src, sink):
            ns[v] = NodeState.UNVISITED.value
    parent: List[Optional[tuple]] = [None] * g.node_count()
    seen = {src}
    queue = deque([src])
    t.emit(f"Breadth-first search for an augmenting path from {g.label(src)}.", 2,
           iteration=iteration, augmenting_path=[], bottleneck=None)
    while queue:
        u = queue.popleft()
        for v, idx, forward in out[u]:
            room = _capacity(g, idx) - flow[idx] if forward else flow[idx]
            if v in seen or room <= 0:
                continue
            seen.add(v)
            parent[v] = (u, idx, forward)
            if v == sink:
                t.emit(f"Reached {g.label(sink)} from {g.label(u)} (residual {fmt(room)}).", 2)
                return parent
            ns[v] = NodeState.VISITED.value
            queue.append(v)
            kind = "forward" if forward else "backward"
            t.emit(f"Discover {g.label(v)} from {g.label(u)} on a {kind} arc (residual {fmt(room)}).", 2)
    return parent
