"""
dfs.py — Depth-First Search
============================
Recursive DFS.  The recursion carries the tracer explicitly; `stack`
in the state mirrors the call stack so the renderer can show how deep
the search currently is.  Tree edges go into `path`, and a
"backtrack" step is recorded each time a call returns.
"""

from typing import List, Optional

from algorithms.graphs.common import (
    fresh_colours, load_graph, names, random_connected, sample_unweighted, start_node,
)
from algorithms.step import Tracer
from graph import EdgeState, Graph, NodeState, update_path


PSEUDOCODE: List[str] = [
    "def DFS(graph, u):",                       # 0
    "    visited.add(u)",                       # 1
    "    for v in neighbours(u):",              # 2
    "        if v not in visited:",             # 3
    "            parent[v] ← u",                # 4
    "            DFS(graph, v)",                # 5
    "    // backtrack to caller",               # 6
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    shape = sample_unweighted() if seed is None else random_connected(seed, weighted=False)
    shape["start_node"] = 0
    return shape


def dfs(t: Tracer) -> None:
    g      = load_graph(t.state)
    source = start_node(t.state)

    t.emit(f"Depth-first search from {g.label(source)}.", 0)

    colours = fresh_colours(g)
    t.emit(f"Call DFS({g.label(source)}).", 0,
           node_states=colours["node_states"], edge_states=colours["edge_states"],
           stack=[], visited_nodes=[], previous=[None] * g.node_count(), path=[], current_node=None)

    _visit(t, g, source)

    order = t.state["visited_nodes"]
    summary = f"DFS complete. Visit order: {names(g, order)}."
    if len(order) < g.node_count():
        summary += f" {g.node_count() - len(order)} node(s) are unreachable."
    t.finish(summary, 6, current_node=None)


def _visit(t: Tracer, g: Graph, u: int) -> None:
    ns, es = t.state["node_states"], t.state["edge_states"]
    stack  = t.state["stack"]
    order  = t.state["visited_nodes"]

    stack.append(u)
    order.append(u)
    ns[u] = NodeState.CURRENT.value
    t.emit(f"Visit {g.label(u)} (depth {len(stack) - 1}).", 1, current_node=u)

    for v, _, idx in g.neighbours(u):
        if ns[v] != NodeState.UNVISITED.value:
            t.emit(f"{g.label(v)} already visited; skip.", 3, current_node=u)
            continue
        t.state["previous"][v] = u
        es[idx] = EdgeState.CHOSEN.value
        update_path(t.state["path"], u, v)
        ns[u] = NodeState.FRONTIER.value
        t.emit(f"Descend from {g.label(u)} to {g.label(v)}.", 5, current_node=u)
        _visit(t, g, v)
        ns[u] = NodeState.CURRENT.value
        t.emit(f"Back at {g.label(u)}.", 2, current_node=u)

    stack.pop()
    ns[u] = NodeState.VISITED.value
    t.emit(f"{g.label(u)} has no unvisited neighbours; backtrack.", 6,
           current_node=stack[-1] if stack else None)
