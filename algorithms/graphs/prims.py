"""
prims.py — Prim's Minimum Spanning Tree
========================================
Grows one tree from `start_node`.  `key[v]` is the lightest edge
joining v to the tree; the scan for the next vertex uses strict `<`,
so the first minimum wins ties.  `path` holds the current best
connecting edge per outside vertex; it is replaced whenever key[v]
drops.
"""

from typing import List, Optional

from algorithms.formatting import fmt
from algorithms.graphs.common import (
    INF, fresh_colours, listing, load_graph, random_connected, sample_mst, start_node,
)
from algorithms.step import Tracer
from graph import EdgeState, NodeState, update_path


PSEUDOCODE: List[str] = [
    "def Prim(graph, root):",                          # 0
    "    key[v] ← ∞ for all v; key[root] ← 0",         # 1
    "    while some vertex is outside the tree:",      # 2
    "        u ← outside vertex with minimum key",     # 3
    "        if key[u] = ∞: graph is disconnected",    # 4
    "        add u (and edge parent[u]–u) to tree",    # 5
    "        for (v, w) in neighbours(u):",            # 6
    "            if v outside and w < key[v]:",        # 7
    "                key[v] ← w; parent[v] ← u",       # 8
    "    return tree",                                 # 9
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    shape = sample_mst() if seed is None else random_connected(seed, num_nodes=7)
    shape["start_node"] = 0
    return shape


def prims(t: Tracer) -> None:
    g    = load_graph(t.state, weighted=True)
    root = start_node(t.state)
    n    = g.node_count()

    t.emit(f"Prim's algorithm from {g.label(root)}.", 0)

    colours = fresh_colours(g)
    ns, es  = colours["node_states"], colours["edge_states"]
    key:    List[float]         = [INF] * n
    parent: List[Optional[int]] = [None] * n
    via:    List[Optional[int]] = [None] * n
    in_mst: List[int]           = []
    mst:    List[dict]          = []
    path:   List[dict]          = []
    key[root] = 0
    total = 0
    t.emit(f"key[{g.label(root)}] = 0, all other keys ∞.", 1,
           node_states=ns, edge_states=es, keys=key, parent=parent, in_mst=in_mst,
           mst_edges=mst, path=path, total_weight=total, current_node=None)

    while len(in_mst) < n:
        u, best = None, INF
        for v in range(n):
            if v not in in_mst and key[v] < best:
                u, best = v, key[v]
        if u is None:
            outside = [v for v in range(n) if v not in in_mst]
            t.finish(f"Graph is disconnected: {listing(g, outside)} cannot be reached. "
                     f"Spanning tree of the reachable part has weight {fmt(total)}.", 4,
                     current_node=None, connected=False)
            return

        in_mst.append(u)
        ns[u] = NodeState.VISITED.value
        if parent[u] is not None:
            mst.append({"source": parent[u], "target": u, "weight": key[u]})
            es[via[u]] = EdgeState.CHOSEN.value
            total += key[u]
            t.emit(f"Add {g.label(u)} via {g.label(parent[u])}–{g.label(u)} (w={fmt(key[u])}); "
                   f"total weight {fmt(total)}.", 5, current_node=u, total_weight=total)
        else:
            t.emit(f"Start the tree at {g.label(u)}.", 5, current_node=u)

        for v, w, idx in g.neighbours(u):
            if v in in_mst:
                continue
            if w < key[v]:
                old = key[v]
                key[v] = w
                parent[v] = u
                if via[v] is not None and es[via[v]] == EdgeState.ACTIVE.value:
                    es[via[v]] = EdgeState.IGNORED.value
                via[v] = idx
                es[idx] = EdgeState.ACTIVE.value
                ns[v] = NodeState.FRONTIER.value
                update_path(path, u, v)
                t.emit(f"Edge {g.label(u)}–{g.label(v)} (w={fmt(w)}) beats key {fmt(old)}: "
                       f"key[{g.label(v)}] = {fmt(w)}.", 8)
            else:
                t.emit(f"Edge {g.label(u)}–{g.label(v)} (w={fmt(w)}) is not lighter than key "
                       f"{fmt(key[v])}.", 7)

    t.finish(f"Minimum spanning tree complete: {len(mst)} edges, total weight {fmt(total)}.", 9,
             current_node=None, connected=True)
