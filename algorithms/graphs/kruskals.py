"""
kruskals.py — Kruskal's Minimum Spanning Tree
==============================================
Edges sorted by weight (stable, so equal weights keep input order);
union-find with path compression and union by rank decides whether an
edge joins two components or would close a cycle.

State:
  • sorted_edges  – edge indices in processing order
  • parent / rank – the union-find arrays
  • mst_edges     – accepted edges [{"source", "target", "weight"}]
  • total_weight  – running MST weight
"""

from typing import List, Optional

from algorithms.formatting import fmt
from algorithms.graphs.common import fresh_colours, load_graph, random_connected, sample_mst
from algorithms.step import Tracer
from graph import EdgeState, NodeState


PSEUDOCODE: List[str] = [
    "def Kruskal(graph):",                             # 0
    "    sort edges by weight",                        # 1
    "    make-set(v) for every v",                     # 2
    "    for (u, v, w) in sorted edges:",              # 3
    "        if find(u) ≠ find(v):",                   # 4
    "            add (u, v) to MST; union(u, v)",      # 5
    "        else: skip (would form a cycle)",         # 6
    "    return MST",                                  # 7
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return sample_mst() if seed is None else random_connected(seed, num_nodes=7)


def _find(parent: List[int], x: int) -> int:
    root = x
    while parent[root] != root:
        root = parent[root]
    while parent[x] != root:
        parent[x], x = root, parent[x]
    return root


def kruskals(t: Tracer) -> None:
    g = load_graph(t.state, weighted=True)
    n = g.node_count()

    t.emit(f"Kruskal's algorithm on {n} nodes and {g.edge_count()} edges.", 0)

    order = sorted(range(g.edge_count()), key=lambda i: g.edges[i].weight)
    colours = fresh_colours(g)
    ns, es  = colours["node_states"], colours["edge_states"]
    t.emit("Sort edges by weight: " + ", ".join(
        f"{g.label(g.edges[i].source)}{g.label(g.edges[i].target)}({fmt(g.edges[i].weight)})" for i in order) + ".",
        1, node_states=ns, edge_states=es, sorted_edges=order)

    parent = list(range(n))
    rank   = [0] * n
    mst: List[dict] = []
    total = 0
    t.emit("Every node starts in its own set.", 2,
           parent=parent, rank=rank, mst_edges=mst, total_weight=total, current_edge=None)

    for idx in order:
        e = g.edges[idx]
        u, v = e.source, e.target
        es[idx] = EdgeState.ACTIVE.value
        ru, rv = _find(parent, u), _find(parent, v)
        t.emit(f"Consider {g.label(u)}–{g.label(v)} (w={fmt(e.weight)}): "
               f"find({g.label(u)}) = {g.label(ru)}, find({g.label(v)}) = {g.label(rv)}.", 4,
               current_edge=idx)
        if ru == rv:
            es[idx] = EdgeState.REJECTED.value
            t.emit(f"{g.label(u)} and {g.label(v)} are already connected: skip, it would form a cycle.", 6)
            continue

        if rank[ru] < rank[rv]:
            ru, rv = rv, ru
        parent[rv] = ru
        if rank[ru] == rank[rv]:
            rank[ru] += 1
        mst.append({"source": u, "target": v, "weight": e.weight})
        total += e.weight
        es[idx] = EdgeState.CHOSEN.value
        ns[u] = ns[v] = NodeState.VISITED.value
        t.emit(f"Add {g.label(u)}–{g.label(v)} to the tree; total weight {fmt(total)}.", 5,
               total_weight=total)
        if len(mst) == n - 1:
            break

    if len(mst) < n - 1:
        components = len({_find(parent, v) for v in range(n)})
        t.finish(f"Graph is disconnected: spanning forest of {components} trees, "
                 f"{len(mst)} edges, total weight {fmt(total)}.", 7,
                 current_edge=None, connected=False)
        return
    t.finish(f"Minimum spanning tree complete: {len(mst)} edges, total weight {fmt(total)}.", 7,
             current_edge=None, connected=True)
