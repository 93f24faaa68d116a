"""
huffman.py — Huffman Coding
============================
Phase 1 repeatedly merges the two lightest trees from a min-heap
(ties broken by creation order).  Phase 2 walks the finished tree,
appending 0 for a left edge and 1 for a right edge, and assigns each
leaf its code.

State:
  • forest  – trees still in the heap, lightest first
  • merging – ids of the two trees being merged
  • tree    – the finished tree (phase 2)
  • codes   – symbol → bit string
"""

import heapq
from typing import Any, Dict, List, Optional

from algorithms.step import Tracer
from algorithms.validate import InvalidInput, require_pairs


PSEUDOCODE: List[str] = [
    "def huffman(symbols):",                           # 0
    "    heap ← one leaf per symbol, keyed by freq",   # 1
    "    while |heap| > 1:",                           # 2
    "        a ← pop(); b ← pop()",                    # 3
    "        push(node(a.freq + b.freq, a, b))",       # 4
    "    assign(root, '')",                            # 5
    "    def assign(node, code):",                     # 6
    "        leaf: codes[node.symbol] ← code",         # 7
    "        else: assign(left, code+'0'); assign(right, code+'1')",  # 8
]

BLANK = {"symbols": []}

SAMPLE = [("A", 5), ("B", 9), ("C", 12), ("D", 13), ("E", 16), ("F", 45)]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"symbols": [{"symbol": s, "freq": f} for s, f in SAMPLE]}


def huffman(t: Tracer) -> None:
    symbols = require_pairs(t.state, "symbols", ("freq",), BLANK)
    if any(s["freq"] <= 0 for s in symbols):
        raise InvalidInput("Frequencies must be positive.", BLANK)

    t.emit(f"Build a Huffman code for {len(symbols)} symbols.", 0)

    heap: List[tuple] = []
    for i, s in enumerate(symbols):
        leaf = {"id": i, "symbol": str(s.get("symbol", i)), "value": s["freq"], "left": None, "right": None}
        heapq.heappush(heap, (s["freq"], i, leaf))
    next_id = len(symbols)
    t.emit("Push one leaf per symbol onto a min-heap.", 1, title="Build tree",
           forest=_forest(heap), merging=[], tree=None, codes={}, current=None, phase="merge")

    while len(heap) > 1:
        fa, _, a = heapq.heappop(heap)
        fb, _, b = heapq.heappop(heap)
        t.emit(f"Pop the two lightest: {_show(a)} and {_show(b)}.", 3,
               forest=_forest(heap), merging=[a["id"], b["id"]])
        node = {"id": next_id, "symbol": None, "value": fa + fb, "left": a, "right": b}
        heapq.heappush(heap, (fa + fb, next_id, node))
        next_id += 1
        t.emit(f"Merge them into a node of weight {fa + fb} and push it back.", 4,
               forest=_forest(heap), merging=[], current=node["id"])

    root = heap[0][2]
    codes: Dict[str, str] = {}
    t.emit(f"One tree left (weight {root['value']}). Assign codes: left = 0, right = 1.", 5,
           title="Assign codes", tree=root, forest=[], codes=codes, current=root["id"], phase="assign")
    if root["symbol"] is not None:
        codes[root["symbol"]] = "0"
        t.emit(f"Only one symbol: '{root['symbol']}' gets code 0.", 7, current=root["id"])
    else:
        _assign(t, t.state["tree"], "", codes)

    total_bits = sum(s["freq"] * len(codes[str(s.get("symbol", i))]) for i, s in enumerate(symbols))
    t.finish("Codes: " + ", ".join(f"{k}={v}" for k, v in codes.items())
             + f". Encoded length {total_bits} bits.", 5, current=None, phase="done", result=total_bits)


def _assign(t: Tracer, node: Dict[str, Any], code: str, codes: Dict[str, str]) -> None:
    if node["symbol"] is not None:
        codes[node["symbol"]] = code
        t.emit(f"Leaf '{node['symbol']}' (freq {node['value']}) gets code {code}.", 7, current=node["id"])
        return
    t.emit(f"Internal node {node['value']}: left adds 0, right adds 1.", 8, current=node["id"])
    _assign(t, node["left"], code + "0", codes)
    _assign(t, node["right"], code + "1", codes)


def _forest(heap: List[tuple]) -> List[Dict[str, Any]]:
    return [tree for _, _, tree in sorted(heap, key=lambda e: (e[0], e[1]))]


def _show(tree: Dict[str, Any]) -> str:
    return f"'{tree['symbol']}'({tree['value']})" if tree["symbol"] is not None else f"node({tree['value']})"
