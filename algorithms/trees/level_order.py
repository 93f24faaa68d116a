"""
level_order.py — Level-Order Traversal
=======================================
Breadth-first over the tree with a FIFO queue of node ids; `level`
records the depth of the node being visited.
"""

from collections import deque
from typing import List, Optional

from algorithms.step import Tracer
from algorithms.trees.common import require_tree, sample_tree


PSEUDOCODE: List[str] = [
    "def levelOrder(root):",                   # 0
    "    queue ← [root]",                      # 1
    "    while queue not empty:",              # 2
    "        node ← queue.popleft()",          # 3
    "        visit(node)",                     # 4
    "        enqueue node.left, node.right",   # 5
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"tree": sample_tree()}


def level_order(t: Tracer) -> None:
    root = require_tree(t.state)

    t.emit("Level-order traversal: visit the tree one level at a time.", 0)

    queue = deque([(root, 0)])
    t.emit(f"Queue the root ({root['value']}).", 1,
           current=None, visited=[], output=[], queue=[root["id"]], level=0)
    while queue:
        node, depth = queue.popleft()
        t.state["visited"].append(node["id"])
        t.state["output"].append(node["value"])
        t.emit(f"Dequeue and visit {node['value']} (level {depth}).", 4,
               current=node["id"], level=depth, queue=[n["id"] for n, _ in queue])
        children = [c for c in (node.get("left"), node.get("right")) if c is not None]
        if children:
            queue.extend((c, depth + 1) for c in children)
            t.emit(f"Enqueue the children of {node['value']}: "
                   + ", ".join(str(c["value"]) for c in children) + ".", 5,
                   queue=[n["id"] for n, _ in queue])

    t.finish("Level-order sequence: " + ", ".join(map(str, t.state["output"])) + ".", 2,
             current=None, queue=[])
