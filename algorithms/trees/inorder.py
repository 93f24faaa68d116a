"""
inorder.py — Inorder Traversal
===============================
Left subtree, node, right subtree.  On a BST this yields the values in
ascending order.  `call_stack` lists the ids of the active recursive calls.
"""

from typing import List, Optional

from algorithms.step import Tracer
from algorithms.trees.common import TreeNode, require_tree, sample_tree


PSEUDOCODE: List[str] = [
    "def inorder(node):",              # 0
    "    if node is None: return",     # 1
    "    inorder(node.left)",          # 2
    "    visit(node)",                 # 3
    "    inorder(node.right)",         # 4
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"tree": sample_tree()}


def inorder(t: Tracer) -> None:
    root = require_tree(t.state)

    t.emit("Inorder traversal: left subtree, node, right subtree.", 0)

    t.emit(f"Start at the root ({root['value']}).", 0,
           current=root["id"], visited=[], output=[], call_stack=[])
    _walk(t, root)
    t.finish("Inorder sequence: " + ", ".join(map(str, t.state["output"])) + ".", 0,
             current=None, call_stack=[])


def _walk(t: Tracer, node: Optional[TreeNode]) -> None:
    if node is None:
        return
    stack = t.state["call_stack"]
    stack.append(node["id"])
    t.emit(f"At {node['value']}: go left first.", 2, current=node["id"])
    _walk(t, node.get("left"))
    t.state["visited"].append(node["id"])
    t.state["output"].append(node["value"])
    t.emit(f"Visit {node['value']}.", 3, current=node["id"])
    t.emit(f"At {node['value']}: go right.", 4, current=node["id"])
    _walk(t, node.get("right"))
    stack.pop()
