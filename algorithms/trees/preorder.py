"""
preorder.py — Preorder Traversal
=================================
Node, left subtree, right subtree.  The order in which a tree would
be copied node by node.
"""

from typing import List, Optional

from algorithms.step import Tracer
from algorithms.trees.common import TreeNode, require_tree, sample_tree


PSEUDOCODE: List[str] = [
    "def preorder(node):",             # 0
    "    if node is None: return",     # 1
    "    visit(node)",                 # 2
    "    preorder(node.left)",         # 3
    "    preorder(node.right)",        # 4
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"tree": sample_tree()}


def preorder(t: Tracer) -> None:
    root = require_tree(t.state)

    t.emit("Preorder traversal: node, left subtree, right subtree.", 0)

    t.emit(f"Start at the root ({root['value']}).", 0,
           current=root["id"], visited=[], output=[], call_stack=[])
    _walk(t, root)
    t.finish("Preorder sequence: " + ", ".join(map(str, t.state["output"])) + ".", 0,
             current=None, call_stack=[])


def _walk(t: Tracer, node: Optional[TreeNode]) -> None:
    if node is None:
        return
    stack = t.state["call_stack"]
    stack.append(node["id"])
    t.state["visited"].append(node["id"])
    t.state["output"].append(node["value"])
    t.emit(f"Visit {node['value']}.", 2, current=node["id"])
    if node.get("left") is not None:
        t.emit(f"Descend into the left subtree of {node['value']}.", 3, current=node["id"])
        _walk(t, node["left"])
    if node.get("right") is not None:
        t.emit(f"Descend into the right subtree of {node['value']}.", 4, current=node["id"])
        _walk(t, node["right"])
    stack.pop()
