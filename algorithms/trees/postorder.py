"""
postorder.py — Postorder Traversal
===================================
Left subtree, right subtree, node.  Children are always finished before
their parent, the order used to free or evaluate a tree.
"""

from typing import List, Optional

from algorithms.step import Tracer
from algorithms.trees.common import TreeNode, require_tree, sample_tree


PSEUDOCODE: List[str] = [
    "def postorder(node):",            # 0
    "    if node is None: return",     # 1
    "    postorder(node.left)",        # 2
    "    postorder(node.right)",       # 3
    "    visit(node)",                 # 4
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"tree": sample_tree()}


def postorder(t: Tracer) -> None:
    root = require_tree(t.state)

    t.emit("Postorder traversal: left subtree, right subtree, node.", 0)

    t.emit(f"Start at the root ({root['value']}).", 0,
           current=root["id"], visited=[], output=[], call_stack=[])
    _walk(t, root)
    t.finish("Postorder sequence: " + ", ".join(map(str, t.state["output"])) + ".", 0,
             current=None, call_stack=[])


def _walk(t: Tracer, node: Optional[TreeNode]) -> None:
    if node is None:
        return
    stack = t.state["call_stack"]
    stack.append(node["id"])
    t.emit(f"At {node['value']}: finish the left subtree first.", 2, current=node["id"])
    _walk(t, node.get("left"))
    t.emit(f"At {node['value']}: now the right subtree.", 3, current=node["id"])
    _walk(t, node.get("right"))
    t.state["visited"].append(node["id"])
    t.state["output"].append(node["value"])
    t.emit(f"Both subtrees done: visit {node['value']}.", 4, current=node["id"])
    stack.pop()
