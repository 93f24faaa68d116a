"""
avl.py — AVL Tree Insert & Delete
==================================
A BST that keeps |height(left) - height(right)| ≤ 1 at every node.
After each insertion or deletion the heights on the way back up are
refreshed; an unbalanced node is fixed by one of four rotations
(LL, RR, LR, RL).  Rotated subtrees are re-attached to their parent
before the step is recorded, so every step shows a complete tree.

State:
  • tree      – nested dicts with "height"
  • operation – {"op", "value"} in progress
  • current   – id of the node being examined
  • rotation  – name of the last rotation (None between operations)
"""

from typing import Any, List, Optional

from algorithms.step import Tracer
from algorithms.trees.common import TreeNode, make_node, next_id, require_tree
from algorithms.validate import BLANK_TREE, require_numbers


PSEUDOCODE: List[str] = [
    "def insert(node, x):",                                    # 0
    "    if node is None: return new leaf",                    # 1
    "    recurse left or right by comparing x",                # 2
    "    node.height ← 1 + max(h(left), h(right))",            # 3
    "    b ← h(left) - h(right)",                              # 4
    "    if b > 1: LL → rotateRight; LR → rotateLeft, rotateRight",  # 5
    "    if b < -1: RR → rotateLeft; RL → rotateRight, rotateLeft",  # 6
    "def delete(node, x): BST delete, then rebalance upwards",  # 7
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"tree": None, "insert": [10, 20, 30, 15, 5, 25, 40], "delete": [20]}


def _h(node: Optional[TreeNode]) -> int:
    if node is None:
        return 0
    if node.get("height") is None:
        return 1 + max(_h(node.get("left")), _h(node.get("right")))
    return node["height"]


def _balance(node: TreeNode) -> int:
    return _h(node.get("left")) - _h(node.get("right"))


def _refresh(node: TreeNode) -> None:
    node["height"] = 1 + max(_h(node.get("left")), _h(node.get("right")))


class _Session:
    """Per-run bookkeeping: the tracer plus the next free node id."""

    def __init__(self, t: Tracer):
        self.t = t
        self.next_id = next_id(t.state["tree"])

    def attach(self, parent: Optional[TreeNode], side: Optional[str], node: Optional[TreeNode]) -> None:
        if parent is None:
            self.t.state["tree"] = node
        else:
            parent[side] = node


def avl(t: Tracer) -> None:
    require_tree(t.state, allow_empty=True)
    inserts = require_numbers(t.state, "insert", BLANK_TREE, allow_empty=True)
    deletes = require_numbers(t.state, "delete", BLANK_TREE, allow_empty=True)

    t.emit(f"AVL tree: insert {inserts}, then delete {deletes}.", 0)

    s = _Session(t)
    t.emit("Begin.", 0, operation=None, current=None, rotation=None)
    for x in inserts:
        t.emit(f"Insert {x}.", 0, title=f"Insert {x}", operation={"op": "insert", "value": x},
               current=None, rotation=None)
        _insert(s, t.state["tree"], None, None, x)
    for x in deletes:
        t.emit(f"Delete {x}.", 7, title=f"Delete {x}", operation={"op": "delete", "value": x},
               current=None, rotation=None)
        _delete(s, t.state["tree"], None, None, x)

    root = t.state["tree"]
    t.finish(f"Done. Tree height {_h(root)}; every balance factor is within [-1, 1].", 7,
             operation=None, current=None, rotation=None)


# ---------------------------------------------------------------------------
# Insert / delete
# ---------------------------------------------------------------------------
def _insert(s: _Session, node: Optional[TreeNode], parent, side, x: Any) -> bool:
    t = s.t
    if node is None:
        leaf = make_node(s.next_id, x)
        leaf["height"] = 1
        s.next_id += 1
        s.attach(parent, side, leaf)
        where = "as the root" if parent is None else f"as the {side} child of {parent['value']}"
        t.emit(f"Insert {x} {where}.", 1, current=leaf["id"])
        return True
    if x == node["value"]:
        t.emit(f"{x} is already present; duplicates are ignored.", 2, current=node["id"])
        return False
    child_side = "left" if x < node["value"] else "right"
    t.emit(f"{x} {'<' if child_side == 'left' else '>'} {node['value']}: go {child_side}.", 2,
           current=node["id"])
    if not _insert(s, node.get(child_side), node, child_side, x):
        return False
    _rebalance(s, node, parent, side)
    return True


def _delete(s: _Session, node: Optional[TreeNode], parent, side, x: Any) -> bool:
    t = s.t
    if node is None:
        t.emit(f"{x} is not in the tree.", 7, current=None)
        return False
    if x != node["value"]:
        child_side = "left" if x < node["value"] else "right"
        t.emit(f"{x} {'<' if child_side == 'left' else '>'} {node['value']}: go {child_side}.", 7,
               current=node["id"])
        if not _delete(s, node.get(child_side), node, child_side, x):
            return False
        _rebalance(s, node, parent, side)
        return True

    left, right = node.get("left"), node.get("right")
    if left is not None and right is not None:
        succ = right
        while succ.get("left") is not None:
            succ = succ["left"]
        t.emit(f"{x} has two children: replace it with its inorder successor {succ['value']}.", 7,
               current=succ["id"])
        node["value"] = succ["value"]
        _delete(s, right, node, "right", succ["value"])
        _rebalance(s, node, parent, side)
        return True

    child = left if left is not None else right
    s.attach(parent, side, child)
    t.emit(f"Remove {x}" + (" (a leaf)." if child is None else f" and lift its child {child['value']}."), 7,
           current=None if child is None else child["id"])
    return True


# ---------------------------------------------------------------------------
# Rebalancing
# ---------------------------------------------------------------------------
def _rebalance(s: _Session, node: TreeNode, parent, side) -> None:
    t = s.t
    _refresh(node)
    b = _balance(node)
    if -1 <= b <= 1:
        t.emit(f"{node['value']}: height {node['height']}, balance {b}.", 4, current=node["id"])
        return

    t.emit(f"{node['value']} is unbalanced (balance {b}).", 4, current=node["id"])
    if b > 1:
        if _balance(node["left"]) < 0:
            node["left"] = _rotate_left(node["left"])
            t.emit(f"Left-Right case: rotate left at {node['left']['left']['value']}.", 5,
                   current=node["left"]["id"], rotation="left")
            kind = "LR"
        else:
            kind = "LL"
        top = _rotate_right(node)
        s.attach(parent, side, top)
        t.emit(f"{kind} case: rotate right at {node['value']}; {top['value']} takes its place.", 5,
               current=top["id"], rotation="right")
    else:
        if _balance(node["right"]) > 0:
            node["right"] = _rotate_right(node["right"])
            t.emit(f"Right-Left case: rotate right at {node['right']['right']['value']}.", 6,
                   current=node["right"]["id"], rotation="right")
            kind = "RL"
        else:
            kind = "RR"
        top = _rotate_left(node)
        s.attach(parent, side, top)
        t.emit(f"{kind} case: rotate left at {node['value']}; {top['value']} takes its place.", 6,
               current=top["id"], rotation="left")


def _rotate_right(z: TreeNode) -> TreeNode:
    y = z["left"]
    z["left"], y["right"] = y.get("right"), z
    _refresh(z)
    _refresh(y)
    return y


def _rotate_left(z: TreeNode) -> TreeNode:
    y = z["right"]
    z["right"], y["left"] = y.get("left"), z
    _refresh(z)
    _refresh(y)
    return y
