"""
bst.py — Binary Search Tree Operations
=======================================
Runs a list of operations (search / insert / delete) against a BST.
Every comparison on the way down is a step.  Deleting a node with two
children copies its inorder successor's value into it and removes the
successor instead.

State:
  • tree       – the BST (nested dicts)
  • operation  – {"op", "value"} being executed
  • current    – id of the node being compared
  • search_path – ids visited by the current operation
"""

from typing import Any, Dict, List, Optional

from algorithms.step import Tracer
from algorithms.trees.common import TreeNode, bst_from_values, make_node, next_id, require_tree
from algorithms.validate import BLANK_TREE, InvalidInput


PSEUDOCODE: List[str] = [
    "def bstOp(root, op, x):",                             # 0
    "    node ← root",                                     # 1
    "    while node and node.value ≠ x:",                  # 2
    "        node ← node.left if x < node.value else node.right",  # 3
    "    search: return node",                             # 4
    "    insert: attach new leaf where the walk fell off",  # 5
    "    delete: leaf → remove; one child → splice",       # 6
    "            two children → copy successor, delete it",  # 7
]

OPS = ("search", "insert", "delete")


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {
        "tree": bst_from_values([50, 30, 70, 20, 40, 60, 80]),
        "operations": [
            {"op": "search", "value": 40},
            {"op": "insert", "value": 55},
            {"op": "delete", "value": 30},
        ],
    }


def _check_ops(state: Dict[str, Any]) -> List[Dict[str, Any]]:
    ops = state.get("operations")
    if not isinstance(ops, list) or not ops:
        raise InvalidInput("'operations' must be a non-empty list.", BLANK_TREE)
    for op in ops:
        if not isinstance(op, dict) or op.get("op") not in OPS or not isinstance(op.get("value"), (int, float)):
            raise InvalidInput("Each operation needs 'op' (search/insert/delete) and a numeric 'value'.",
                               BLANK_TREE)
    return ops


def bst(t: Tracer) -> None:
    require_tree(t.state, allow_empty=True)
    ops = _check_ops(t.state)

    t.emit(f"Run {len(ops)} operation(s) on the binary search tree.", 0)

    t.emit("Ready.", 0, operation=None, current=None, search_path=[], results=[])
    for op in ops:
        t.emit(f"{op['op'].capitalize()} {op['value']}.", 0, title=f"{op['op'].capitalize()} {op['value']}",
               operation=dict(op), current=None, search_path=[])
        result = {"search": _search, "insert": _insert, "delete": _delete}[op["op"]](t, op["value"])
        t.state["results"].append({"op": op["op"], "value": op["value"], "ok": result})

    done = ", ".join(f"{r['op']} {r['value']}: {_outcome(r)}" for r in t.state["results"])
    t.finish(f"All operations complete ({done}).", 0, operation=None, current=None)


def _descend(t: Tracer, x: Any):
    """Walk from the root towards x; returns (node or None, parent, side)."""
    node, parent, side = t.state["tree"], None, None
    path = t.state["search_path"]
    while node is not None:
        path.append(node["id"])
        if x == node["value"]:
            t.emit(f"{x} = {node['value']}: found.", 2, current=node["id"])
            return node, parent, side
        side = "left" if x < node["value"] else "right"
        t.emit(f"{x} {'<' if side == 'left' else '>'} {node['value']}: go {side}.", 3, current=node["id"])
        parent, node = node, node.get(side)
    return None, parent, side


def _search(t: Tracer, x: Any) -> bool:
    node, _, _ = _descend(t, x)
    if node is None:
        t.emit(f"Fell off the tree: {x} is not present.", 4, current=None)
        return False
    t.emit(f"Search for {x} succeeded.", 4)
    return True


def _insert(t: Tracer, x: Any) -> bool:
    node, parent, side = _descend(t, x)
    if node is not None:
        t.emit(f"{x} is already in the tree; nothing to insert.", 5)
        return False
    new = make_node(next_id(t.state["tree"]), x)
    if parent is None:
        t.state["tree"] = new
        t.emit(f"The tree was empty: {x} becomes the root.", 5, current=new["id"])
    else:
        parent[side] = new
        t.emit(f"Attach {x} as the {side} child of {parent['value']}.", 5, current=new["id"])
    return True


def _delete(t: Tracer, x: Any) -> bool:
    node, parent, side = _descend(t, x)
    if node is None:
        t.emit(f"{x} is not in the tree; nothing to delete.", 6, current=None)
        return False

    left, right = node.get("left"), node.get("right")
    if left is not None and right is not None:
        succ_parent, succ = node, right
        t.emit(f"{x} has two children: find its inorder successor in the right subtree.", 7,
               current=succ["id"])
        while succ.get("left") is not None:
            succ_parent, succ = succ, succ["left"]
            t.emit(f"Go left to {succ['value']}.", 7, current=succ["id"])
        node["value"] = succ["value"]
        t.emit(f"Copy the successor {succ['value']} into the node that held {x}.", 7, current=node["id"])
        succ_parent["left" if succ_parent is not node else "right"] = succ.get("right")
        t.emit("Remove the old successor node (it has at most a right child).", 7, current=node["id"])
        return True

    child: Optional[TreeNode] = left if left is not None else right
    if parent is None:
        t.state["tree"] = child
    else:
        parent[side] = child
    kind = "a leaf" if child is None else "one child"
    t.emit(f"{x} has {kind}: {'remove it' if child is None else 'splice its child into its place'}.", 6,
           current=None if child is None else child["id"])
    return True


def _outcome(result: Dict[str, Any]) -> str:
    if result["ok"]:
        return "done"
    return "duplicate" if result["op"] == "insert" else "not found"
