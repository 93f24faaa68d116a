"""Shared helpers for the tree family."""

from typing import Any, Dict, Iterator, List, Optional

from algorithms.validate import BLANK_TREE, InvalidInput

TreeNode = Dict[str, Any]


def make_node(node_id: int, value: Any, left: Optional[TreeNode] = None,
              right: Optional[TreeNode] = None) -> TreeNode:
    return {"id": node_id, "value": value, "left": left, "right": right}


def bst_from_values(values: List[Any]) -> Optional[TreeNode]:
    """Insert values in order into an empty BST; ids follow insertion order."""
    root = None
    for i, v in enumerate(values):
        node = make_node(i, v)
        if root is None:
            root = node
            continue
        cur = root
        while True:
            side = "left" if v < cur["value"] else "right"
            if cur[side] is None:
                cur[side] = node
                break
            cur = cur[side]
    return root


def sample_tree() -> TreeNode:
    """4 (2 (1, 3), 6 (5, 7))"""
    return bst_from_values([4, 2, 6, 1, 3, 5, 7])


def nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    if root is None:
        return
    yield root
    yield from nodes(root.get("left"))
    yield from nodes(root.get("right"))


def next_id(root: Optional[TreeNode]) -> int:
    return max((n["id"] for n in nodes(root)), default=-1) + 1


def require_tree(state: Dict[str, Any], key: str = "tree", allow_empty: bool = False) -> Optional[TreeNode]:
    if not isinstance(state, dict) or key not in state:
        raise InvalidInput(f"Missing required field '{key}'.", BLANK_TREE)
    root = state[key]
    if root is None:
        if allow_empty:
            return None
        raise InvalidInput("The tree is empty.", BLANK_TREE)
    seen = set()
    stack = [root]
    while stack:
        node = stack.pop()
        if not isinstance(node, dict) or "value" not in node or "id" not in node:
            raise InvalidInput("Tree nodes need 'id' and 'value'.", BLANK_TREE)
        if node["id"] in seen:
            raise InvalidInput(f"Duplicate node id {node['id']!r}.", BLANK_TREE)
        seen.add(node["id"])
        for side in ("left", "right"):
            child = node.get(side)
            if child is not None:
                stack.append(child)
    return root
