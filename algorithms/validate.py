"""
validate.py — Initial-State Checks
===================================
Every trace function starts by checking the shape of its initial state.
A malformed state raises InvalidInput; the engine turns that into a
single-step error trace instead of letting a KeyError escape.

Blank states (what the error step shows) are per family so the renderer
still receives the keys it expects.
"""

import math
from typing import Any, Dict, List, Optional, Sequence


BLANK_ARRAY:  Dict[str, Any] = {"array": []}
BLANK_GRAPH:  Dict[str, Any] = {"nodes": [], "edges": []}
BLANK_GRID:   Dict[str, Any] = {"grid": []}
BLANK_TEXT:   Dict[str, Any] = {"text": "", "pattern": ""}
BLANK_TREE:   Dict[str, Any] = {"tree": None}


class InvalidInput(ValueError):
    """Raised when an initial state cannot be traced."""

    def __init__(self, message: str, blank: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.blank   = dict(blank or {})

    def error_state(self) -> Dict[str, Any]:
        state = dict(self.blank)
        state["error"] = self.message
        state["is_complete"] = True
        return state


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool) and not (
        isinstance(v, float) and math.isnan(v)
    )


def _is_position(p: Any) -> bool:
    if isinstance(p, dict):
        return all(_is_number(p.get(axis, 0.0)) for axis in ("x", "y"))
    return isinstance(p, (list, tuple)) and len(p) == 2 and all(_is_number(c) for c in p)


def _get(state: Dict[str, Any], key: str, blank: Dict[str, Any]) -> Any:
    if not isinstance(state, dict):
        raise InvalidInput("Initial state must be an object.", blank)
    if key not in state:
        raise InvalidInput(f"Missing required field '{key}'.", blank)
    return state[key]


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------
def require_int(
    state: Dict[str, Any],
    key: str,
    blank: Dict[str, Any],
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
) -> int:
    v = _get(state, key, blank)
    if not isinstance(v, int) or isinstance(v, bool):
        raise InvalidInput(f"'{key}' must be an integer.", blank)
    if minimum is not None and v < minimum:
        raise InvalidInput(f"'{key}' must be at least {minimum}.", blank)
    if maximum is not None and v > maximum:
        raise InvalidInput(f"'{key}' must be at most {maximum}.", blank)
    return v


def require_number(state: Dict[str, Any], key: str, blank: Dict[str, Any]) -> float:
    v = _get(state, key, blank)
    if not _is_number(v):
        raise InvalidInput(f"'{key}' must be a number.", blank)
    return v


def require_string(state: Dict[str, Any], key: str, blank: Dict[str, Any], allow_empty: bool = False) -> str:
    v = _get(state, key, blank)
    if not isinstance(v, str):
        raise InvalidInput(f"'{key}' must be a string.", blank)
    if not v and not allow_empty:
        raise InvalidInput(f"'{key}' must not be empty.", blank)
    return v


# ---------------------------------------------------------------------------
# Sequences
# ---------------------------------------------------------------------------
def require_numbers(
    state: Dict[str, Any],
    key: str = "array",
    blank: Dict[str, Any] = BLANK_ARRAY,
    allow_empty: bool = False,
    integers: bool = False,
    non_negative: bool = False,
) -> List[Any]:
    v = _get(state, key, blank)
    if not isinstance(v, list):
        raise InvalidInput(f"'{key}' must be a list of numbers.", blank)
    if not v and not allow_empty:
        raise InvalidInput(f"'{key}' must not be empty.", blank)
    for item in v:
        if not _is_number(item):
            raise InvalidInput(f"'{key}' contains a non-numeric value: {item!r}.", blank)
        if integers and not isinstance(item, int):
            raise InvalidInput(f"'{key}' must contain integers only.", blank)
        if non_negative and item < 0:
            raise InvalidInput(f"'{key}' must not contain negative values.", blank)
    return v


def require_sorted(values: Sequence[Any], key: str, blank: Dict[str, Any]) -> None:
    if any(values[i] > values[i + 1] for i in range(len(values) - 1)):
        raise InvalidInput(f"'{key}' must be sorted in ascending order.", blank)


def require_pairs(
    state: Dict[str, Any],
    key: str,
    fields: Sequence[str],
    blank: Dict[str, Any],
) -> List[Dict[str, Any]]:
    """A non-empty list of objects, each carrying numeric `fields`."""
    v = _get(state, key, blank)
    if not isinstance(v, list) or not v:
        raise InvalidInput(f"'{key}' must be a non-empty list.", blank)
    for item in v:
        if not isinstance(item, dict):
            raise InvalidInput(f"'{key}' entries must be objects.", blank)
        for f in fields:
            if not _is_number(item.get(f)):
                raise InvalidInput(f"Every '{key}' entry needs a numeric '{f}'.", blank)
    return v


def require_grid(
    state: Dict[str, Any],
    key: str,
    blank: Dict[str, Any] = BLANK_GRID,
    square: bool = False,
) -> List[List[Any]]:
    v = _get(state, key, blank)
    if not isinstance(v, list) or not v or not all(isinstance(r, list) for r in v):
        raise InvalidInput(f"'{key}' must be a non-empty 2-D list.", blank)
    width = len(v[0])
    if width == 0 or any(len(r) != width for r in v):
        raise InvalidInput(f"'{key}' rows must be non-empty and equally long.", blank)
    if square and width != len(v):
        raise InvalidInput(f"'{key}' must be square.", blank)
    for row in v:
        for cell in row:
            if not _is_number(cell):
                raise InvalidInput(f"'{key}' contains a non-numeric cell: {cell!r}.", blank)
    return v


# ---------------------------------------------------------------------------
# Graphs
# ---------------------------------------------------------------------------
def require_graph(
    state: Dict[str, Any],
    blank: Dict[str, Any] = BLANK_GRAPH,
    weighted: bool = False,
    capacities: bool = False,
) -> None:
    """Nodes are a list; every edge references two valid node indices."""
    nodes = _get(state, "nodes", blank)
    edges = _get(state, "edges", blank)
    if not isinstance(nodes, list) or not nodes:
        raise InvalidInput("Graph must contain at least one node.", blank)
    if not isinstance(edges, list):
        raise InvalidInput("'edges' must be a list.", blank)
    n = len(nodes)
    for node in nodes:
        if not isinstance(node, dict):
            raise InvalidInput("Nodes must be objects with an optional 'label' and 'position'.", blank)
        if node.get("position") is not None and not _is_position(node["position"]):
            raise InvalidInput(f"Node position {node['position']!r} must be an [x, y] pair of numbers.",
                               blank)
    for e in edges:
        if not isinstance(e, dict):
            raise InvalidInput("Edges must be objects with 'source' and 'target'.", blank)
        for end in ("source", "target"):
            idx = e.get(end)
            if not isinstance(idx, int) or isinstance(idx, bool) or not 0 <= idx < n:
                raise InvalidInput(f"Edge {end} {idx!r} is not a valid node index.", blank)
        if weighted and "weight" in e and not _is_number(e["weight"]):
            raise InvalidInput("Edge weights must be numbers.", blank)
        if capacities and not _is_number(e.get("capacity", e.get("weight"))):
            raise InvalidInput("Every edge needs a numeric 'capacity'.", blank)


def require_node(state: Dict[str, Any], key: str, blank: Dict[str, Any] = BLANK_GRAPH) -> int:
    return require_int(state, key, blank, minimum=0, maximum=len(state.get("nodes") or []) - 1)
