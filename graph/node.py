from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


# ---------------------------------------------------------------------------
# Node State Enum: maps 1-to-1 with the visual encoding palette
# ---------------------------------------------------------------------------
class NodeState(Enum):
    UNVISITED  = "unvisited"   # default grey
    FRONTIER   = "frontier"    # "seen but not yet processed"
    VISITED    = "visited"     # fully processed
    CURRENT    = "current"     # the node being expanded RIGHT NOW
    PATH       = "path"        # on the final reconstructed path / tree
    SOURCE     = "source"      # start node
    TARGET     = "target"      # goal node


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
@dataclass
class Node:
    """
    One entry of the generic graph shape.  Nodes are addressed by their
    index in the `nodes` list; `label` is only for display.

    Attributes:
        label    : Human-readable name ("A", "S", "0" …).
        position : Optional (x, y) canvas coordinates.  A* reads these
                   for its Euclidean heuristic.
    """

    label:    str                              = ""
    position: Optional[Tuple[float, float]]    = None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"label": self.label}
        if self.position is not None:
            d["position"] = [self.position[0], self.position[1]]
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any], index: int = 0) -> "Node":
        pos = data.get("position")
        if isinstance(pos, dict):
            pos = (pos.get("x", 0.0), pos.get("y", 0.0))
        elif pos is not None:
            pos = (pos[0], pos[1])
        return cls(label=str(data.get("label", index)), position=pos)
