from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Edge State Enum
# ---------------------------------------------------------------------------
class EdgeState(Enum):
    DEFAULT  = "default"
    ACTIVE   = "active"     # being examined right now
    RELAXED  = "relaxed"    # improved a distance
    CHOSEN   = "chosen"     # on the path / in the tree
    IGNORED  = "ignored"    # examined, no improvement
    REJECTED = "rejected"   # Kruskal: would close a cycle


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------
@dataclass
class Edge:
    """
    Attributes:
        source   : Index of the tail node.
        target   : Index of the head node.
        weight   : Edge weight (1 when the input omits it).
        directed : Absent / False means traversable both ways.
        capacity : Flow capacity (Ford-Fulkerson); falls back to weight.
    """

    source:   int
    target:   int
    weight:   float            = 1
    directed: bool             = False
    capacity: Optional[float]  = None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"source": self.source, "target": self.target, "weight": self.weight}
        if self.directed:
            d["directed"] = True
        if self.capacity is not None:
            d["capacity"] = self.capacity
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Edge":
        return cls(
            source=data["source"],
            target=data["target"],
            weight=data.get("weight", 1),
            directed=bool(data.get("directed", False)),
            capacity=data.get("capacity"),
        )
