"""Shared helpers for the sorting family."""

import random
from typing import List, Optional


def random_array(seed: Optional[int] = None, size: int = 12, low: int = 1, high: int = 80) -> List[int]:
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(size)]


def clear_marks(**extra):
    """Keyword bundle that wipes the transient highlight keys."""
    marks = {"comparing": [], "swapping": []}
    marks.update(extra)
    return marks
