"""Shared helpers for the searching family."""

import random
from typing import Any, Dict, Optional

from algorithms.validate import BLANK_ARRAY, require_number, require_numbers, require_sorted

BLANK_SEARCH: Dict[str, Any] = dict(BLANK_ARRAY, target=None)


def random_search_state(seed: Optional[int] = None, size: int = 15, high: int = 99) -> Dict[str, Any]:
    """Sorted distinct values; the target is drawn from the array 70 % of the time."""
    rng = random.Random(seed)
    arr = sorted(rng.sample(range(1, high + 1), size))
    if rng.random() < 0.7:
        target = rng.choice(arr)
    else:
        target = rng.randint(1, high)
    return {"array": arr, "target": target}


def check_search_state(state: Dict[str, Any], need_sorted: bool = True):
    arr = require_numbers(state, "array", BLANK_SEARCH)
    target = require_number(state, "target", BLANK_SEARCH)
    if need_sorted:
        require_sorted(arr, "array", BLANK_SEARCH)
    return arr, target


def not_found(target: Any) -> str:
    return f"{target} is not in the array."


def found_at(target: Any, idx: int) -> str:
    return f"Found {target} at index {idx}."


