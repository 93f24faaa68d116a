"""
fractional_knapsack.py — Fractional Knapsack
=============================================
Items may be split.  Sort by value/weight ratio (highest first) and
take whole items while they fit, then a fraction of the next one.
"""

from typing import List, Optional

from algorithms.formatting import fmt
from algorithms.step import Tracer
from algorithms.validate import InvalidInput, require_number, require_pairs


PSEUDOCODE: List[str] = [
    "def fractionalKnapsack(items, W):",           # 0
    "    sort items by value/weight, descending",  # 1
    "    for item in items:",                      # 2
    "        if item.weight ≤ W: take all of it",  # 3
    "        else: take W / item.weight of it",    # 4
    "        if W = 0: stop",                      # 5
    "    return total value",                      # 6
]

BLANK = {"items": [], "capacity": 0}

SAMPLE = [(60, 10), (100, 20), (120, 30), (80, 15), (40, 5), (70, 8)]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {
        "items": [{"name": f"Item {i + 1}", "value": v, "weight": w} for i, (v, w) in enumerate(SAMPLE)],
        "capacity": 15,
    }


def fractional_knapsack(t: Tracer) -> None:
    items = require_pairs(t.state, "items", ("value", "weight"), BLANK)
    cap   = require_number(t.state, "capacity", BLANK)
    if cap < 0 or any(it["weight"] <= 0 for it in items):
        raise InvalidInput("Capacity must be non-negative and weights positive.", BLANK)

    t.emit(f"Fill a knapsack of capacity {fmt(cap)} from {len(items)} divisible items.", 0)

    ratios = [it["value"] / it["weight"] for it in items]
    order = sorted(range(len(items)), key=lambda i: -ratios[i])
    t.emit("Sort by value per unit weight: " + ", ".join(
        f"{_name(items, i)} ({fmt(ratios[i])})" for i in order) + ".", 1,
        ratios=ratios, order=order, fractions=[0] * len(items), current=None,
        remaining=cap, total_value=0)

    fractions: List[float] = t.state["fractions"]
    remaining, total = cap, 0
    for i in order:
        if remaining <= 0:
            t.emit("The knapsack is full.", 5, current=None)
            break
        it = items[i]
        if it["weight"] <= remaining:
            fractions[i] = 1
            remaining -= it["weight"]
            total += it["value"]
            t.emit(f"{_name(items, i)} (weight {fmt(it['weight'])}) fits: take all of it, "
                   f"value {fmt(total)}, {fmt(remaining)} capacity left.", 3,
                   current=i, remaining=remaining, total_value=total)
        else:
            frac = remaining / it["weight"]
            fractions[i] = frac
            total += it["value"] * frac
            t.emit(f"{_name(items, i)} does not fit: take {fmt(frac)} of it for "
                   f"{fmt(it['value'] * frac)}; total {fmt(total)}.", 4,
                   current=i, remaining=0, total_value=total)
            remaining = 0

    t.finish(f"Maximum value {fmt(total)}.", 6, current=None, result=total)


def _name(items, i: int) -> str:
    return items[i].get("name") or f"item {i + 1}"
