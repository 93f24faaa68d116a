"""
knapsack.py — 0/1 Knapsack
===========================
dp[i][w] = best value using the first i items with capacity w.

Records a step for:
  1. Allocating the table and seeding row 0 / column 0 with zeros
  2. Every cell write (take vs. skip, or "too heavy")
  3. Every traceback decision while recovering the chosen items
"""

import random
from typing import List, Optional

from algorithms.dynamic_programming.common import empty_table
from algorithms.step import Tracer
from algorithms.validate import InvalidInput, require_int, require_pairs


PSEUDOCODE: List[str] = [
    "def knapsack(items, W):",                                    # 0
    "    dp[0][w] ← 0; dp[i][0] ← 0",                              # 1
    "    for i in 1 … n:",                                         # 2
    "        for w in 1 … W:",                                     # 3
    "            if weight[i] > w: dp[i][w] ← dp[i-1][w]",         # 4
    "            else: dp[i][w] ← max(dp[i-1][w],",                # 5
    "                      dp[i-1][w-weight[i]] + value[i])",     # 6
    "    traceback from dp[n][W] to recover the items",            # 7
    "    return dp[n][W]",                                         # 8
]

BLANK = {"items": [], "capacity": 0, "table": []}

SAMPLE_ITEMS = [(60, 10), (100, 20), (120, 30), (80, 15), (40, 5)]


def build_initial_state(seed: Optional[int] = None) -> dict:
    if seed is None:
        pairs, capacity = SAMPLE_ITEMS, 50
    else:
        rng = random.Random(seed)
        pairs = [(rng.randint(10, 120), rng.randint(3, 25)) for _ in range(5)]
        capacity = rng.randint(20, 50)
    return {
        "items": [{"name": f"Item {i + 1}", "value": v, "weight": w} for i, (v, w) in enumerate(pairs)],
        "capacity": capacity,
    }


def knapsack(t: Tracer) -> None:
    items = require_pairs(t.state, "items", ("weight", "value"), BLANK)
    W     = require_int(t.state, "capacity", BLANK, minimum=0, maximum=1000)
    if any(not isinstance(it["weight"], int) or it["weight"] <= 0 for it in items):
        raise InvalidInput("Item weights must be positive integers.", BLANK)
    n = len(items)

    t.emit(f"0/1 knapsack: {n} items, capacity {W}.", 0)

    dp = empty_table(n + 1, W + 1)
    t.emit(f"Allocate a {n + 1} × {W + 1} table.", 1, title="Base cases",
           table=dp, current_cell=None, dependencies=[], current_item=None, selected_items=[])
    for w in range(W + 1):
        dp[0][w] = 0
    t.emit("Row 0: with no items every capacity is worth 0.", 1, current_cell=[0, None])
    for i in range(1, n + 1):
        dp[i][0] = 0
    t.emit("Column 0: with capacity 0 nothing fits.", 1, current_cell=[None, 0])

    for i in range(1, n + 1):
        wt, val = items[i - 1]["weight"], items[i - 1]["value"]
        t.emit(f"Consider {_name(items, i)} (weight {wt}, value {val}).", 2,
               title=f"Item {i}", current_item=i - 1, current_cell=None, dependencies=[])
        for w in range(1, W + 1):
            if wt > w:
                dp[i][w] = dp[i - 1][w]
                t.emit(f"dp[{i}][{w}]: weight {wt} > {w}, too heavy; keep dp[{i - 1}][{w}] = {dp[i][w]}.", 4,
                       current_cell=[i, w], dependencies=[[i - 1, w]])
                continue
            skip, take = dp[i - 1][w], dp[i - 1][w - wt] + val
            dp[i][w] = max(skip, take)
            verdict = "take it" if take > skip else "skip it"
            t.emit(f"dp[{i}][{w}] = max({skip}, {dp[i - 1][w - wt]} + {val}) = {dp[i][w]}: {verdict}.", 5,
                   current_cell=[i, w], dependencies=[[i - 1, w], [i - 1, w - wt]])

    selected: List[int] = []
    w = W
    t.emit(f"Best value is dp[{n}][{W}] = {dp[n][W]}. Trace back to find the items.", 7,
           title="Traceback", current_item=None, current_cell=[n, W], dependencies=[])
    for i in range(n, 0, -1):
        if dp[i][w] != dp[i - 1][w]:
            selected.insert(0, i - 1)
            w -= items[i - 1]["weight"]
            t.emit(f"dp[{i}][{w + items[i - 1]['weight']}] ≠ dp[{i - 1}][{w + items[i - 1]['weight']}]: "
                   f"{_name(items, i)} is in the knapsack; {w} capacity left.", 7,
                   current_cell=[i - 1, w], current_item=i - 1, selected_items=selected)
        else:
            t.emit(f"dp[{i}][{w}] = dp[{i - 1}][{w}]: {_name(items, i)} is not used.", 7,
                   current_cell=[i - 1, w], current_item=i - 1)

    names = ", ".join(_name(items, i + 1) for i in selected) or "none"
    t.finish(f"Maximum value {dp[n][W]} with items: {names}.", 8,
             current_item=None, current_cell=[n, W], result=dp[n][W])


def _name(items, i: int) -> str:
    return items[i - 1].get("name") or f"item {i}"
