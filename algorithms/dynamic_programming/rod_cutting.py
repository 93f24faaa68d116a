"""
rod_cutting.py — Rod Cutting
=============================
prices[i] is the price of a piece of length i (prices[0] is ignored).
dp[j] = best revenue for a rod of length j; cuts[j] = length of the
first piece in that best solution.
"""

from typing import List, Optional

from algorithms.step import Tracer
from algorithms.validate import InvalidInput, require_int, require_numbers


PSEUDOCODE: List[str] = [
    "def cutRod(price, n):",                               # 0
    "    dp[0] ← 0",                                       # 1
    "    for j in 1 … n:",                                 # 2
    "        for i in 1 … j:",                             # 3
    "            if price[i] + dp[j-i] > dp[j]:",          # 4
    "                dp[j] ← price[i] + dp[j-i]; cut[j] ← i",  # 5
    "    read the pieces from cut[]",                      # 6
    "    return dp[n]",                                    # 7
]

BLANK = {"prices": [], "length": 0, "dp": []}


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"prices": [0, 1, 5, 8, 9, 10, 17, 17, 20], "length": 8}


def rod_cutting(t: Tracer) -> None:
    prices = require_numbers(t.state, "prices", BLANK, non_negative=True)
    n      = require_int(t.state, "length", BLANK, minimum=0)
    if n > len(prices) - 1:
        raise InvalidInput(f"Need a price for every length up to {n}.", BLANK)

    t.emit(f"Cut a rod of length {n} for maximum revenue.", 0)

    dp:   List[Optional[float]] = [None] * (n + 1)
    cuts: List[Optional[int]]   = [None] * (n + 1)
    dp[0] = 0
    t.emit("A rod of length 0 earns nothing: dp[0] = 0.", 1, title="Base cases",
           dp=dp, cuts=cuts, current_length=None, current_piece=None, dependencies=[], pieces=[])

    for j in range(1, n + 1):
        best = -1
        for i in range(1, j + 1):
            candidate = prices[i] + dp[j - i]
            if candidate > best:
                best, cuts[j] = candidate, i
                dp[j] = best
                t.emit(f"Length {j}: first piece {i} earns {prices[i]} + dp[{j - i}] = {candidate}, "
                       f"the best so far; dp[{j}] = {candidate}.", 5,
                       current_length=j, current_piece=i, dependencies=[j - i])
            else:
                t.emit(f"Length {j}: first piece {i} earns {prices[i]} + dp[{j - i}] = {candidate} "
                       f"≤ {best}.", 4, current_length=j, current_piece=i, dependencies=[j - i])

    pieces: List[int] = []
    t.emit(f"Best revenue dp[{n}] = {dp[n]}. Read the pieces from the cut table.", 6,
           title="Traceback", current_length=n, current_piece=None, dependencies=[])
    j = n
    while j > 0:
        pieces.append(cuts[j])
        t.emit(f"Cut a piece of length {cuts[j]} (price {prices[cuts[j]]}); {j - cuts[j]} left.", 6,
               current_length=j, current_piece=cuts[j], pieces=pieces)
        j -= cuts[j]

    t.finish(f"Maximum revenue {dp[n]} from pieces {pieces or 'none'}.", 7,
             current_length=None, current_piece=None, dependencies=[], result=dp[n])
