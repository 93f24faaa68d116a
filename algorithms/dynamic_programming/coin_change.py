"""
coin_change.py — Coin Change (number of ways)
==============================================
dp[a] = number of coin combinations summing to a.  Coins are processed
one denomination at a time so each combination is counted once,
regardless of order.
"""

from typing import List, Optional

from algorithms.step import Tracer
from algorithms.validate import InvalidInput, require_int, require_numbers


PSEUDOCODE: List[str] = [
    "def countWays(coins, amount):",               # 0
    "    dp ← [0] * (amount + 1)",                 # 1
    "    dp[0] ← 1",                               # 2
    "    for coin in coins:",                      # 3
    "        for a in coin … amount:",             # 4
    "            dp[a] ← dp[a] + dp[a - coin]",    # 5
    "    return dp[amount]",                       # 6
]

BLANK = {"coins": [], "amount": 0, "dp": []}


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"coins": [1, 2, 5, 10, 25], "amount": 30}


def coin_change(t: Tracer) -> None:
    coins  = require_numbers(t.state, "coins", BLANK, integers=True)
    amount = require_int(t.state, "amount", BLANK, minimum=0, maximum=500)
    if any(c <= 0 for c in coins):
        raise InvalidInput("Coin values must be positive.", BLANK)

    t.emit(f"Count the ways to make {amount} from coins {coins}.", 0)

    dp = [0] * (amount + 1)
    t.emit("dp[a] counts the ways to make amount a; start every cell at 0.", 1,
           title="Base cases", dp=dp, current_coin_index=None, current_amount=None, dependencies=[])
    dp[0] = 1
    t.emit("dp[0] = 1: one way to make 0, use no coins.", 2, current_amount=0)

    for ci, coin in enumerate(coins):
        t.emit(f"Process coin {coin}.", 3, title=f"Coin {coin}",
               current_coin_index=ci, current_amount=None, dependencies=[])
        for a in range(coin, amount + 1):
            before = dp[a]
            dp[a] += dp[a - coin]
            t.emit(f"dp[{a}] = {before} + dp[{a - coin}] = {before} + {dp[a - coin]} = {dp[a]}.", 5,
                   current_amount=a, dependencies=[a - coin])

    t.finish(f"There are {dp[amount]} ways to make {amount}.", 6,
             current_coin_index=None, current_amount=amount, dependencies=[], result=dp[amount])
