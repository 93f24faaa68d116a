"""
lis.py — Longest Increasing Subsequence (O(n²) tabulation)
===========================================================
dp[i] = length of the longest strictly increasing subsequence ending at
index i; prev[i] links back to its predecessor for the traceback.
"""

from typing import List, Optional

from algorithms.sorting.common import random_array
from algorithms.step import Tracer
from algorithms.validate import require_numbers


PSEUDOCODE: List[str] = [
    "def LIS(A):",                                         # 0
    "    dp[i] ← 1; prev[i] ← -1 for all i",                # 1
    "    for i in 1 … n-1:",                               # 2
    "        for j in 0 … i-1:",                           # 3
    "            if A[j] < A[i] and dp[j] + 1 > dp[i]:",   # 4
    "                dp[i] ← dp[j] + 1; prev[i] ← j",      # 5
    "    follow prev from argmax(dp)",                     # 6
    "    return max(dp)",                                  # 7
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    if seed is None:
        return {"array": [10, 22, 9, 33, 21, 50, 41, 60]}
    return {"array": random_array(seed, size=10, high=60)}


def lis(t: Tracer) -> None:
    arr = require_numbers(t.state)
    n   = len(arr)

    t.emit(f"Longest increasing subsequence of {n} values.", 0)

    dp   = [1] * n
    prev = [-1] * n
    t.emit("Every element on its own is an increasing subsequence: dp[i] = 1.", 1,
           title="Base cases", dp=dp, prev=prev, current_i=None, current_j=None, sequence=[])

    for i in range(1, n):
        for j in range(i):
            if arr[j] < arr[i] and dp[j] + 1 > dp[i]:
                dp[i] = dp[j] + 1
                prev[i] = j
                t.emit(f"A[{j}]={arr[j]} < A[{i}]={arr[i]}: extend, dp[{i}] = dp[{j}] + 1 = {dp[i]}.", 5,
                       current_i=i, current_j=j)
            elif arr[j] < arr[i]:
                t.emit(f"A[{j}]={arr[j]} < A[{i}]={arr[i]} but dp[{j}] + 1 = {dp[j] + 1} does not beat "
                       f"dp[{i}] = {dp[i]}.", 4, current_i=i, current_j=j)
            else:
                t.emit(f"A[{j}]={arr[j]} ≥ A[{i}]={arr[i]}: cannot extend.", 4,
                       current_i=i, current_j=j)

    end = 0
    for k in range(1, n):
        if dp[k] > dp[end]:
            end = k
    seq: List[int] = []
    t.emit(f"Longest length is {dp[end]}, ending at index {end}. Follow prev links.", 6,
           title="Traceback", current_i=end, current_j=None)
    k = end
    while k != -1:
        seq.insert(0, k)
        t.emit(f"Take A[{k}]={arr[k]}.", 6, current_i=k, sequence=seq)
        k = prev[k]

    values = ", ".join(str(arr[k]) for k in seq)
    t.finish(f"LIS has length {dp[end]}: [{values}].", 7, current_i=None, result=dp[end])
