"""
interpolation_search.py — Interpolation Search
===============================================
Looks where the target *should* be if values were evenly spread:

    pos = lo + (x - A[lo]) · (hi - lo) / (A[hi] - A[lo])
"""

from typing import List, Optional

from algorithms.searching.common import check_search_state, found_at, not_found, random_search_state
from algorithms.step import Tracer


PSEUDOCODE: List[str] = [
    "procedure interpolationSearch(A, x):",      # 0
    "    lo ← 0; hi ← n-1",                      # 1
    "    while lo ≤ hi and A[lo] ≤ x ≤ A[hi]:",  # 2
    "        pos ← lo + (x-A[lo])·(hi-lo)/(A[hi]-A[lo])",  # 3
    "        if A[pos] = x: return pos",         # 4
    "        if A[pos] < x: lo ← pos+1",         # 5
    "        else: hi ← pos-1",                  # 6
    "    return -1",                             # 7
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return random_search_state(seed)


def interpolation_search(t: Tracer) -> None:
    arr, target = check_search_state(t.state)

    lo, hi = 0, len(arr) - 1
    t.emit(f"Search for {target} by estimating its position.", 0)

    while lo <= hi and arr[lo] <= target <= arr[hi]:
        if arr[hi] == arr[lo]:
            pos = lo
        else:
            pos = lo + int((target - arr[lo]) * (hi - lo) / (arr[hi] - arr[lo]))
        if arr[pos] == target:
            t.finish(found_at(target, pos), 4, low=lo, high=hi, pos=pos, found=True, result=pos)
            return
        if arr[pos] < target:
            t.emit(f"Estimated index {pos}: A[{pos}]={arr[pos]} < {target}, move right.", 5,
                   low=lo, high=hi, pos=pos)
            lo = pos + 1
        else:
            t.emit(f"Estimated index {pos}: A[{pos}]={arr[pos]} > {target}, move left.", 6,
                   low=lo, high=hi, pos=pos)
            hi = pos - 1

    t.finish(not_found(target) + " It lies outside the remaining value range.", 7,
             low=lo, high=hi, pos=None, found=False, result=-1)
