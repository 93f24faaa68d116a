"""
ternary_search.py — Ternary Search
===================================
Two midpoints split the range into thirds; two thirds are discarded
whenever the target is not at either midpoint.
"""

from typing import List, Optional

from algorithms.searching.common import check_search_state, found_at, not_found, random_search_state
from algorithms.step import Tracer


PSEUDOCODE: List[str] = [
    "procedure ternarySearch(A, x):",            # 0
    "    while lo ≤ hi:",                        # 1
    "        m1 ← lo + (hi-lo)/3; m2 ← hi - (hi-lo)/3",  # 2
    "        if A[m1] = x: return m1",           # 3
    "        if A[m2] = x: return m2",           # 4
    "        if x < A[m1]: hi ← m1-1",           # 5
    "        elif x > A[m2]: lo ← m2+1",         # 6
    "        else: lo ← m1+1; hi ← m2-1",        # 7
    "    return -1",                             # 8
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return random_search_state(seed)


def ternary_search(t: Tracer) -> None:
    arr, target = check_search_state(t.state)

    lo, hi = 0, len(arr) - 1
    t.emit(f"Search for {target} by splitting into thirds.", 0)

    while lo <= hi:
        third = (hi - lo) // 3
        m1, m2 = lo + third, hi - third
        if arr[m1] == target:
            t.finish(found_at(target, m1), 3, low=lo, high=hi, mid1=m1, mid2=m2, found=True, result=m1)
            return
        if arr[m2] == target:
            t.finish(found_at(target, m2), 4, low=lo, high=hi, mid1=m1, mid2=m2, found=True, result=m2)
            return
        if target < arr[m1]:
            t.emit(f"{target} < A[{m1}]={arr[m1]}: keep the left third.", 5,
                   low=lo, high=hi, mid1=m1, mid2=m2)
            hi = m1 - 1
        elif target > arr[m2]:
            t.emit(f"{target} > A[{m2}]={arr[m2]}: keep the right third.", 6,
                   low=lo, high=hi, mid1=m1, mid2=m2)
            lo = m2 + 1
        else:
            t.emit(f"A[{m1}]={arr[m1]} < {target} < A[{m2}]={arr[m2]}: keep the middle third.", 7,
                   low=lo, high=hi, mid1=m1, mid2=m2)
            lo, hi = m1 + 1, m2 - 1

    t.finish(not_found(target), 8, mid1=None, mid2=None, found=False, result=-1)
