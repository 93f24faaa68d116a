"""
binary_search.py — Binary Search
=================================
One step per comparison.  The comparison that finds the target is
itself the terminal step, so a search that succeeds on its k-th comparison
produces exactly k + 1 steps.
"""

from typing import List, Optional

from algorithms.searching.common import check_search_state, found_at, not_found, random_search_state
from algorithms.step import Tracer


PSEUDOCODE: List[str] = [
    "procedure binarySearch(A, x):",             # 0
    "    lo ← 0; hi ← n-1",                      # 1
    "    while lo ≤ hi:",                        # 2
    "        mid ← (lo + hi) / 2",               # 3
    "        if A[mid] = x: return mid",         # 4
    "        if A[mid] < x: lo ← mid+1",         # 5
    "        else: hi ← mid-1",                  # 6
    "    return -1",                             # 7
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return random_search_state(seed)


def binary_search(t: Tracer) -> None:
    arr, target = check_search_state(t.state)

    lo, hi = 0, len(arr) - 1
    t.emit(f"Search for {target} in a sorted array of {len(arr)} elements.", 0)

    while lo <= hi:
        mid = (lo + hi) // 2
        if arr[mid] == target:
            t.finish(found_at(target, mid), 4, low=lo, high=hi, mid=mid, found=True, result=mid)
            return
        if arr[mid] < target:
            t.emit(f"A[{mid}]={arr[mid]} < {target}: discard the left half.", 5,
                   low=lo, high=hi, mid=mid)
            lo = mid + 1
        else:
            t.emit(f"A[{mid}]={arr[mid]} > {target}: discard the right half.", 6,
                   low=lo, high=hi, mid=mid)
            hi = mid - 1

    t.finish(not_found(target), 7, low=lo, high=hi, mid=None, found=False, result=-1)
