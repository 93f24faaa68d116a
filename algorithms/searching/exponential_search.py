"""
exponential_search.py — Exponential Search
===========================================
Double a bound until A[bound] ≥ x (or the end is passed), then binary
search in [bound/2, min(bound, n-1)].
"""

from typing import List, Optional

from algorithms.searching.common import check_search_state, found_at, not_found, random_search_state
from algorithms.step import Tracer


PSEUDOCODE: List[str] = [
    "procedure exponentialSearch(A, x):",        # 0
    "    if A[0] = x: return 0",                 # 1
    "    i ← 1",                                 # 2
    "    while i < n and A[i] < x: i ← 2·i",     # 3
    "    return binarySearch(A, i/2, min(i, n-1), x)",  # 4
    "        mid ← (lo + hi) / 2",               # 5
    "        compare A[mid] with x, halve range",  # 6
    "    return -1",                             # 7
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return random_search_state(seed)


def exponential_search(t: Tracer) -> None:
    arr, target = check_search_state(t.state)
    n = len(arr)

    t.emit(f"Search for {target} by doubling a bound.", 0)

    if arr[0] == target:
        t.finish(found_at(target, 0), 1, bound=0, found=True, result=0)
        return
    t.emit(f"A[0]={arr[0]} ≠ {target}; start doubling from 1.", 1, bound=1, phase="doubling")

    i = 1
    while i < n and arr[i] < target:
        t.emit(f"A[{i}]={arr[i]} < {target}: double the bound to {i * 2}.", 3, bound=i, current=i)
        i *= 2

    lo, hi = i // 2, min(i, n - 1)
    t.emit(f"Target lies in [{lo}..{hi}]: binary search there.", 4,
           title="Binary search", phase="binary", bound=i, low=lo, high=hi, current=None)

    while lo <= hi:
        mid = (lo + hi) // 2
        if arr[mid] == target:
            t.finish(found_at(target, mid), 6, low=lo, high=hi, mid=mid, found=True, result=mid)
            return
        if arr[mid] < target:
            t.emit(f"A[{mid}]={arr[mid]} < {target}: go right.", 6, low=lo, high=hi, mid=mid)
            lo = mid + 1
        else:
            t.emit(f"A[{mid}]={arr[mid]} > {target}: go left.", 6, low=lo, high=hi, mid=mid)
            hi = mid - 1

    t.finish(not_found(target), 7, mid=None, found=False, result=-1)
