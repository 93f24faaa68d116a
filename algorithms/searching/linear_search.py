"""
linear_search.py — Linear Search
=================================
Checks every index left to right.  Works on unsorted input.
"""

from typing import List, Optional

from algorithms.searching.common import check_search_state, found_at, not_found, random_search_state
from algorithms.step import Tracer


PSEUDOCODE: List[str] = [
    "procedure linearSearch(A, x):",             # 0
    "    for i ← 0 to n-1:",                     # 1
    "        if A[i] = x: return i",             # 2
    "    return -1",                             # 3
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return random_search_state(seed)


def linear_search(t: Tracer) -> None:
    arr, target = check_search_state(t.state, need_sorted=False)

    t.emit(f"Search for {target} among {len(arr)} elements, left to right.", 0)

    checked: List[int] = []
    for i, v in enumerate(arr):
        checked.append(i)
        if v == target:
            t.finish(found_at(target, i), 2, current=i, checked=list(checked), found=True, result=i)
            return
        t.emit(f"A[{i}]={v} ≠ {target}.", 2, current=i, checked=list(checked))

    t.finish(not_found(target), 3, current=None, found=False, result=-1)
