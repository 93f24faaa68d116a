"""
quick_sort.py — Quick Sort (Lomuto partition)
==============================================
Pivot is the last element of the range.  `boundary` is the end of the
"≤ pivot" region; each placed pivot joins `sorted`.
"""

from typing import List, Optional

from algorithms.sorting.common import clear_marks, random_array
from algorithms.step import Tracer
from algorithms.validate import require_numbers


PSEUDOCODE: List[str] = [
    "procedure quickSort(A, lo, hi):",           # 0
    "    if lo < hi:",                           # 1
    "        p ← partition(A, lo, hi)",          # 2
    "        quickSort(A, lo, p-1)",             # 3
    "        quickSort(A, p+1, hi)",             # 4
    "procedure partition(A, lo, hi):",           # 5
    "    pivot ← A[hi]; i ← lo-1",               # 6
    "    for j ← lo to hi-1:",                   # 7
    "        if A[j] ≤ pivot:",                  # 8
    "            i ← i+1; swap(A[i], A[j])",     # 9
    "    swap(A[i+1], A[hi])",                   # 10
    "    return i+1",                            # 11
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"array": random_array(seed)}


def quick_sort(t: Tracer) -> None:
    arr = require_numbers(t.state)
    n   = len(arr)
    placed: List[int] = []

    t.emit(f"Quick sort on {n} elements.", 0)
    _sort(t, arr, 0, n - 1, placed)
    t.finish("Array is sorted.", 0,
             **clear_marks(sorted=list(range(n)), pivot_index=None, boundary=None, active_range=[]))


def _sort(t: Tracer, arr: list, lo: int, hi: int, placed: List[int]) -> None:
    if lo > hi:
        return
    if lo == hi:
        placed.append(lo)
        t.emit(f"Single element A[{lo}]={arr[lo]} is in place.", 1,
               **clear_marks(sorted=sorted(placed), active_range=[lo, hi]))
        return
    p = _partition(t, arr, lo, hi, placed)
    _sort(t, arr, lo, p - 1, placed)
    _sort(t, arr, p + 1, hi, placed)


def _partition(t: Tracer, arr: list, lo: int, hi: int, placed: List[int]) -> int:
    pivot = arr[hi]
    i = lo - 1
    t.emit(f"Partition [{lo}..{hi}] around pivot A[{hi}]={pivot}.", 6,
           **clear_marks(pivot_index=hi, boundary=i, active_range=[lo, hi]))
    for j in range(lo, hi):
        t.emit(f"Compare A[{j}]={arr[j]} with pivot {pivot}.", 8, comparing=[j, hi], swapping=[])
        if arr[j] <= pivot:
            i += 1
            arr[i], arr[j] = arr[j], arr[i]
            t.emit(f"{arr[i]} ≤ {pivot}: swap A[{i}] and A[{j}].", 9,
                   swapping=[i, j], boundary=i)
    arr[i + 1], arr[hi] = arr[hi], arr[i + 1]
    placed.append(i + 1)
    t.emit(f"Place pivot {pivot} at index {i + 1}.", 10,
           comparing=[], swapping=[i + 1, hi], pivot_index=i + 1, sorted=sorted(placed))
    return i + 1
