"""
selection_sort.py — Selection Sort
===================================
Grows a sorted prefix by selecting the minimum of the unsorted suffix
and swapping it into place.  `min_index` tracks the running minimum.
"""

from typing import List, Optional

from algorithms.sorting.common import clear_marks, random_array
from algorithms.step import Tracer
from algorithms.validate import require_numbers


PSEUDOCODE: List[str] = [
    "procedure selectionSort(A):",               # 0
    "    for i ← 0 to n-2:",                     # 1
    "        min ← i",                           # 2
    "        for j ← i+1 to n-1:",               # 3
    "            if A[j] < A[min]:",             # 4
    "                min ← j",                   # 5
    "        swap(A[i], A[min])",                # 6
    "    return A",                              # 7
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"array": random_array(seed)}


def selection_sort(t: Tracer) -> None:
    arr = require_numbers(t.state)
    n   = len(arr)

    t.emit(f"Selection sort on {n} elements.", 0)

    for i in range(n - 1):
        lo = i
        t.emit(f"Position {i}: assume A[{i}]={arr[i]} is the minimum.", 2,
               **clear_marks(min_index=lo))
        for j in range(i + 1, n):
            t.emit(f"Compare A[{j}]={arr[j]} with current minimum A[{lo}]={arr[lo]}.", 4,
                   comparing=[j, lo])
            if arr[j] < arr[lo]:
                lo = j
                t.emit(f"New minimum {arr[lo]} at index {lo}.", 5, min_index=lo)
        if lo != i:
            arr[i], arr[lo] = arr[lo], arr[i]
            t.emit(f"Swap A[{i}] and A[{lo}]: {arr[i]} moves to position {i}.", 6,
                   comparing=[], swapping=[i, lo], sorted=list(range(i + 1)))
        else:
            t.emit(f"{arr[i]} is already in position {i}.", 6,
                   **clear_marks(sorted=list(range(i + 1))))

    t.finish("Array is sorted.", 7, **clear_marks(sorted=list(range(n)), min_index=None))
