"""
bubble_sort.py — Bubble Sort
=============================
Repeatedly walks the array swapping adjacent out-of-order pairs.
After pass i the i largest values sit at the end in their final place.
Stops early when a pass makes no swap.

Records a step for:
  1. Every adjacent comparison
  2. Every swap
  3. End of each pass (newest element marked sorted)
"""

from typing import List, Optional

from algorithms.sorting.common import clear_marks, random_array
from algorithms.step import Tracer
from algorithms.validate import require_numbers


PSEUDOCODE: List[str] = [
    "procedure bubbleSort(A):",                  # 0
    "    for i ← 0 to n-2:",                     # 1
    "        swapped ← false",                   # 2
    "        for j ← 0 to n-i-2:",               # 3
    "            if A[j] > A[j+1]:",             # 4
    "                swap(A[j], A[j+1])",        # 5
    "                swapped ← true",            # 6
    "        if not swapped: break",             # 7
    "    return A",                              # 8
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"array": random_array(seed)}


def bubble_sort(t: Tracer) -> None:
    arr = require_numbers(t.state)
    n   = len(arr)
    done: List[int] = []

    t.emit(f"Bubble sort on {n} elements.", 0)

    for i in range(n - 1):
        swapped = False
        t.emit(f"Pass {i + 1}: bubble the largest remaining value to index {n - i - 1}.", 1,
               **clear_marks())
        for j in range(n - i - 1):
            t.emit(f"Compare A[{j}]={arr[j]} with A[{j + 1}]={arr[j + 1]}.", 4,
                   comparing=[j, j + 1], swapping=[])
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
                t.emit(f"{arr[j + 1]} > {arr[j]}, so swap them.", 5, swapping=[j, j + 1])
        done.insert(0, n - i - 1)
        if not swapped:
            t.emit(f"No swaps in pass {i + 1}: the array is already in order.", 7,
                   **clear_marks(sorted=list(range(n))))
            break
        t.emit(f"{arr[n - i - 1]} is now in its final position.", 1,
               **clear_marks(sorted=sorted(done)))

    t.finish("Array is sorted.", 8, **clear_marks(sorted=list(range(n))))
