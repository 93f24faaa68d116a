"""
insertion_sort.py — Insertion Sort
===================================
Takes each element as `key` and shifts larger sorted elements one
place right until the key's slot opens up.
"""

from typing import List, Optional

from algorithms.sorting.common import clear_marks, random_array
from algorithms.step import Tracer
from algorithms.validate import require_numbers


PSEUDOCODE: List[str] = [
    "procedure insertionSort(A):",               # 0
    "    for i ← 1 to n-1:",                     # 1
    "        key ← A[i]; j ← i-1",               # 2
    "        while j ≥ 0 and A[j] > key:",       # 3
    "            A[j+1] ← A[j]",                 # 4
    "            j ← j-1",                       # 5
    "        A[j+1] ← key",                      # 6
    "    return A",                              # 7
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"array": random_array(seed)}


def insertion_sort(t: Tracer) -> None:
    arr = require_numbers(t.state)
    n   = len(arr)

    t.emit(f"Insertion sort on {n} elements. A[0] alone is a sorted prefix.", 0)

    for i in range(1, n):
        key = arr[i]
        j   = i - 1
        t.emit(f"Pick key = A[{i}] = {key}.", 2, **clear_marks(key=key, key_index=i))
        while j >= 0:
            t.emit(f"Compare A[{j}]={arr[j]} with key {key}.", 3, comparing=[j], swapping=[])
            if arr[j] <= key:
                break
            arr[j + 1] = arr[j]
            t.emit(f"{arr[j]} > {key}: shift it right to index {j + 1}.", 4, swapping=[j, j + 1])
            j -= 1
        arr[j + 1] = key
        t.emit(f"Insert {key} at index {j + 1}.", 6,
               **clear_marks(key_index=j + 1, sorted=list(range(i + 1))))

    t.finish("Array is sorted.", 7, **clear_marks(sorted=list(range(n)), key=None, key_index=None))
