"""
merge_sort.py — Merge Sort
===========================
Top-down merge sort.  The recursion receives the tracer explicitly;
every split, comparison and write-back during a merge is a step.

State keys beyond `array`:
  • active_range – [lo, hi] of the sub-array being worked on
  • left / right – copies of the two halves during a merge
  • writing      – index just written
"""

from typing import List, Optional

from algorithms.sorting.common import clear_marks, random_array
from algorithms.step import Tracer
from algorithms.validate import require_numbers


PSEUDOCODE: List[str] = [
    "procedure mergeSort(A, lo, hi):",           # 0
    "    if lo ≥ hi: return",                    # 1
    "    mid ← (lo + hi) / 2",                   # 2
    "    mergeSort(A, lo, mid)",                 # 3
    "    mergeSort(A, mid+1, hi)",               # 4
    "    merge(A, lo, mid, hi)",                 # 5
    "procedure merge(A, lo, mid, hi):",          # 6
    "    while both halves non-empty:",          # 7
    "        take the smaller head into A[k]",   # 8
    "    copy the rest of the remaining half",   # 9
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"array": random_array(seed)}


def merge_sort(t: Tracer) -> None:
    arr = require_numbers(t.state)
    n   = len(arr)

    t.emit(f"Merge sort on {n} elements.", 0)
    _sort(t, arr, 0, n - 1)
    t.finish("Array is sorted.", 0,
             **clear_marks(sorted=list(range(n)), active_range=[], left=[], right=[], writing=None))


def _sort(t: Tracer, arr: list, lo: int, hi: int) -> None:
    if lo >= hi:
        return
    mid = (lo + hi) // 2
    t.emit(f"Split [{lo}..{hi}] into [{lo}..{mid}] and [{mid + 1}..{hi}].", 2,
           **clear_marks(active_range=[lo, hi], writing=None))
    _sort(t, arr, lo, mid)
    _sort(t, arr, mid + 1, hi)
    _merge(t, arr, lo, mid, hi)


def _merge(t: Tracer, arr: list, lo: int, mid: int, hi: int) -> None:
    left  = arr[lo:mid + 1]
    right = arr[mid + 1:hi + 1]
    t.emit(f"Merge {left} and {right}.", 6,
           **clear_marks(active_range=[lo, hi], left=list(left), right=list(right), writing=None))

    i = j = 0
    k = lo
    while i < len(left) and j < len(right):
        t.emit(f"Compare {left[i]} (left) with {right[j]} (right).", 7,
               comparing=[lo + i, mid + 1 + j])
        if left[i] <= right[j]:
            arr[k] = left[i]
            i += 1
        else:
            arr[k] = right[j]
            j += 1
        t.emit(f"Write {arr[k]} to A[{k}].", 8, comparing=[], writing=k)
        k += 1

    while i < len(left):
        arr[k] = left[i]
        t.emit(f"Copy remaining {left[i]} to A[{k}].", 9, comparing=[], writing=k)
        i += 1
        k += 1
    while j < len(right):
        arr[k] = right[j]
        t.emit(f"Copy remaining {right[j]} to A[{k}].", 9, comparing=[], writing=k)
        j += 1
        k += 1
