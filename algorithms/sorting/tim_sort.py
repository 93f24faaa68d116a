"""
tim_sort.py — Tim Sort (simplified)
====================================
The teaching version of Timsort: cut the array into fixed runs of
RUN elements, insertion-sort each run, then merge runs pairwise with
doubling width.  `runs` lists the [lo, hi] bounds currently sorted.
"""

from typing import List, Optional

from algorithms.sorting.common import clear_marks, random_array
from algorithms.step import Tracer
from algorithms.validate import require_numbers

RUN = 4

PSEUDOCODE: List[str] = [
    "procedure timSort(A):",                     # 0
    "    for each run of RUN elements:",         # 1
    "        insertionSort(run)",                # 2
    "    for size ← RUN; size < n; size ← 2·size:",  # 3
    "        for lo ← 0 step 2·size:",           # 4
    "            merge(A[lo..lo+size-1], A[lo+size..lo+2·size-1])",  # 5
    "    return A",                              # 6
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"array": random_array(seed)}


def tim_sort(t: Tracer) -> None:
    arr = require_numbers(t.state)
    n   = len(arr)

    t.emit(f"Tim sort on {n} elements with run size {RUN}.", 0)

    runs: List[List[int]] = []
    t.emit("Phase 1: insertion-sort each run.", 1, title="Sort runs", run_size=RUN, runs=runs)
    for lo in range(0, n, RUN):
        hi = min(lo + RUN - 1, n - 1)
        t.emit(f"Insertion-sort run [{lo}..{hi}].", 2, **clear_marks(active_range=[lo, hi]))
        for i in range(lo + 1, hi + 1):
            key = arr[i]
            j = i - 1
            while j >= lo:
                t.emit(f"Compare A[{j}]={arr[j]} with {key}.", 2, comparing=[j, j + 1], swapping=[])
                if arr[j] <= key:
                    break
                arr[j + 1] = arr[j]
                t.emit(f"Shift {arr[j]} right.", 2, swapping=[j, j + 1])
                j -= 1
            arr[j + 1] = key
        runs.append([lo, hi])
        t.emit(f"Run [{lo}..{hi}] is sorted.", 2, **clear_marks())

    size = RUN
    while size < n:
        t.emit(f"Phase 2: merge runs of width {size}.", 3, title="Merge runs",
               **clear_marks(merge_width=size))
        for lo in range(0, n, 2 * size):
            mid = min(lo + size - 1, n - 1)
            hi  = min(lo + 2 * size - 1, n - 1)
            if mid < hi:
                _merge(t, arr, lo, mid, hi)
                runs[:] = [r for r in runs if not (lo <= r[0] <= hi)] + [[lo, hi]]
                runs.sort()
                t.emit(f"Merged run [{lo}..{hi}].", 5, **clear_marks(writing=None))
        size *= 2

    t.finish("Array is sorted.", 6,
             **clear_marks(sorted=list(range(n)), runs=[[0, n - 1]], active_range=[], writing=None))


def _merge(t: Tracer, arr: list, lo: int, mid: int, hi: int) -> None:
    left  = arr[lo:mid + 1]
    right = arr[mid + 1:hi + 1]
    t.emit(f"Merge [{lo}..{mid}] with [{mid + 1}..{hi}].", 5,
           **clear_marks(active_range=[lo, hi]))
    i = j = 0
    k = lo
    while i < len(left) or j < len(right):
        if j >= len(right) or (i < len(left) and left[i] <= right[j]):
            arr[k] = left[i]
            i += 1
        else:
            arr[k] = right[j]
            j += 1
        t.emit(f"Write {arr[k]} to A[{k}].", 5, writing=k)
        k += 1
