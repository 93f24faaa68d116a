"""
heap_sort.py — Heap Sort
=========================
Build a max-heap bottom-up, then repeatedly swap the root to the end
and sift the new root down.  `heap_size` marks the live heap prefix.
"""

from typing import List, Optional

from algorithms.sorting.common import clear_marks, random_array
from algorithms.step import Tracer
from algorithms.validate import require_numbers


PSEUDOCODE: List[str] = [
    "procedure heapSort(A):",                    # 0
    "    for i ← n/2-1 downto 0: heapify(A, n, i)",  # 1
    "    for end ← n-1 downto 1:",               # 2
    "        swap(A[0], A[end])",                # 3
    "        heapify(A, end, 0)",                # 4
    "procedure heapify(A, size, i):",            # 5
    "    largest ← max of i, 2i+1, 2i+2",        # 6
    "    if largest ≠ i:",                       # 7
    "        swap(A[i], A[largest]); heapify(A, size, largest)",  # 8
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"array": random_array(seed)}


def heap_sort(t: Tracer) -> None:
    arr = require_numbers(t.state)
    n   = len(arr)

    t.emit(f"Heap sort on {n} elements.", 0)
    t.emit("Phase 1: build a max-heap.", 1, title="Build heap", heap_size=n, sorted=[])
    for i in range(n // 2 - 1, -1, -1):
        _heapify(t, arr, n, i)

    done: List[int] = []
    t.emit("Phase 2: move the maximum to the end, shrink the heap.", 2,
           title="Extract", **clear_marks())
    for end in range(n - 1, 0, -1):
        arr[0], arr[end] = arr[end], arr[0]
        done.insert(0, end)
        t.emit(f"Swap root {arr[end]} to index {end}.", 3,
               comparing=[], swapping=[0, end], heap_size=end, sorted=list(done))
        _heapify(t, arr, end, 0)

    t.finish("Array is sorted.", 0, **clear_marks(sorted=list(range(n)), heap_size=0))


def _heapify(t: Tracer, arr: list, size: int, i: int) -> None:
    while True:
        largest = i
        left, right = 2 * i + 1, 2 * i + 2
        kids = [c for c in (left, right) if c < size]
        if not kids:
            return
        t.emit(f"Heapify at index {i}: compare {arr[i]} with its children.", 6,
               comparing=[i] + kids, swapping=[])
        for c in kids:
            if arr[c] > arr[largest]:
                largest = c
        if largest == i:
            return
        arr[i], arr[largest] = arr[largest], arr[i]
        t.emit(f"Swap {arr[largest]} down with larger child {arr[i]}.", 8,
               comparing=[], swapping=[i, largest])
        i = largest
