"""
shell_sort.py — Shell Sort (gap halving)
=========================================
Gapped insertion sort with gaps n/2, n/4, …, 1.
"""

from typing import List, Optional

from algorithms.sorting.common import clear_marks, random_array
from algorithms.step import Tracer
from algorithms.validate import require_numbers


PSEUDOCODE: List[str] = [
    "procedure shellSort(A):",                   # 0
    "    for gap ← n/2; gap > 0; gap ← gap/2:",  # 1
    "        for i ← gap to n-1:",               # 2
    "            temp ← A[i]; j ← i",            # 3
    "            while j ≥ gap and A[j-gap] > temp:",  # 4
    "                A[j] ← A[j-gap]; j ← j-gap",  # 5
    "            A[j] ← temp",                   # 6
    "    return A",                              # 7
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"array": random_array(seed)}


def shell_sort(t: Tracer) -> None:
    arr = require_numbers(t.state)
    n   = len(arr)

    t.emit(f"Shell sort on {n} elements.", 0)

    gap = n // 2
    while gap > 0:
        t.emit(f"Gap = {gap}: insertion-sort every {gap}-th element.", 1,
               **clear_marks(gap=gap))
        for i in range(gap, n):
            temp = arr[i]
            j = i
            while j >= gap:
                t.emit(f"Compare A[{j - gap}]={arr[j - gap]} with {temp}.", 4,
                       comparing=[j - gap, j], swapping=[])
                if arr[j - gap] <= temp:
                    break
                arr[j] = arr[j - gap]
                t.emit(f"Move {arr[j]} from index {j - gap} to {j}.", 5, swapping=[j - gap, j])
                j -= gap
            if j != i:
                arr[j] = temp
                t.emit(f"Insert {temp} at index {j}.", 6, comparing=[], swapping=[j])
        gap //= 2

    t.finish("Array is sorted.", 7, **clear_marks(sorted=list(range(n)), gap=0))
