"""
counting_sort.py — Counting Sort
=================================
Stable counting sort for small non-negative integers.

Phases (each with its own steps):
  1. Count occurrences into `count`
  2. Prefix sums: count[v] becomes the end position of v
  3. Walk the input right-to-left placing each value into `output`
  4. Copy `output` back into `array`
"""

from typing import List, Optional

from algorithms.sorting.common import clear_marks, random_array
from algorithms.step import Tracer
from algorithms.validate import require_numbers


PSEUDOCODE: List[str] = [
    "procedure countingSort(A):",                # 0
    "    count ← zeros(max(A)+1)",               # 1
    "    for x in A: count[x] ← count[x]+1",     # 2
    "    for v ← 1 to max: count[v] += count[v-1]",  # 3
    "    for i ← n-1 downto 0:",                 # 4
    "        count[A[i]] ← count[A[i]]-1",       # 5
    "        out[count[A[i]]] ← A[i]",           # 6
    "    A ← out",                               # 7
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"array": random_array(seed, high=20)}


def counting_sort(t: Tracer) -> None:
    arr = require_numbers(t.state, integers=True, non_negative=True)
    n   = len(arr)

    t.emit(f"Counting sort on {n} non-negative integers.", 0)

    top   = max(arr)
    count = [0] * (top + 1)
    t.emit(f"Create a count array for values 0..{top}.", 1,
           title="Count", phase="count", count=count, output=[None] * n)

    for i, x in enumerate(arr):
        count[x] += 1
        t.emit(f"Read A[{i}]={x}: count[{x}] = {count[x]}.", 2, comparing=[i], count_index=x)

    t.emit("Turn counts into end positions with a running sum.", 3,
           title="Prefix sums", phase="prefix", comparing=[], count_index=None)
    for v in range(1, top + 1):
        count[v] += count[v - 1]
        t.emit(f"count[{v}] = {count[v]}.", 3, count_index=v)

    output = t.state["output"]
    t.emit("Place values right-to-left so equal keys keep their order.", 4,
           title="Place", phase="place", count_index=None)
    for i in range(n - 1, -1, -1):
        x = arr[i]
        count[x] -= 1
        output[count[x]] = x
        t.emit(f"A[{i}]={x} goes to output[{count[x]}].", 6,
               comparing=[i], count_index=x, writing=count[x])

    for i in range(n):
        arr[i] = output[i]
    t.emit("Copy the output back into the array.", 7,
           title="Copy back", phase="copy", **clear_marks(count_index=None, writing=None))

    t.finish("Array is sorted.", 7, **clear_marks(sorted=list(range(n)), phase="done"))
