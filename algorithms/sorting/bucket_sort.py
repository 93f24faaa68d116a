"""
bucket_sort.py — Bucket Sort
=============================
Scatter into ⌈√n⌉ equal-width buckets over [min, max], insertion-sort
each bucket, then gather in bucket order.
"""

import math
from typing import List, Optional

from algorithms.sorting.common import clear_marks, random_array
from algorithms.step import Tracer
from algorithms.validate import require_numbers


PSEUDOCODE: List[str] = [
    "procedure bucketSort(A):",                  # 0
    "    k ← ⌈√n⌉; create k empty buckets",      # 1
    "    for x in A:",                           # 2
    "        buckets[⌊k·(x-min)/(max-min+1)⌋].append(x)",  # 3
    "    for each bucket: insertionSort(bucket)",  # 4
    "    A ← concatenate(buckets)",              # 5
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"array": random_array(seed)}


def bucket_sort(t: Tracer) -> None:
    arr = require_numbers(t.state)
    n   = len(arr)

    t.emit(f"Bucket sort on {n} elements.", 0)

    k  = max(1, math.ceil(math.sqrt(n)))
    lo = min(arr)
    span = max(arr) - lo + 1
    buckets: List[list] = [[] for _ in range(k)]
    t.emit(f"Create {k} buckets covering [{lo}, {lo + span}).", 1,
           title="Scatter", bucket_count=k, buckets=buckets)

    for i, x in enumerate(arr):
        b = min(k - 1, int(k * (x - lo) / span))
        buckets[b].append(x)
        t.emit(f"A[{i}]={x} goes to bucket {b}.", 3, comparing=[i], bucket=b)

    t.emit("Sort each bucket with insertion sort.", 4, title="Sort buckets",
           **clear_marks(bucket=None))
    for b, items in enumerate(buckets):
        if len(items) < 2:
            continue
        for i in range(1, len(items)):
            key = items[i]
            j = i - 1
            while j >= 0 and items[j] > key:
                items[j + 1] = items[j]
                j -= 1
            items[j + 1] = key
        t.emit(f"Bucket {b} sorted: {items}.", 4, bucket=b)

    t.emit("Gather the buckets back into the array.", 5, title="Gather", bucket=None)
    k_out = 0
    for b, items in enumerate(buckets):
        for x in items:
            arr[k_out] = x
            t.emit(f"Write {x} from bucket {b} to A[{k_out}].", 5,
                   bucket=b, writing=k_out, sorted=list(range(k_out + 1)))
            k_out += 1

    t.finish("Array is sorted.", 5,
             **clear_marks(sorted=list(range(n)), bucket=None, writing=None))
