"""
radix_sort.py — LSD Radix Sort (base 10)
=========================================
One stable bucket pass per decimal digit, least significant first.
`buckets` holds the ten digit queues of the current pass; `exp` is the
digit's place value (1, 10, 100 …).
"""

from typing import List, Optional

from algorithms.sorting.common import clear_marks, random_array
from algorithms.step import Tracer
from algorithms.validate import require_numbers


PSEUDOCODE: List[str] = [
    "procedure radixSort(A):",                   # 0
    "    for exp ← 1 while max(A)/exp > 0, exp ← exp·10:",  # 1
    "        buckets ← 10 empty lists",          # 2
    "        for x in A: buckets[(x/exp) mod 10].append(x)",  # 3
    "        A ← concatenate(buckets)",          # 4
    "    return A",                              # 5
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"array": random_array(seed)}


def radix_sort(t: Tracer) -> None:
    arr = require_numbers(t.state, integers=True, non_negative=True)
    n   = len(arr)

    t.emit(f"Radix sort on {n} non-negative integers, base 10.", 0)

    top = max(arr)
    exp = 1
    passes = 0
    while top // exp > 0 or passes == 0:
        passes += 1
        buckets: List[List[int]] = [[] for _ in range(10)]
        t.emit(f"Pass {passes}: distribute by the digit worth {exp}.", 2,
               title=f"Digit ×{exp}", **clear_marks(exp=exp, buckets=buckets))
        for i, x in enumerate(arr):
            d = (x // exp) % 10
            buckets[d].append(x)
            t.emit(f"A[{i}]={x} has digit {d}: append to bucket {d}.", 3,
                   comparing=[i], bucket=d)
        k = 0
        for b in buckets:
            for x in b:
                arr[k] = x
                k += 1
        t.emit(f"Collect buckets 0..9 back into the array (pass {passes}).", 4,
               **clear_marks(bucket=None))
        exp *= 10

    t.finish(f"Array is sorted after {passes} digit pass(es).", 5,
             **clear_marks(sorted=list(range(n)), buckets=[[] for _ in range(10)]))
