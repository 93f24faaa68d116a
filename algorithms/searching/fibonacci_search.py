"""
fibonacci_search.py — Fibonacci Search
=======================================
Splits the range at Fibonacci offsets instead of halves.  The Fibonacci
numbers used are computed once, in the first step after the initial
one, and stay in `fib_numbers` for every later step.
"""

from typing import List, Optional

from algorithms.searching.common import check_search_state, found_at, not_found, random_search_state
from algorithms.step import Tracer


PSEUDOCODE: List[str] = [
    "procedure fibonacciSearch(A, x):",          # 0
    "    find smallest F(m) ≥ n; offset ← -1",   # 1
    "    while F(m) > 1:",                       # 2
    "        i ← min(offset + F(m-2), n-1)",     # 3
    "        if A[i] < x: m ← m-1; offset ← i",  # 4
    "        elif A[i] > x: m ← m-2",            # 5
    "        else: return i",                    # 6
    "    if F(m-1) and A[offset+1] = x: return offset+1",  # 7
    "    return -1",                             # 8
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return random_search_state(seed)


def fibonacci_search(t: Tracer) -> None:
    arr, target = check_search_state(t.state)
    n = len(arr)

    t.emit(f"Search for {target} using Fibonacci offsets.", 0)

    fibs = [0, 1]
    while fibs[-1] < n or len(fibs) < 3:
        fibs.append(fibs[-1] + fibs[-2])
    m = len(fibs) - 1
    t.emit(f"Fibonacci numbers up to F({m})={fibs[m]} ≥ n={n}.", 1,
           title="Precompute", fib_numbers=list(fibs), fib_index=m, offset=-1)

    offset = -1
    while fibs[m] > 1:
        i = min(offset + fibs[m - 2], n - 1)
        if arr[i] == target:
            t.finish(found_at(target, i), 6, fib_index=m, offset=offset, current=i,
                     found=True, result=i)
            return
        if arr[i] < target:
            t.emit(f"A[{i}]={arr[i]} < {target}: drop the front, step down one Fibonacci number.", 4,
                   fib_index=m, offset=offset, current=i)
            m -= 1
            offset = i
        else:
            t.emit(f"A[{i}]={arr[i]} > {target}: keep the front, step down two Fibonacci numbers.", 5,
                   fib_index=m, offset=offset, current=i)
            m -= 2

    if fibs[m - 1] and offset + 1 < n and arr[offset + 1] == target:
        t.finish(found_at(target, offset + 1), 7, fib_index=m, offset=offset,
                 current=offset + 1, found=True, result=offset + 1)
        return

    t.finish(not_found(target), 8, fib_index=m, offset=offset, current=None, found=False, result=-1)
