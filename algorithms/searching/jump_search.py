"""
jump_search.py — Jump Search
=============================
Jump ahead in blocks of ⌊√n⌋ until the block end reaches the target,
then scan that block linearly.  `block_size` is fixed in the first
step after the initial one and carried in every step after it.
"""

import math
from typing import List, Optional

from algorithms.searching.common import check_search_state, found_at, not_found, random_search_state
from algorithms.step import Tracer


PSEUDOCODE: List[str] = [
    "procedure jumpSearch(A, x):",               # 0
    "    step ← ⌊√n⌋; prev ← 0",                 # 1
    "    while A[min(step, n)-1] < x:",          # 2
    "        prev ← step; step ← step + ⌊√n⌋",   # 3
    "        if prev ≥ n: return -1",            # 4
    "    for i ← prev to min(step, n)-1:",       # 5
    "        if A[i] = x: return i",             # 6
    "    return -1",                             # 7
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return random_search_state(seed)


def jump_search(t: Tracer) -> None:
    arr, target = check_search_state(t.state)
    n = len(arr)

    t.emit(f"Search for {target} by jumping through {n} sorted elements.", 0)

    block = max(1, int(math.isqrt(n)))
    t.emit(f"Block size = ⌊√{n}⌋ = {block}.", 1, block_size=block, block_start=0, block_end=None)

    prev, step = 0, block
    while True:
        end = min(step, n) - 1
        t.emit(f"Block end A[{end}]={arr[end]} vs {target}.", 2,
               block_start=prev, block_end=end, current=end)
        if arr[end] >= target:
            break
        prev, step = step, step + block
        if prev >= n:
            t.finish(not_found(target) + " It is larger than every element.", 4,
                     current=None, found=False, result=-1)
            return

    t.emit(f"Target can only be in block [{prev}..{min(step, n) - 1}]: scan it.", 5,
           block_start=prev, block_end=min(step, n) - 1)
    for i in range(prev, min(step, n)):
        if arr[i] == target:
            t.finish(found_at(target, i), 6, current=i, found=True, result=i)
            return
        t.emit(f"A[{i}]={arr[i]} ≠ {target}.", 6, current=i)
        if arr[i] > target:
            break

    t.finish(not_found(target), 7, current=None, found=False, result=-1)
