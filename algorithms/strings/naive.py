"""
naive.py — Naive Pattern Search
================================
Tries every alignment, comparing left to right until a mismatch.
"""

from typing import List, Optional

from algorithms.step import Tracer
from algorithms.strings.common import MATCH, MISMATCH, SAMPLE_TEXT, check_text, clear, search_marks, summary


PSEUDOCODE: List[str] = [
    "def naiveSearch(T, P):",                  # 0
    "    for s in 0 … n-m:",                   # 1
    "        j ← 0",                           # 2
    "        while j < m and T[s+j] = P[j]:",  # 3
    "            j ← j + 1",                   # 4
    "        if j = m: report match at s",     # 5
    "    return matches",                      # 6
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"text": SAMPLE_TEXT, "pattern": "ABABCABAB"}


def naive(t: Tracer) -> None:
    text, pattern = check_text(t.state)
    n, m = len(text), len(pattern)

    t.emit(f"Search for '{pattern}' in a text of {n} characters by trying every alignment.", 0)

    t.emit("Start at offset 0.", 1, **search_marks(text, pattern))
    th, ph = t.state["text_highlight"], t.state["pattern_highlight"]
    matches: List[int] = t.state["matches"]
    comparisons = 0

    for s in range(n - m + 1):
        clear(th)
        clear(ph)
        t.emit(f"Align the pattern at offset {s}.", 1, offset=s)
        j = 0
        while j < m:
            comparisons += 1
            if text[s + j] == pattern[j]:
                th[s + j] = ph[j] = MATCH
                t.emit(f"T[{s + j}] = '{text[s + j]}' matches P[{j}].", 3, comparisons=comparisons)
                j += 1
            else:
                th[s + j] = ph[j] = MISMATCH
                t.emit(f"T[{s + j}] = '{text[s + j]}' ≠ P[{j}] = '{pattern[j]}': shift by one.", 3,
                       comparisons=comparisons)
                break
        if j == m:
            matches.append(s)
            t.emit(f"Full match at offset {s}.", 5)

    clear(th)
    clear(ph)
    t.finish(summary(pattern, matches, comparisons), 6, phase="done")
