"""
kmp.py — Knuth–Morris–Pratt
============================
Phase 1 builds the LPS table (longest proper prefix that is also a
suffix) for every pattern prefix.  Phase 2 scans the text once; on a
mismatch the pattern index falls back to lps[j-1] instead of moving
the text pointer back.
"""

from typing import List, Optional

from algorithms.step import Tracer
from algorithms.strings.common import MATCH, MISMATCH, SAMPLE_TEXT, check_text, clear, search_marks, summary


PSEUDOCODE: List[str] = [
    "def KMP(T, P):",                                  # 0
    "    lps ← prefix function of P",                  # 1
    "    i ← 0; j ← 0",                                # 2
    "    while i < n:",                                # 3
    "        if T[i] = P[j]: i += 1; j += 1",          # 4
    "            if j = m: report i - m; j ← lps[j-1]",  # 5
    "        elif j > 0: j ← lps[j-1]",                # 6
    "        else: i += 1",                            # 7
    "    return matches",                              # 8
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"text": SAMPLE_TEXT, "pattern": "ABABCABAB"}


def kmp(t: Tracer) -> None:
    text, pattern = check_text(t.state)
    n, m = len(text), len(pattern)

    t.emit(f"Knuth–Morris–Pratt search for '{pattern}' in a text of {n} characters.", 0)

    lps = [0] * m
    t.emit("lps[0] = 0: a single character has no proper border.", 1,
           title="Build LPS table", phase="preprocess", lps=lps, lps_index=0, lps_length=0)
    length, i = 0, 1
    while i < m:
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            t.emit(f"P[{i}] = P[{length - 1}] = '{pattern[i]}': lps[{i}] = {length}.", 1,
                   lps_index=i, lps_length=length)
            i += 1
        elif length:
            old = length
            length = lps[length - 1]
            t.emit(f"P[{i}] ≠ P[{old}]: fall back to border length {length}.", 1,
                   lps_index=i, lps_length=length)
        else:
            lps[i] = 0
            t.emit(f"P[{i}] = '{pattern[i]}' has no border: lps[{i}] = 0.", 1,
                   lps_index=i, lps_length=0)
            i += 1

    t.emit("LPS table complete: [" + ", ".join(map(str, lps)) + "].", 2,
           title="Search", lps_index=None, lps_length=None, i=0, j=0, **search_marks(text, pattern))
    th, ph = t.state["text_highlight"], t.state["pattern_highlight"]
    matches: List[int] = t.state["matches"]
    comparisons = 0
    i = j = 0
    while i < n:
        comparisons += 1
        if text[i] == pattern[j]:
            th[i] = ph[j] = MATCH
            t.emit(f"T[{i}] = P[{j}] = '{text[i]}'.", 4, offset=i - j, i=i, j=j, comparisons=comparisons)
            i += 1
            j += 1
            if j == m:
                matches.append(i - m)
                j = lps[j - 1]
                t.emit(f"Full match at offset {i - m}; continue with j = lps[{m - 1}] = {j}.", 5,
                       i=i, j=j)
                clear(th)
                clear(ph)
        elif j > 0:
            th[i] = ph[j] = MISMATCH
            t.emit(f"T[{i}] = '{text[i]}' ≠ P[{j}] = '{pattern[j]}': j ← lps[{j - 1}] = {lps[j - 1]}.", 6,
                   offset=i - j, i=i, j=j, comparisons=comparisons)
            j = lps[j - 1]
            clear(th)
            clear(ph)
        else:
            th[i] = ph[0] = MISMATCH
            t.emit(f"T[{i}] = '{text[i]}' ≠ P[0]: advance the text pointer.", 7,
                   offset=i, i=i, j=0, comparisons=comparisons)
            i += 1
            clear(th)
            clear(ph)

    t.finish(summary(pattern, matches, comparisons), 8, phase="done")
