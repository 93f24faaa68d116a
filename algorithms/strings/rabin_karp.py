"""
rabin_karp.py — Rabin–Karp
===========================
Rolling polynomial hash with base d = 256 modulo q = 101.  Windows
whose hash equals the pattern hash are verified character by
character; a hash hit that fails verification is a spurious hit.
"""

from typing import List, Optional

from algorithms.step import Tracer
from algorithms.strings.common import MATCH, MISMATCH, SAMPLE_TEXT, check_text, clear, search_marks, summary


PSEUDOCODE: List[str] = [
    "def RabinKarp(T, P, d=256, q=101):",                      # 0
    "    h ← d^(m-1) mod q",                                   # 1
    "    p ← hash(P); w ← hash(T[0:m])",                       # 2
    "    for s in 0 … n-m:",                                   # 3
    "        if p = w: verify T[s:s+m] = P",                   # 4
    "        if s < n-m:",                                     # 5
    "            w ← (d·(w - T[s]·h) + T[s+m]) mod q",         # 6
    "    return matches",                                      # 7
]

BASE  = 256
PRIME = 101


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"text": SAMPLE_TEXT, "pattern": "ABABC"}


def rabin_karp(t: Tracer) -> None:
    text, pattern = check_text(t.state)
    n, m = len(text), len(pattern)
    d, q = BASE, PRIME

    t.emit(f"Rabin–Karp search for '{pattern}' with base {d} and modulus {q}.", 0)

    h = pow(d, m - 1, q)
    t.emit(f"h = {d}^{m - 1} mod {q} = {h}: the weight of the leading character.", 1,
           title="Hashing", phase="preprocess", h=h, pattern_hash=None, window_hash=None)
    if m > n:
        t.finish(f"Pattern '{pattern}' is longer than the text: no match possible.", 7,
                 phase="done", matches=[], comparisons=0)
        return

    p = w = 0
    for k in range(m):
        p = (d * p + ord(pattern[k])) % q
        w = (d * w + ord(text[k])) % q
    t.emit(f"Pattern hash {p}; hash of the first window '{text[:m]}' is {w}.", 2,
           pattern_hash=p, window_hash=w)

    t.emit("Slide the window across the text.", 3, title="Search", spurious_hits=0,
           **search_marks(text, pattern))
    th, ph = t.state["text_highlight"], t.state["pattern_highlight"]
    matches: List[int] = t.state["matches"]
    comparisons = spurious = 0
    for s in range(n - m + 1):
        clear(th)
        clear(ph)
        if p != w:
            t.emit(f"Offset {s}: window hash {w} ≠ {p}, skip.", 3, offset=s, window_hash=w)
        else:
            t.emit(f"Offset {s}: window hash {w} = pattern hash, verify.", 4, offset=s, window_hash=w)
            ok = True
            for j in range(m):
                comparisons += 1
                if text[s + j] != pattern[j]:
                    th[s + j] = ph[j] = MISMATCH
                    ok = False
                    t.emit(f"T[{s + j}] = '{text[s + j]}' ≠ P[{j}] = '{pattern[j]}'.", 4,
                           comparisons=comparisons)
                    break
                th[s + j] = ph[j] = MATCH
                t.emit(f"T[{s + j}] = P[{j}] = '{pattern[j]}'.", 4, comparisons=comparisons)
            if ok:
                matches.append(s)
                t.emit(f"Match confirmed at offset {s}.", 4)
            else:
                spurious += 1
                t.emit(f"Spurious hit at offset {s}: equal hashes, different strings.", 4,
                       spurious_hits=spurious)
        if s < n - m:
            old = w
            w = (d * (w - ord(text[s]) * h) + ord(text[s + m])) % q
            t.emit(f"Roll: drop '{text[s]}', add '{text[s + m]}': {old} → {w}.", 6, window_hash=w)

    clear(th)
    clear(ph)
    t.finish(summary(pattern, matches, comparisons), 7, phase="done")
