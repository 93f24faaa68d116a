"""
boyer_moore.py — Boyer–Moore
=============================
Compares right to left.  Two tables are built first:

  • bad_char[c]    – last index of character c in the pattern
  • good_suffix[j] – shift when the suffix P[j:] has matched and
                     P[j-1] mismatched (strong good-suffix rule)

After each alignment the pattern moves by
max(bad-character shift, good-suffix shift, 1); `shift_rule` records
which rule won.
"""

from typing import Dict, List, Optional

from algorithms.step import Tracer
from algorithms.strings.common import MATCH, MISMATCH, SAMPLE_TEXT, check_text, clear, search_marks, summary


PSEUDOCODE: List[str] = [
    "def BoyerMoore(T, P):",                               # 0
    "    build bad-character table",                       # 1
    "    build good-suffix table",                         # 2
    "    s ← 0",                                           # 3
    "    while s ≤ n - m:",                                # 4
    "        j ← m - 1; while j ≥ 0 and P[j] = T[s+j]: j--",  # 5
    "        if j < 0: report s; s += gs[0]",              # 6
    "        else: s += max(j - bc[T[s+j]], gs[j+1], 1)",  # 7
    "    return matches",                                  # 8
]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"text": SAMPLE_TEXT, "pattern": "ABABC"}


def good_suffix_table(pattern: str) -> List[int]:
    m = len(pattern)
    shift = [0] * (m + 1)
    border = [0] * (m + 1)
    i, j = m, m + 1
    border[i] = j
    while i > 0:
        while j <= m and pattern[i - 1] != pattern[j - 1]:
            if shift[j] == 0:
                shift[j] = j - i
            j = border[j]
        i -= 1
        j -= 1
        border[i] = j
    j = border[0]
    for i in range(m + 1):
        if shift[i] == 0:
            shift[i] = j
        if i == j:
            j = border[j]
    return shift


def boyer_moore(t: Tracer) -> None:
    text, pattern = check_text(t.state)
    n, m = len(text), len(pattern)

    t.emit(f"Boyer–Moore search for '{pattern}' in a text of {n} characters.", 0)

    bad_char: Dict[str, int] = {}
    t.emit("Record the last position of every pattern character.", 1,
           title="Bad-character table", phase="preprocess", bad_char=bad_char, good_suffix=None)
    for idx, ch in enumerate(pattern):
        bad_char[ch] = idx
        t.emit(f"bad_char['{ch}'] = {idx}.", 1)

    gs = good_suffix_table(pattern)
    t.emit("Good-suffix shifts: [" + ", ".join(map(str, gs)) + "].", 2,
           title="Good-suffix table", good_suffix=gs)

    t.emit("Align the pattern at offset 0.", 3, title="Search", shift_rule=None, shift=None,
           **search_marks(text, pattern))
    th, ph = t.state["text_highlight"], t.state["pattern_highlight"]
    matches: List[int] = t.state["matches"]
    comparisons = 0
    s = 0
    while s <= n - m:
        clear(th)
        clear(ph)
        t.emit(f"Offset {s}: compare right to left.", 4, offset=s, shift_rule=None, shift=None)
        j = m - 1
        while j >= 0:
            comparisons += 1
            if pattern[j] != text[s + j]:
                th[s + j] = ph[j] = MISMATCH
                t.emit(f"P[{j}] = '{pattern[j]}' ≠ T[{s + j}] = '{text[s + j]}'.", 5, comparisons=comparisons)
                break
            th[s + j] = ph[j] = MATCH
            t.emit(f"P[{j}] = T[{s + j}] = '{text[s + j]}'.", 5, comparisons=comparisons)
            j -= 1

        if j < 0:
            matches.append(s)
            shift = max(gs[0], 1)
            t.emit(f"Full match at offset {s}; good-suffix rule shifts by {shift}.", 6,
                   shift_rule="good suffix", shift=shift)
        else:
            bc = j - bad_char.get(text[s + j], -1)
            gs_shift = gs[j + 1]
            shift = max(bc, gs_shift, 1)
            if shift == bc and bc >= gs_shift:
                rule = "bad character"
            elif shift == gs_shift:
                rule = "good suffix"
            else:
                rule = "minimum shift"
            t.emit(f"Bad-character shift {bc}, good-suffix shift {gs_shift}: move by {shift} ({rule}).", 7,
                   shift_rule=rule, shift=shift)
        s += shift

    clear(th)
    clear(ph)
    t.finish(summary(pattern, matches, comparisons), 8, phase="done", shift_rule=None, shift=None)
