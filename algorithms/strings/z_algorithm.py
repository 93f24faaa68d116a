"""
z_algorithm.py — Z-Algorithm
=============================
Builds the Z-array of  pattern + "$" + text.  z[i] is the length of the
longest substring starting at i that is also a prefix; a value equal
to the pattern length marks a match.  [left, right] is the rightmost
Z-box found so far, reused to skip comparisons.
"""

from typing import List, Optional

from algorithms.step import Tracer
from algorithms.strings.common import MATCH, SAMPLE_TEXT, check_text, search_marks, summary
from algorithms.validate import BLANK_TEXT, InvalidInput


PSEUDOCODE: List[str] = [
    "def Z(S):",                                           # 0
    "    S ← P + '$' + T; l ← r ← 0",                      # 1
    "    for i in 1 … |S|-1:",                             # 2
    "        if i < r: z[i] ← min(r - i, z[i - l])",        # 3
    "        while S[z[i]] = S[i + z[i]]: z[i] += 1",      # 4
    "        if i + z[i] > r: l ← i; r ← i + z[i]",        # 5
    "        if z[i] = |P|: report i - |P| - 1",           # 6
    "    return matches",                                  # 7
]

SEPARATOR = "$"


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"text": SAMPLE_TEXT, "pattern": "ABABC"}


def z_algorithm(t: Tracer) -> None:
    text, pattern = check_text(t.state)
    if SEPARATOR in text or SEPARATOR in pattern:
        raise InvalidInput(f"Text and pattern must not contain '{SEPARATOR}'.", BLANK_TEXT)
    m = len(pattern)
    s = pattern + SEPARATOR + text

    t.emit(f"Z-algorithm search for '{pattern}' over '{s}'.", 0)

    z = [0] * len(s)
    t.emit("Concatenate pattern, separator and text; z[0] is left at 0.", 1,
           title="Z-array", combined=s, z_array=z, z_index=None, z_box=[0, 0],
           **search_marks(text, pattern, phase="preprocess"))
    th = t.state["text_highlight"]
    matches: List[int] = t.state["matches"]
    comparisons = 0
    left = right = 0

    for i in range(1, len(s)):
        if i == m + 1:
            t.emit("Pattern part done; the remaining Z-values scan the text.", 2,
                   title="Scan text", phase="search", z_index=None)
        if i < right:
            z[i] = min(right - i, z[i - left])
            t.emit(f"i = {i} lies inside the Z-box [{left}, {right}): start from "
                   f"min({right - i}, z[{i - left}]) = {z[i]}.", 3, z_index=i)
        while i + z[i] < len(s) and s[z[i]] == s[i + z[i]]:
            comparisons += 1
            z[i] += 1
        if i + z[i] < len(s):
            comparisons += 1
        if i + z[i] > right:
            left, right = i, i + z[i]
        offset = i - m - 1
        t.emit(f"z[{i}] = {z[i]}.", 4, z_index=i, z_box=[left, right], comparisons=comparisons,
               offset=max(offset, 0))
        if z[i] == m and offset >= 0:
            matches.append(offset)
            for k in range(offset, offset + m):
                th[k] = MATCH
            t.emit(f"z[{i}] equals the pattern length: match at text offset {offset}.", 6)

    t.finish(summary(pattern, matches, comparisons), 7, phase="done", z_index=None)
