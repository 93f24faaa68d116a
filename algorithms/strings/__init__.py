"""
algorithms/strings/
-------------------
Exact pattern matching over `{"text": ..., "pattern": ...}`.

Shared working-state keys:
    offset            – current alignment of the pattern in the text
    text_highlight    – None | "match" | "mismatch" per text character
    pattern_highlight – None | "match" | "mismatch" per pattern character
    matches           – start offsets found so far
    comparisons       – character comparisons made so far
    phase             – "preprocess" | "search" | "done"
"""
