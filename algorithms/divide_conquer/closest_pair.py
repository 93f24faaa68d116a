"""
closest_pair.py — Closest Pair of Points
=========================================
Sort by x, split at the median, solve both halves, then check the strip
of points within δ of the dividing line in y order.  Inside the strip
each point only needs comparing with neighbours less than δ apart
in y.  Subproblems of at most three points are brute-forced.

State:
  • order         – point indices sorted by x
  • range         – [lo, hi) slice of `order` being solved
  • mid_x         – x of the dividing line (None in a base case)
  • strip         – point indices in the current strip
  • comparing     – the pair being measured
  • best_pair / best_distance – closest pair seen so far
"""

import math
import random
from typing import List, Optional

from algorithms.formatting import fmt
from algorithms.step import Tracer
from algorithms.validate import InvalidInput, require_pairs


PSEUDOCODE: List[str] = [
    "def closest(P):  # P sorted by x",                    # 0
    "    if |P| ≤ 3: return brute force",                  # 1
    "    split at the median x",                           # 2
    "    δ ← min(closest(left), closest(right))",          # 3
    "    strip ← points with |x - mid| < δ, sorted by y",  # 4
    "    for p in strip: compare with next points",        # 5
    "        while their y-gap < δ",                       # 6
    "    return δ",                                        # 7
]

BLANK = {"points": []}

SAMPLE = [
    (50, 120), (100, 80), (140, 150), (200, 60), (220, 170), (270, 110), (300, 50), (320, 140),
    (350, 90), (390, 130), (410, 75), (450, 160), (480, 30), (500, 120), (530, 85),
]

INF = float("inf")


def build_initial_state(seed: Optional[int] = None) -> dict:
    if seed is None:
        pts = SAMPLE
    else:
        rng = random.Random(seed)
        pts = [(rng.randint(20, 580), rng.randint(20, 380)) for _ in range(15)]
    return {"points": [{"x": x, "y": y} for x, y in pts]}


def closest_pair(t: Tracer) -> None:
    pts = require_pairs(t.state, "points", ("x", "y"), BLANK)
    if len(pts) < 2:
        raise InvalidInput("Need at least two points.", BLANK)

    t.emit(f"Find the closest pair among {len(pts)} points.", 0)

    order = sorted(range(len(pts)), key=lambda i: (pts[i]["x"], pts[i]["y"]))
    t.emit("Sort the points by x.", 0, order=order, range=[0, len(pts)], mid_x=None, strip=[],
           comparing=[], best_pair=None, best_distance=INF, depth=0)

    _solve(t, pts, order, 0, len(pts), 0)
    i, j = t.state["best_pair"]
    t.finish(f"Closest pair: ({_xy(pts, i)}) and ({_xy(pts, j)}), distance {fmt(t.state['best_distance'])}.",
             7, range=[0, len(pts)], mid_x=None, strip=[], comparing=[], depth=0)


def _dist(pts, i: int, j: int) -> float:
    return math.hypot(pts[i]["x"] - pts[j]["x"], pts[i]["y"] - pts[j]["y"])


def _xy(pts, i: int) -> str:
    return f"{fmt(pts[i]['x'])}, {fmt(pts[i]['y'])}"


def _measure(t: Tracer, pts, i: int, j: int, line: int) -> float:
    d = _dist(pts, i, j)
    if d < t.state["best_distance"]:
        t.emit(f"({_xy(pts, i)})–({_xy(pts, j)}) = {fmt(d)}: new closest pair.", line,
               comparing=[i, j], best_pair=[i, j], best_distance=d)
    else:
        t.emit(f"({_xy(pts, i)})–({_xy(pts, j)}) = {fmt(d)}.", line, comparing=[i, j])
    return d


def _solve(t: Tracer, pts, order: List[int], lo: int, hi: int, depth: int) -> float:
    if hi - lo <= 3:
        t.emit(f"{hi - lo} point(s): brute force.", 1, range=[lo, hi], mid_x=None, strip=[],
               comparing=[], depth=depth)
        best = INF
        for a in range(lo, hi):
            for b in range(a + 1, hi):
                best = min(best, _measure(t, pts, order[a], order[b], 1))
        return best

    mid = (lo + hi) // 2
    mid_x = pts[order[mid]]["x"]
    t.emit(f"Split [{lo}, {hi}) at x = {fmt(mid_x)}.", 2, range=[lo, hi], mid_x=mid_x, strip=[],
           comparing=[], depth=depth)
    left = _solve(t, pts, order, lo, mid, depth + 1)
    right = _solve(t, pts, order, mid, hi, depth + 1)
    delta = min(left, right)

    strip = sorted((i for i in order[lo:hi] if abs(pts[i]["x"] - mid_x) < delta),
                   key=lambda i: pts[i]["y"])
    t.emit(f"Back in [{lo}, {hi}): δ = {fmt(delta)}; {len(strip)} point(s) lie within δ of x = {fmt(mid_x)}.",
           4, range=[lo, hi], mid_x=mid_x, strip=strip, comparing=[], depth=depth)
    for a in range(len(strip)):
        for b in range(a + 1, len(strip)):
            if pts[strip[b]]["y"] - pts[strip[a]]["y"] >= delta:
                break
            delta = min(delta, _measure(t, pts, strip[a], strip[b], 6))
    return delta
