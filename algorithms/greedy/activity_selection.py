"""
activity_selection.py — Activity Selection
===========================================
Sort activities by finish time (stable, so ties keep input order) and
take every activity that starts no earlier than the last chosen one
finishes.
"""

from typing import List, Optional

from algorithms.step import Tracer
from algorithms.validate import InvalidInput, require_pairs


PSEUDOCODE: List[str] = [
    "def selectActivities(A):",                    # 0
    "    sort A by finish time",                   # 1
    "    take A[0]; last ← A[0].finish",           # 2
    "    for a in A[1:]:",                         # 3
    "        if a.start ≥ last:",                  # 4
    "            take a; last ← a.finish",         # 5
    "    return chosen",                           # 6
]

BLANK = {"activities": []}

SAMPLE = [(1, 4), (3, 5), (0, 6), (5, 7), (3, 9), (5, 9), (6, 10), (8, 11), (8, 12), (2, 14), (12, 16)]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"activities": [{"id": i + 1, "start": s, "finish": f} for i, (s, f) in enumerate(SAMPLE)]}


def activity_selection(t: Tracer) -> None:
    acts = require_pairs(t.state, "activities", ("start", "finish"), BLANK)
    if any(a["finish"] < a["start"] for a in acts):
        raise InvalidInput("Every activity must finish no earlier than it starts.", BLANK)

    t.emit(f"Choose the most non-overlapping activities out of {len(acts)}.", 0)

    order = sorted(range(len(acts)), key=lambda i: acts[i]["finish"])
    t.emit("Sort by finish time: " + ", ".join(
        f"#{_label(acts, i)}({acts[i]['start']}-{acts[i]['finish']})" for i in order) + ".", 1,
        order=order, selected=[], rejected=[], current=None, last_finish=None)

    selected: List[int] = t.state["selected"]
    rejected: List[int] = t.state["rejected"]
    first = order[0]
    selected.append(first)
    last = acts[first]["finish"]
    t.emit(f"Take #{_label(acts, first)}, the earliest to finish (at {last}).", 2,
           current=first, last_finish=last)

    for i in order[1:]:
        a = acts[i]
        if a["start"] >= last:
            selected.append(i)
            last = a["finish"]
            t.emit(f"#{_label(acts, i)} starts at {a['start']} ≥ {acts[selected[-2]]['finish']}: take it.", 5,
                   current=i, last_finish=last)
        else:
            rejected.append(i)
            t.emit(f"#{_label(acts, i)} starts at {a['start']} < {last}: overlaps, skip.", 4, current=i)

    t.finish(f"Selected {len(selected)} activities: " + ", ".join(
        f"#{_label(acts, i)}" for i in selected) + ".", 6, current=None, result=len(selected))


def _label(acts, i: int):
    return acts[i].get("id", i + 1)
