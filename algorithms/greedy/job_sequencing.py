"""
job_sequencing.py — Job Sequencing with Deadlines
==================================================
Every job takes one time unit.  Jobs are considered by profit (highest
first); each goes into the latest free slot on or before its deadline,
or is dropped when no such slot remains.
"""

from typing import List, Optional

from algorithms.step import Tracer
from algorithms.validate import InvalidInput, require_pairs


PSEUDOCODE: List[str] = [
    "def jobSequencing(jobs):",                        # 0
    "    sort jobs by profit, descending",             # 1
    "    for job in jobs:",                            # 2
    "        for s from job.deadline down to 1:",      # 3
    "            if slot[s] is free:",                 # 4
    "                slot[s] ← job; break",            # 5
    "    return slots",                                # 6
]

BLANK = {"jobs": []}

SAMPLE = [(4, 20), (1, 10), (1, 40), (2, 30), (3, 15), (2, 25)]


def build_initial_state(seed: Optional[int] = None) -> dict:
    return {"jobs": [{"id": f"J{i + 1}", "deadline": d, "profit": p} for i, (d, p) in enumerate(SAMPLE)]}


def job_sequencing(t: Tracer) -> None:
    jobs = require_pairs(t.state, "jobs", ("deadline", "profit"), BLANK)
    if any(not isinstance(j["deadline"], int) or j["deadline"] < 1 for j in jobs):
        raise InvalidInput("Deadlines must be positive integers.", BLANK)

    t.emit(f"Schedule {len(jobs)} unit-time jobs for maximum profit.", 0)

    order = sorted(range(len(jobs)), key=lambda i: -jobs[i]["profit"])
    horizon = min(max(j["deadline"] for j in jobs), len(jobs))
    t.emit("Sort by profit: " + ", ".join(f"{_name(jobs, i)}({jobs[i]['profit']})" for i in order)
           + f". {horizon} time slots available.", 1,
           order=order, slots=[None] * horizon, current=None, current_slot=None,
           rejected=[], total_profit=0)

    slots: List[Optional[int]] = t.state["slots"]
    total = 0
    for i in order:
        job = jobs[i]
        placed = False
        for s in range(min(job["deadline"], horizon) - 1, -1, -1):
            if slots[s] is None:
                slots[s] = i
                total += job["profit"]
                placed = True
                t.emit(f"{_name(jobs, i)} (deadline {job['deadline']}) goes into slot {s + 1}; "
                       f"profit {total}.", 5, current=i, current_slot=s, total_profit=total)
                break
            t.emit(f"Slot {s + 1} is taken by {_name(jobs, slots[s])}.", 4, current=i, current_slot=s)
        if not placed:
            t.state["rejected"].append(i)
            t.emit(f"No free slot on or before {job['deadline']}: drop {_name(jobs, i)}.", 3,
                   current=i, current_slot=None)

    chosen = [_name(jobs, i) for i in slots if i is not None]
    t.finish(f"Schedule {' → '.join(chosen)} earns {total}.", 6,
             current=None, current_slot=None, result=total)


def _name(jobs, i: int) -> str:
    return str(jobs[i].get("id", f"J{i + 1}"))
