"""
step.py — Algorithm Step Snapshot
==================================
Every algorithm records its run as a list of Step objects.
A Step is a frozen-in-time picture of everything a renderer needs
to rebuild one frame:

    • The algorithm's full working state (array, table, graph overlay …)
    • Which line of pseudocode is executing right now
    • A plain-English description of *why* this step happened
    • Whether this is the terminal step of the run

Design decisions:
  - Step is a frozen dataclass; its `state` is a deep copy taken at
    record time, so no two steps ever share a nested list or dict.
  - Algorithms never build Steps by hand.  They mutate `tracer.state`
    and call `tracer.emit(...)`; the Tracer owns numbering, copying,
    truncation and the terminal flag.
"""

import copy
import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from algorithms.formatting import jsonable

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Limits
# ---------------------------------------------------------------------------
DEFAULT_MAX_STEPS:    int = 5000
DEFAULT_SEARCH_LIMIT: int = 200_000


@dataclass(frozen=True)
class TraceLimits:
    """
    max_steps     : recorded steps per trace, terminal step included.
                    Past the cap, intermediate steps are dropped but the
                    terminal step is still recorded.
    search_limit  : emit attempts before an exhaustive search is stopped.
    """

    max_steps:    int = DEFAULT_MAX_STEPS
    search_limit: int = DEFAULT_SEARCH_LIMIT

    def __post_init__(self):
        if self.max_steps < 2:
            raise ValueError(f"max_steps must be at least 2, got {self.max_steps}")
        if self.search_limit < 1:
            raise ValueError(f"search_limit must be positive, got {self.search_limit}")

    def capped(self, max_steps: Optional[int]) -> "TraceLimits":
        """Tighter copy: never raises the step cap above the current one."""
        if max_steps is None or max_steps >= self.max_steps:
            return self
        return replace(self, max_steps=max_steps)


DEFAULT_LIMITS = TraceLimits()


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number     : 0-based index of this step in the trace.
        state           : Deep copy of the working state at record time.
        description     : Human-readable explanation of the transition.
        pseudocode_line : Index into the algorithm's PSEUDOCODE list (or None).
        title           : Optional short heading (phase name, e.g. "Build LPS table").
        complexity_info : Optional note on the cost of this step / phase.
        is_final        : True on the very last step only.
    """

    step_number:      int                = 0
    state:            Dict[str, Any]     = field(default_factory=dict)
    description:      str                = ""
    pseudocode_line:  Optional[int]      = None
    title:            Optional[str]      = None
    complexity_info:  Optional[str]      = None
    is_final:         bool               = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "step_number":     self.step_number,
            "state":           jsonable(self.state),
            "description":     self.description,
            "pseudocode_line": self.pseudocode_line,
            "title":           self.title,
            "complexity_info": self.complexity_info,
            "is_final":        self.is_final,
        }


# ---------------------------------------------------------------------------
# Signals raised inside a run
# ---------------------------------------------------------------------------
class SearchLimitReached(Exception):
    """The run hit TraceLimits.search_limit before reaching a conclusion."""

    def __init__(self, attempts: int):
        super().__init__(f"search stopped after {attempts} steps")
        self.attempts = attempts


# ---------------------------------------------------------------------------
# Tracer: the accumulator every algorithm writes into
# ---------------------------------------------------------------------------
class Tracer:
    """
    Owns the working copy of the initial state and the step list.

    Usage inside an algorithm:
        def bubble_sort(t: Tracer) -> None:
            arr = t.state["array"]
            t.emit("Initial array.", line=0)
            ...
            arr[j], arr[j + 1] = arr[j + 1], arr[j]
            t.emit(f"Swap {arr[j + 1]} and {arr[j]}.", line=4, comparing=[j, j + 1])
            ...
            t.finish("Array is sorted.", line=6, sorted=list(range(n)))

    `emit(**updates)` merges the keyword updates into `state` first, then
    snapshots.  The first emit of every algorithm passes no updates so
    step 0 reproduces the initial state exactly.
    """

    def __init__(self, initial: Dict[str, Any], limits: Optional[TraceLimits] = None):
        self.state:     Dict[str, Any] = copy.deepcopy(initial)
        self.limits:    TraceLimits    = limits or DEFAULT_LIMITS
        self.steps:     List[Step]     = []
        self.truncated: bool           = False
        self.attempts:  int            = 0
        self.dropped:   int            = 0

    # ------------------------------------------------------------------
    @property
    def finished(self) -> bool:
        return bool(self.steps) and self.steps[-1].is_final

    def emit(
        self,
        description: str,
        line: Optional[int] = None,
        *,
        title: Optional[str] = None,
        complexity: Optional[str] = None,
        **updates: Any,
    ) -> None:
        """Record an intermediate step (dropped silently once the cap is hit)."""
        if self.finished:
            raise RuntimeError("emit() called after finish()")
        self.attempts += 1
        if self.attempts > self.limits.search_limit:
            raise SearchLimitReached(self.attempts - 1)
        if updates:
            self.state.update(updates)
        # keep one slot free for the terminal step
        if len(self.steps) >= self.limits.max_steps - 1:
            if not self.truncated:
                logger.debug("Step cap %d reached; dropping intermediate steps", self.limits.max_steps)
            self.truncated = True
            self.dropped += 1
            return
        self._record(description, line, title, complexity, is_final=False)

    def finish(
        self,
        description: str,
        line: Optional[int] = None,
        *,
        title: Optional[str] = None,
        complexity: Optional[str] = None,
        **updates: Any,
    ) -> None:
        """Record the terminal step.  Always recorded, whatever the cap."""
        if self.finished:
            raise RuntimeError("finish() called twice")
        if updates:
            self.state.update(updates)
        self.state["is_complete"] = True
        if self.truncated:
            description = f"{description} ({self.dropped} intermediate steps omitted)"
        self._record(description, line, title, complexity, is_final=True)

    # ------------------------------------------------------------------
    def _record(self, description, line, title, complexity, is_final: bool) -> None:
        self.steps.append(Step(
            step_number=len(self.steps),
            state=copy.deepcopy(self.state),
            description=description,
            pseudocode_line=line,
            title=title,
            complexity_info=complexity,
            is_final=is_final,
        ))
