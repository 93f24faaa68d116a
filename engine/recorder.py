"""
recorder.py — Trace Builder, Run Recorder & Analytics
======================================================
Runs an algorithm to completion and hands back its materialised trace,
then computes the analytics card a consumer shows next to the player.

Usage:
    trace = build_trace("dijkstra", seed=7)     # Trace, never raises on bad input
    trace.steps[0].state == initial             # step 0 is the untouched input

    rec = Recorder()
    rec.start("dijkstra", seed=7)
    metrics = rec.run_to_completion()           # RunMetrics
    rec.export()                                # JSON-ready snapshot for save/replay

Failure policy:
  • Malformed initial state  → one-step trace, state carries "error".
  • Search limit reached     → explicit "search stopped" terminal step.
  • Step cap reached         → middle steps dropped, terminal kept, truncated=True.
  • Unknown key              → UnknownAlgorithm (a KeyError).
"""

import logging
import sys
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, List, Optional

from algorithms import AlgoInfo, get_algorithm
from algorithms.formatting import jsonable
from algorithms.step import SearchLimitReached, Step, Tracer
from algorithms.validate import InvalidInput
from engine.config import DEFAULT_LIMITS, TraceLimits
from engine.stepper import Stepper

logger = logging.getLogger(__name__)


class UnknownAlgorithm(KeyError):
    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Unknown algorithm: {self.key}"


# ---------------------------------------------------------------------------
# Trace: the container handed to consumers
# ---------------------------------------------------------------------------
@dataclass
class Trace:
    algo_key:  str
    steps:     List[Step]      = field(default_factory=list)
    truncated: bool            = False
    error:     Optional[str]   = None

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, idx: int) -> Step:
        return self.steps[idx]

    @property
    def final(self) -> Step:
        return self.steps[-1]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algo_key":  self.algo_key,
            "truncated": self.truncated,
            "error":     self.error,
            "steps":     [s.to_dict() for s in self.steps],
        }


def run_trace(
    fn: Callable[[Tracer], None],
    initial: Dict[str, Any],
    limits: Optional[TraceLimits] = None,
    algo_key: str = "",
) -> Trace:
    """Drive one trace function over a private copy of `initial`."""
    tracer = Tracer(initial, limits)
    try:
        fn(tracer)
    except InvalidInput as exc:
        logger.warning("Invalid initial state for %s: %s", algo_key or fn.__name__, exc.message)
        step = Step(step_number=0, state=exc.error_state(), description=exc.message,
                    title="Invalid input", is_final=True)
        return Trace(algo_key=algo_key, steps=[step], error=exc.message)
    except SearchLimitReached as exc:
        logger.warning("Search limit hit for %s after %d steps", algo_key or fn.__name__, exc.attempts)
        tracer.finish(
            f"Search stopped after {exc.attempts} steps without reaching a conclusion.",
            title="Search stopped",
            search_stopped=True,
        )

    if not tracer.finished:
        raise RuntimeError(f"{algo_key or fn.__name__} returned without recording a terminal step")

    if tracer.truncated:
        logger.warning("Trace for %s truncated at %d steps (%d dropped)",
                       algo_key or fn.__name__, len(tracer.steps), tracer.dropped)
    logger.info("Built trace for %s: %d steps", algo_key or fn.__name__, len(tracer.steps))
    return Trace(algo_key=algo_key, steps=tracer.steps, truncated=tracer.truncated)


def build_trace(
    algo_key: str,
    initial: Optional[Dict[str, Any]] = None,
    seed: Optional[int] = None,
    limits: Optional[TraceLimits] = None,
) -> Trace:
    """
    Look the algorithm up, build its initial state if none is given,
    and return the full trace.  The per-algorithm step cap only ever
    tightens the supplied limits.
    """
    info = get_algorithm(algo_key)
    if info is None:
        raise UnknownAlgorithm(algo_key)
    if initial is None:
        initial = info.initial_data(seed)
    limits = (limits or DEFAULT_LIMITS).capped(info.max_steps)
    return run_trace(info.fn, initial, limits, algo_key=algo_key)


# ---------------------------------------------------------------------------
# Metrics dataclass: the analytics card
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:          str   = ""
    algo_label:        str   = ""
    category:          str   = ""
    total_steps:       int   = 0          # number of Steps recorded
    wall_time_ms:      float = 0.0        # wall-clock time to build the trace
    memory_bytes:      int   = 0          # approx size of the step buffer (sys.getsizeof)
    truncated:         bool  = False
    search_stopped:    bool  = False
    error:             str   = ""
    final_description: str   = ""


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        trace   : The Trace from the last run (after run_to_completion).
        metrics : Computed RunMetrics (after run_to_completion).
        stepper : A Stepper loaded with the trace for cursor-style access.
    """

    def __init__(self, limits: Optional[TraceLimits] = None):
        self.limits:  TraceLimits          = limits or DEFAULT_LIMITS
        self.trace:   Optional[Trace]      = None
        self.metrics: Optional[RunMetrics] = None
        self.stepper: Optional[Stepper]    = None

        self._algo_info: Optional[AlgoInfo]         = None
        self._initial:   Optional[Dict[str, Any]]   = None
        self._seed:      Optional[int]              = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(
        self,
        algo_key: str,
        initial: Optional[Dict[str, Any]] = None,
        seed: Optional[int] = None,
    ) -> None:
        """Pick the algorithm and its initial state for this run."""
        info = get_algorithm(algo_key)
        if info is None:
            raise UnknownAlgorithm(algo_key)

        self._algo_info = info
        self._seed      = seed
        self._initial   = initial if initial is not None else info.initial_data(seed)
        self.trace      = None
        self.metrics    = None
        self.stepper    = None

    def run_to_completion(self) -> RunMetrics:
        """Build the whole trace, load it into a Stepper, compute metrics."""
        if self._algo_info is None:
            raise RuntimeError("Call start() first.")

        started = time.monotonic()
        self.trace = build_trace(self._algo_info.key, self._initial, limits=self.limits)
        wall_ms = (time.monotonic() - started) * 1000

        self.stepper = Stepper()
        self.stepper.load(self.trace.steps)

        self.metrics = self._compute_metrics(wall_ms)
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "seed":     self._seed,
            "initial":  jsonable(self._initial) if self._initial is not None else {},
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    [s.to_dict() for s in self.trace.steps] if self.trace else [],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info  = self._algo_info
        trace = self.trace
        last  = trace.final

        # approximate memory: sizeof the steps buffer
        mem = sys.getsizeof(trace.steps)
        for s in trace.steps:
            mem += sys.getsizeof(s) + sys.getsizeof(s.state)

        return RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            category=info.category,
            total_steps=len(trace),
            wall_time_ms=round(wall_ms, 2),
            memory_bytes=mem,
            truncated=trace.truncated,
            search_stopped=bool(last.state.get("search_stopped")),
            error=trace.error or "",
            final_description=last.description,
        )
