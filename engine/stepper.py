"""
stepper.py — Trace Playback Cursor
===================================
Walks a finished trace forwards and backwards for a player.  Every
position is just an index into the step list, so jumping anywhere costs
nothing and no step is ever recomputed.

Lifecycle:
    IDLE ── load(steps) ──▶ PAUSED ◀──▶ PLAYING
                               │            │
                               └── cursor on the last step ──▶ FINISHED

Moving the cursor off the last step (prev_step, goto_step, rewind)
drops FINISHED back to PAUSED; reset() returns to IDLE.

Auto-play waits BASE_DELAY / speed seconds between steps, so 1× shows a
step every 1.5 s and 4× one every 0.375 s.  tick() takes an optional
clock reading, which keeps playback testable without sleeping.

Single-threaded: call it from one thread or one event loop.
"""

import time
from enum import Enum
from typing import Callable, List, Optional, Sequence, Union

from algorithms.step import Step


class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


BASE_DELAY: float = 1.5        # seconds per step at 1×
MIN_SPEED:  float = 0.1

SPEED_PRESETS = {
    "slow":   0.5,
    "normal": 1.0,
    "fast":   2.0,
    "turbo":  4.0,
}


class Stepper:
    """
    Cursor over one trace.

    `on_step(step)` fires whenever the cursor lands on a step, including
    the initial landing on step 0 during load().
    """

    def __init__(self, on_step: Optional[Callable[[Step], None]] = None):
        self.on_step = on_step
        self.steps: List[Step] = []
        self.current_idx = -1
        self.state = StepperState.IDLE
        self.speed = SPEED_PRESETS["normal"]
        self._last_tick = 0.0

    # -- loading -----------------------------------------------------------

    def load(self, steps: Sequence[Step]) -> None:
        if not steps:
            raise ValueError("cannot play an empty trace")
        self.steps = list(steps)
        self.state = StepperState.PAUSED
        self._land(0)

    def reset(self) -> None:
        self.steps, self.current_idx, self.state = [], -1, StepperState.IDLE

    # -- cursor movement ---------------------------------------------------

    def goto_step(self, idx: int) -> bool:
        """Land on `idx`; False (and no move) when it is out of range."""
        if not 0 <= idx < len(self.steps):
            return False
        self._land(idx)
        return True

    def next_step(self) -> bool:
        """One step forward; False at the end of the trace."""
        if self.steps and self.current_idx == self.last_idx:
            self.state = StepperState.FINISHED
        return self.goto_step(self.current_idx + 1)

    def prev_step(self) -> bool:
        return self.current_idx > 0 and self.goto_step(self.current_idx - 1)

    def rewind(self) -> None:
        self.goto_step(0)

    def jump_to_end(self) -> None:
        self.goto_step(self.last_idx)

    # -- auto-play ---------------------------------------------------------

    def play(self) -> None:
        if self.state is StepperState.PAUSED:
            self.state = StepperState.PLAYING
            self._last_tick = time.monotonic()

    def pause(self) -> None:
        if self.state is StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        self.pause() if self.is_playing else self.play()

    def tick(self, now: Optional[float] = None) -> bool:
        """Poll from a timer; advances once the delay has elapsed."""
        if not self.is_playing:
            return False
        if now is None:
            now = time.monotonic()
        if now - self._last_tick < self.delay:
            return False
        self._last_tick = now
        return self.next_step()

    def set_speed(self, speed: Union[str, float]) -> None:
        """A preset name, or a multiplier (clamped to MIN_SPEED)."""
        if isinstance(speed, str):
            self.speed = SPEED_PRESETS.get(speed, SPEED_PRESETS["normal"])
        else:
            self.speed = max(MIN_SPEED, float(speed))

    @property
    def delay(self) -> float:
        return BASE_DELAY / self.speed

    # -- read-only views ---------------------------------------------------

    @property
    def current_step(self) -> Optional[Step]:
        return self.steps[self.current_idx] if self.current_idx >= 0 else None

    @property
    def last_idx(self) -> int:
        return len(self.steps) - 1

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def is_finished(self) -> bool:
        return self.state is StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state is StepperState.PLAYING

    def _land(self, idx: int) -> None:
        self.current_idx = idx
        if idx == self.last_idx:
            self.state = StepperState.FINISHED
        elif self.state is StepperState.FINISHED:
            self.state = StepperState.PAUSED
        if self.on_step is not None:
            self.on_step(self.steps[idx])
