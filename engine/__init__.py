"""
engine/
-------
Trace building, playback & recording layer.

    from engine import build_trace, Trace, Stepper, Recorder, TraceLimits
"""

from engine.config   import DEFAULTS, DEFAULT_LIMITS, ENV_PREFIX, TraceLimits, limits_from_config
from engine.stepper  import Stepper, StepperState, SPEED_PRESETS
from engine.recorder import (
    Recorder, RunMetrics, Trace, UnknownAlgorithm, build_trace, run_trace,
)

__all__ = [
    "DEFAULTS",
    "DEFAULT_LIMITS",
    "ENV_PREFIX",
    "TraceLimits",
    "limits_from_config",
    "Stepper",
    "StepperState",
    "SPEED_PRESETS",
    "Recorder",
    "RunMetrics",
    "Trace",
    "UnknownAlgorithm",
    "build_trace",
    "run_trace",
]
