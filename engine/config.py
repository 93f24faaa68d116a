"""
config.py — Engine & Web Configuration
=======================================
Defaults for every tunable knob, in the flat UPPER_CASE form Flask's
`app.config` uses.  The web app loads them with

    app.config.from_mapping(DEFAULTS)
    app.config.from_prefixed_env(ENV_PREFIX)     # ALGOTRACE_MAX_STEPS=2000 …

and turns them into TraceLimits with `limits_from_config`.

    MAX_STEPS     – recorded steps per trace (terminal step included)
    SEARCH_LIMIT  – emit attempts before an exhaustive search is stopped
    DEFAULT_SEED  – seed used for initial states when a request gives none
                    (None = the built-in sample, or a fresh random
                    instance for families without one)
"""

from typing import Any, Dict, Mapping

from algorithms.step import DEFAULT_LIMITS, DEFAULT_MAX_STEPS, DEFAULT_SEARCH_LIMIT, TraceLimits

ENV_PREFIX = "ALGOTRACE"

DEFAULTS: Dict[str, Any] = {
    "MAX_STEPS":    DEFAULT_MAX_STEPS,
    "SEARCH_LIMIT": DEFAULT_SEARCH_LIMIT,
    "DEFAULT_SEED": None,
}


def limits_from_config(config: Mapping[str, Any]) -> TraceLimits:
    """Build TraceLimits from a Flask-style config mapping."""
    return TraceLimits(
        max_steps=int(config.get("MAX_STEPS", DEFAULT_MAX_STEPS)),
        search_limit=int(config.get("SEARCH_LIMIT", DEFAULT_SEARCH_LIMIT)),
    )
