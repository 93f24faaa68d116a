import pytest

from algorithms.step import TraceLimits
from engine import build_trace


@pytest.fixture
def trace_of():
    """build_trace with the default limits; `trace_of("bfs", seed=3)`."""
    def _build(key, initial=None, seed=None, limits=None):
        return build_trace(key, initial, seed=seed, limits=limits)
    return _build


@pytest.fixture
def final_of(trace_of):
    """State of the terminal step."""
    def _final(key, initial=None, seed=None):
        return trace_of(key, initial, seed=seed).final.state
    return _final


@pytest.fixture
def tight_limits():
    return TraceLimits(max_steps=10, search_limit=50)


@pytest.fixture
def client():
    from main import app

    saved = {k: app.config[k] for k in ("MAX_STEPS", "SEARCH_LIMIT", "DEFAULT_SEED")}
    app.config.update(TESTING=True)
    with app.test_client() as c:
        yield c
    app.config.update(saved)
