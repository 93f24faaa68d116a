"""Properties every registered algorithm's trace must satisfy."""

import json

import pytest

from algorithms import CATEGORIES, REGISTRY, algorithms_by_category, algorithms_by_tag, get_algorithm, list_algorithms
from engine import build_trace

ALL_KEYS = list(REGISTRY)
GRAPH_KEYS = [a.key for a in algorithms_by_category("graphs")]

# enough steps to cover every phase without walking huge searches
WINDOW = 150


def _containers(obj, out):
    if isinstance(obj, (dict, list)):
        out.append(id(obj))
        for v in (obj.values() if isinstance(obj, dict) else obj):
            _containers(v, out)
    return out


class TestRegistry:
    def test_sixty_three_algorithms(self):
        assert len(REGISTRY) == 63
        assert len(list_algorithms()) == 63

    def test_every_category_is_populated(self):
        assert sum(len(algorithms_by_category(c)) for c in CATEGORIES) == 63
        assert all(algorithms_by_category(c) for c in CATEGORIES)

    def test_lookup(self):
        assert get_algorithm("kmp").label == "Knuth–Morris–Pratt"
        assert get_algorithm("missing") is None
        assert {a.key for a in algorithms_by_tag("spanning-tree")} == {"kruskals", "prims"}

    @pytest.mark.parametrize("key", ALL_KEYS)
    def test_card_is_complete(self, key):
        info = REGISTRY[key]
        assert info.key == key
        assert info.category in CATEGORIES
        assert info.pseudocode and all(isinstance(line, str) for line in info.pseudocode)
        assert info.label and info.description and info.complexity_time
        json.dumps(info.card())

    def test_generate_steps(self):
        info = get_algorithm("binary_search")
        steps = info.generate_steps({"array": [1, 3, 5, 7, 9, 11], "target": 7})
        assert [s.step_number for s in steps] == [0, 1, 2, 3]


@pytest.mark.parametrize("key", ALL_KEYS)
class TestTraceProperties:
    def test_step_zero_reproduces_initial_state(self, key):
        for seed in (None, 5):
            initial = REGISTRY[key].initial_data(seed)
            trace = build_trace(key, initial)
            assert trace.error is None, trace.error
            assert trace[0].state == initial

    def test_only_last_step_is_final(self, key):
        trace = build_trace(key, seed=3)
        assert len(trace) >= 2
        assert [s.step_number for s in trace] == list(range(len(trace)))
        assert all(not s.is_final for s in trace.steps[:-1])
        assert trace.final.is_final
        assert trace.final.state["is_complete"] is True

    def test_steps_share_no_containers(self, key):
        trace = build_trace(key, seed=3)
        seen = set()
        window = trace.steps[:WINDOW]
        if len(trace) > WINDOW:
            window.append(trace.final)
        for step in window:
            ids = _containers(step.state, [])
            assert seen.isdisjoint(ids), f"step {step.step_number} shares state with an earlier step"
            seen.update(ids)

    def test_deterministic(self, key):
        info = REGISTRY[key]
        assert info.initial_data(21) == info.initial_data(21)
        first = build_trace(key, seed=21).to_dict()
        second = build_trace(key, seed=21).to_dict()
        assert first == second

    def test_annotations(self, key):
        info = REGISTRY[key]
        trace = build_trace(key, seed=8)
        for step in trace.steps:
            assert step.description
            if step.pseudocode_line is not None:
                assert 0 <= step.pseudocode_line < len(info.pseudocode)

    def test_json_ready(self, key):
        trace = build_trace(key, seed=2)
        json.dumps(trace.to_dict(), allow_nan=False)


@pytest.mark.parametrize("key", GRAPH_KEYS)
def test_path_keeps_one_edge_per_target(key):
    for seed in (None, 6):
        for step in build_trace(key, seed=seed).steps:
            path = step.state.get("path")
            if not path:
                continue
            targets = [edge["target"] for edge in path]
            assert len(targets) == len(set(targets)), f"step {step.step_number}: {path}"
