"""Greedy family."""

import pytest


class TestActivitySelection:
    def test_sample(self, trace_of):
        trace = trace_of("activity_selection")
        acts = trace[0].state["activities"]
        state = trace.final.state
        assert state["result"] == 4
        chosen = sorted((acts[i] for i in state["selected"]), key=lambda a: a["finish"])
        for prev, nxt in zip(chosen, chosen[1:]):
            assert nxt["start"] >= prev["finish"]
        assert len(state["selected"]) + len(state["rejected"]) == len(acts)

    def test_finish_before_start_is_an_error(self, trace_of):
        trace = trace_of("activity_selection", {"activities": [{"start": 5, "finish": 2}]})
        assert trace.error


class TestFractionalKnapsack:
    def test_sample(self, final_of):
        state = final_of("fractional_knapsack")
        assert state["result"] == pytest.approx(122)
        assert state["remaining"] == 0
        assert sum(1 for f in state["fractions"] if 0 < f < 1) <= 1

    def test_everything_fits(self, final_of):
        state = final_of("fractional_knapsack", {
            "items": [{"value": 10, "weight": 2}, {"value": 6, "weight": 3}],
            "capacity": 100,
        })
        assert state["result"] == 16
        assert state["fractions"] == [1, 1]

    def test_zero_weight_is_an_error(self, trace_of):
        trace = trace_of("fractional_knapsack", {"items": [{"value": 1, "weight": 0}], "capacity": 3})
        assert trace.error


class TestJobSequencing:
    def test_sample(self, final_of):
        state = final_of("job_sequencing")
        assert state["result"] == 105
        placed = [i for i in state["slots"] if i is not None]
        assert len(placed) + len(state["rejected"]) == 6

    def test_no_job_misses_its_deadline(self, trace_of):
        trace = trace_of("job_sequencing")
        jobs = trace[0].state["jobs"]
        for slot, i in enumerate(trace.final.state["slots"]):
            if i is not None:
                assert slot + 1 <= jobs[i]["deadline"]


class TestHuffman:
    def test_sample(self, final_of):
        state = final_of("huffman")
        assert state["result"] == 224
        assert state["codes"]["F"] == "0"

    def test_codes_are_prefix_free(self, final_of):
        codes = list(final_of("huffman")["codes"].values())
        for a in codes:
            for b in codes:
                if a != b:
                    assert not b.startswith(a)

    def test_single_symbol(self, final_of):
        state = final_of("huffman", {"symbols": [{"symbol": "x", "freq": 3}]})
        assert state["codes"] == {"x": "0"}
        assert state["result"] == 3

    def test_non_positive_frequency_is_an_error(self, trace_of):
        assert trace_of("huffman", {"symbols": [{"symbol": "x", "freq": 0}]}).error
