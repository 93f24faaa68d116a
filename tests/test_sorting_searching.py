"""Sorting and searching families."""

import pytest

from algorithms import algorithms_by_category

SORT_KEYS = [a.key for a in algorithms_by_category("sorting")]
SEARCH_KEYS = [a.key for a in algorithms_by_category("searching")]


class TestSorting:
    @pytest.mark.parametrize("key", SORT_KEYS)
    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_sorts_random_arrays(self, key, seed, trace_of):
        trace = trace_of(key, seed=seed)
        initial = trace[0].state["array"]
        state = trace.final.state
        assert state["array"] == sorted(initial)
        assert state["sorted"] == list(range(len(initial)))

    @pytest.mark.parametrize("key", SORT_KEYS)
    def test_duplicates_and_single_element(self, key, final_of):
        assert final_of(key, {"array": [5, 1, 5, 3, 1]})["array"] == [1, 1, 3, 5, 5]
        assert final_of(key, {"array": [7]})["array"] == [7]

    @pytest.mark.parametrize("key", SORT_KEYS)
    def test_empty_array_is_an_error(self, key, trace_of):
        trace = trace_of(key, {"array": []})
        assert len(trace) == 1
        assert trace.final.state["error"]
        assert trace.final.state["array"] == []

    def test_random_array_range(self, trace_of):
        arr = trace_of("bubble_sort", seed=9)[0].state["array"]
        assert len(arr) == 12
        assert all(1 <= v <= 80 for v in arr)

    def test_bubble_sort_steps_per_swap(self, trace_of):
        trace = trace_of("bubble_sort", {"array": [2, 1]})
        assert trace.final.state["array"] == [1, 2]
        assert any(s.state["array"] == [1, 2] and not s.is_final for s in trace.steps)


class TestSearching:
    def test_binary_search_scenario(self, trace_of):
        trace = trace_of("binary_search", {"array": [1, 3, 5, 7, 9, 11], "target": 7})
        assert len(trace) == 4
        state = trace.final.state
        assert state["found"] is True
        assert state["mid"] == 3
        assert state["array"][state["mid"]] == 7

    @pytest.mark.parametrize("key", SEARCH_KEYS)
    @pytest.mark.parametrize("seed", range(6))
    def test_result_is_consistent(self, key, seed, trace_of):
        trace = trace_of(key, seed=seed)
        arr, target = trace[0].state["array"], trace[0].state["target"]
        state = trace.final.state
        if target in arr:
            assert state["found"] is True
            assert arr[state["result"]] == target
        else:
            assert state["found"] is False
            assert state["result"] == -1

    @pytest.mark.parametrize("key", SEARCH_KEYS)
    def test_missing_target(self, key, final_of):
        state = final_of(key, {"array": [2, 4, 6, 8, 10, 12, 14], "target": 9})
        assert state["found"] is False
        assert state["result"] == -1

    @pytest.mark.parametrize("key", SEARCH_KEYS)
    @pytest.mark.parametrize("target", [2, 14, 8])
    def test_finds_ends_and_middle(self, key, target, final_of):
        state = final_of(key, {"array": [2, 4, 6, 8, 10, 12, 14], "target": target})
        assert state["found"] is True
        assert state["result"] == [2, 4, 6, 8, 10, 12, 14].index(target)

    @pytest.mark.parametrize("key", [k for k in SEARCH_KEYS if k != "linear_search"])
    def test_unsorted_input_is_an_error(self, key, trace_of):
        trace = trace_of(key, {"array": [3, 1, 2], "target": 1})
        assert len(trace) == 1
        assert "sorted" in trace.final.state["error"]

    def test_linear_search_accepts_unsorted(self, final_of):
        state = final_of("linear_search", {"array": [9, 4, 7], "target": 7})
        assert state["result"] == 2

    def test_seeded_states_are_sorted_and_distinct(self, trace_of):
        arr = trace_of("jump_search", seed=4)[0].state["array"]
        assert arr == sorted(set(arr))
        assert len(arr) == 15
