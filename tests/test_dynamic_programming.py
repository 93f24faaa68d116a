"""Dynamic-programming family: table fills and tracebacks."""

import pytest


def _is_subsequence(small, big):
    it = iter(big)
    return all(ch in it for ch in small)


class TestOneDimensional:
    def test_fibonacci(self, final_of):
        state = final_of("fibonacci")
        assert state["result"] == 55
        assert state["dp"][:8] == [0, 1, 1, 2, 3, 5, 8, 13]

    @pytest.mark.parametrize("n, expected", [(0, 0), (1, 1), (2, 1)])
    def test_fibonacci_small(self, n, expected, final_of):
        assert final_of("fibonacci", {"n": n})["result"] == expected

    def test_fibonacci_rejects_negative(self, trace_of):
        assert trace_of("fibonacci", {"n": -1}).error

    def test_lis(self, final_of):
        state = final_of("lis")
        arr = [10, 22, 9, 33, 21, 50, 41, 60]
        assert state["result"] == 5
        values = [arr[i] for i in state["sequence"]]
        assert len(values) == 5
        assert values == sorted(values)

    def test_coin_change_counts_ways(self, final_of):
        assert final_of("coin_change")["result"] == 102
        assert final_of("coin_change", {"coins": [2], "amount": 3})["result"] == 0
        assert final_of("coin_change", {"coins": [1, 2], "amount": 4})["result"] == 3

    def test_rod_cutting(self, final_of):
        state = final_of("rod_cutting")
        prices = [0, 1, 5, 8, 9, 10, 17, 17, 20]
        assert state["result"] == 22
        assert sum(state["pieces"]) == 8
        assert sum(prices[p] for p in state["pieces"]) == 22


class TestTwoDimensional:
    def test_knapsack(self, trace_of):
        trace = trace_of("knapsack")
        items = trace[0].state["items"]
        state = trace.final.state
        assert state["result"] == 280
        chosen = state["selected_items"]
        assert sum(items[i]["weight"] for i in chosen) <= trace[0].state["capacity"]
        assert sum(items[i]["value"] for i in chosen) == 280

    def test_knapsack_base_cases_come_first(self, trace_of):
        trace = trace_of("knapsack")
        assert trace[1].title == "Base cases"
        assert any(s.title == "Traceback" for s in trace.steps)

    def test_lcs(self, final_of):
        state = final_of("lcs")
        assert state["result"] == 4
        assert len(state["lcs"]) == 4
        assert _is_subsequence(state["lcs"], "ABCBDAB")
        assert _is_subsequence(state["lcs"], "BDCABA")

    def test_scs(self, final_of):
        state = final_of("scs")
        out = state["supersequence"]
        assert state["result"] == len(out) == 9
        assert _is_subsequence("ABCBDAB", out)
        assert _is_subsequence("BDCABA", out)

    def test_edit_distance(self, final_of):
        state = final_of("edit_distance")
        assert state["result"] == 3
        edits = [op for op in state["operations"] if not op.startswith("keep")]
        assert len(edits) == 3

    def test_edit_distance_from_empty_string(self, final_of):
        state = final_of("edit_distance", {"string1": "", "string2": "abc"})
        assert state["result"] == 3
        assert state["operations"] == ["insert 'a'", "insert 'b'", "insert 'c'"]

    def test_lcs_with_empty_string(self, final_of):
        state = final_of("lcs", {"string1": "", "string2": "AB"})
        assert state["result"] == 0
        assert state["lcs"] == ""

    def test_scs_with_empty_string(self, final_of):
        state = final_of("scs", {"string1": "XY", "string2": ""})
        assert state["result"] == 2
        assert state["supersequence"] == "XY"

    def test_non_string_is_an_error(self, trace_of):
        assert trace_of("lcs", {"string1": 7, "string2": "AB"}).error

    def test_matrix_chain(self, final_of):
        state = final_of("matrix_chain")
        assert state["result"] == 15125
        assert state["parenthesization"].count("(") == state["parenthesization"].count(")")

    def test_subset_sum(self, final_of):
        state = final_of("subset_sum")
        nums = [3, 34, 4, 12, 5, 2]
        assert state["result"] is True
        assert sum(nums[i] for i in state["subset"]) == 9

    def test_subset_sum_impossible(self, trace_of):
        trace = trace_of("subset_sum", {"numbers": [4, 6], "target": 5})
        assert trace.final.state["result"] is False
        assert "No subset" in trace.final.description

    def test_every_fill_step_names_a_cell(self, trace_of):
        trace = trace_of("edit_distance")
        fills = [s for s in trace.steps if s.pseudocode_line in (3, 4, 5)]
        assert fills
        assert all(s.state["current_cell"] is not None for s in fills)
