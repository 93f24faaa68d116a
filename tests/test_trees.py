"""Tree traversals, BST operations and AVL rebalancing."""

import pytest

from algorithms.trees.common import bst_from_values, nodes


def _inorder(node):
    if node is None:
        return []
    return _inorder(node.get("left")) + [node["value"]] + _inorder(node.get("right"))


def _height(node):
    if node is None:
        return 0
    return 1 + max(_height(node.get("left")), _height(node.get("right")))


def _assert_avl(node):
    if node is None:
        return
    assert abs(_height(node.get("left")) - _height(node.get("right"))) <= 1
    assert node["height"] == _height(node)
    _assert_avl(node.get("left"))
    _assert_avl(node.get("right"))


class TestTraversals:
    @pytest.mark.parametrize("key, expected", [
        ("inorder",     [1, 2, 3, 4, 5, 6, 7]),
        ("preorder",    [4, 2, 1, 3, 6, 5, 7]),
        ("postorder",   [1, 3, 2, 5, 7, 6, 4]),
        ("level_order", [4, 2, 6, 1, 3, 5, 7]),
    ])
    def test_sample_order(self, key, expected, final_of):
        state = final_of(key)
        assert state["output"] == expected
        assert len(state["visited"]) == 7

    def test_skewed_tree(self, final_of):
        tree = bst_from_values([1, 2, 3, 4])
        assert final_of("inorder", {"tree": tree})["output"] == [1, 2, 3, 4]
        assert final_of("postorder", {"tree": tree})["output"] == [4, 3, 2, 1]

    def test_call_stack_empties(self, trace_of):
        trace = trace_of("inorder")
        assert max(len(s.state["call_stack"]) for s in trace.steps[1:]) == 3
        assert trace.final.state["call_stack"] == []

    def test_empty_tree_is_an_error(self, trace_of):
        assert trace_of("preorder", {"tree": None}).error

    def test_duplicate_ids_are_an_error(self, trace_of):
        tree = {"id": 0, "value": 1, "left": {"id": 0, "value": 0, "left": None, "right": None}, "right": None}
        assert trace_of("inorder", {"tree": tree}).error


class TestBST:
    def test_sample_operations(self, final_of):
        state = final_of("bst")
        assert _inorder(state["tree"]) == [20, 40, 50, 55, 60, 70, 80]
        assert [r["ok"] for r in state["results"]] == [True, True, True]

    def test_missing_and_duplicate(self, final_of):
        state = final_of("bst", {
            "tree": bst_from_values([5, 3, 8]),
            "operations": [{"op": "search", "value": 4}, {"op": "insert", "value": 8},
                           {"op": "delete", "value": 1}],
        })
        assert [r["ok"] for r in state["results"]] == [False, False, False]
        assert _inorder(state["tree"]) == [3, 5, 8]

    def test_insert_into_empty_tree(self, final_of):
        state = final_of("bst", {"tree": None, "operations": [{"op": "insert", "value": 9}]})
        assert state["tree"]["value"] == 9

    def test_delete_root_with_two_children(self, final_of):
        state = final_of("bst", {
            "tree": bst_from_values([5, 3, 8, 7, 9]),
            "operations": [{"op": "delete", "value": 5}],
        })
        assert state["tree"]["value"] == 7
        assert _inorder(state["tree"]) == [3, 7, 8, 9]

    def test_new_node_ids_are_unique(self, final_of):
        state = final_of("bst")
        ids = [n["id"] for n in nodes(state["tree"])]
        assert len(ids) == len(set(ids))

    def test_unknown_operation_is_an_error(self, trace_of):
        trace = trace_of("bst", {"tree": None, "operations": [{"op": "rotate", "value": 1}]})
        assert trace.error


class TestAVL:
    def test_sample(self, final_of):
        state = final_of("avl")
        assert _inorder(state["tree"]) == [5, 10, 15, 25, 30, 40]
        _assert_avl(state["tree"])

    def test_rotations_never_drop_nodes(self, trace_of):
        trace = trace_of("avl", {"tree": None, "insert": [10, 20, 30, 15, 5, 25, 40], "delete": []})
        counts = [len(list(nodes(s.state["tree"]))) for s in trace.steps[1:]]
        assert counts == sorted(counts)
        assert counts[-1] == 7

    @pytest.mark.parametrize("values, rotation", [
        ([3, 2, 1], "right"),
        ([1, 2, 3], "left"),
    ])
    def test_single_rotations(self, values, rotation, trace_of):
        trace = trace_of("avl", {"tree": None, "insert": values, "delete": []})
        assert any(s.state.get("rotation") == rotation for s in trace.steps)
        assert trace.final.state["tree"]["value"] == 2
        _assert_avl(trace.final.state["tree"])

    def test_double_rotation(self, final_of):
        state = final_of("avl", {"tree": None, "insert": [3, 1, 2], "delete": []})
        assert state["tree"]["value"] == 2

    def test_sorted_inserts_stay_balanced(self, final_of):
        state = final_of("avl", {"tree": None, "insert": list(range(1, 16)), "delete": [8, 1]})
        assert _inorder(state["tree"]) == [v for v in range(1, 16) if v not in (8, 1)]
        _assert_avl(state["tree"])
