"""Graph shape helpers and the graph-family traces."""

import pytest

from algorithms.graphs.common import make_shape
from algorithms.graphs.floyd_warshall import initial_matrix, matrix_path
from graph import Graph, reconstruct, update_path

INF = float("inf")

NEGATIVE_CYCLE = make_shape(["A", "B", "C"], [(0, 1, 1), (1, 2, -2), (2, 1, 1)], directed=True)


def _connected(shape):
    g = Graph.from_dict(shape)
    seen, stack = {0}, [0]
    while stack:
        for v, _, _ in g.neighbours(stack.pop()):
            if v not in seen:
                seen.add(v)
                stack.append(v)
    return len(seen) == g.node_count()


class TestGraphShape:
    def test_round_trip(self):
        shape = make_shape(["A", "B"], [(0, 1, 4)], positions=[(0, 0), (3, 4)])
        assert Graph.from_dict(shape).to_dict() == shape

    def test_round_trip_keeps_direction_and_capacity(self):
        shape = {
            "nodes": [{"label": "S"}, {"label": "T"}],
            "edges": [{"source": 0, "target": 1, "weight": 2, "directed": True, "capacity": 9}],
        }
        g = Graph.from_dict(shape)
        assert g.to_dict() == shape
        assert [(u, v) for u, v, _, _ in g.arcs()] == [(0, 1)]

    def test_undirected_edges_go_both_ways(self):
        g = Graph.from_dict(make_shape(["A", "B", "C"], [(0, 1, 2), (1, 2, 5)]))
        assert [v for v, _, _ in g.neighbours(1)] == [0, 2]
        assert len(g.arcs()) == 4

    def test_directed_edges_go_one_way(self):
        g = Graph.from_dict(make_shape(["A", "B"], [(0, 1, 2)], directed=True))
        assert g.neighbours(1) == []
        assert g.edge_between(0, 1) == 0
        assert g.edge_between(1, 0) is None

    @pytest.mark.parametrize("seed", range(10))
    def test_random_graphs_are_connected(self, seed):
        shape = Graph.generate_random(num_nodes=8, edge_probability=0.1, seed=seed).to_dict()
        assert _connected(shape)

    def test_random_graphs_are_reproducible(self):
        a = Graph.generate_random(seed=42).to_dict()
        b = Graph.generate_random(seed=42).to_dict()
        assert a == b

    def test_from_adjacency_matrix(self):
        g = Graph.from_adjacency_matrix([[0, 1, 0], [1, 0, 3], [0, 3, 0]], labels="XYZ")
        assert [(e.source, e.target, e.weight) for e in g.edges] == [(0, 1, 1), (1, 2, 3)]
        assert g.label(2) == "Z"


class TestPathHelpers:
    def test_update_path_keeps_one_edge_per_target(self):
        path = []
        update_path(path, 0, 2)
        update_path(path, 0, 1)
        update_path(path, 1, 2)
        assert path == [{"source": 0, "target": 1}, {"source": 1, "target": 2}]

    def test_reconstruct(self):
        assert reconstruct([None, 0, 1, None], 2) == [0, 1, 2]
        assert reconstruct([None, 0, 1, None], 3) == [3]

    def test_matrix_path(self):
        g = Graph.from_dict(make_shape(["A", "B", "C"], [(0, 1, 1), (1, 2, 1)], directed=True))
        _, nxt = initial_matrix(g)
        nxt[0][2] = 1
        assert matrix_path(nxt, 0, 2) == [0, 1, 2]
        assert matrix_path(nxt, 2, 0) == []


class TestTraversal:
    def test_bfs_sample_visits_layer_by_layer(self, final_of):
        state = final_of("bfs")
        order = state["visited_nodes"]
        assert sorted(order) == list(range(8))
        assert order.index(1) < order.index(3)
        assert order.index(2) < order.index(3)

    def test_bfs_queue_is_first_in_first_out(self, trace_of):
        trace = trace_of("bfs")
        assert trace[1].state["queue"] == [0]
        dequeued = [s.state["current_node"] for s in trace if s.description.startswith("Dequeue")]
        assert dequeued == trace.final.state["visited_nodes"]
        assert dequeued[:3] == [0, 1, 2]
        assert trace.final.state["queue"] == []

    def test_bfs_route_to_end_node(self, trace_of):
        from algorithms.graphs.bfs import build_initial_state
        initial = build_initial_state()
        initial["end_node"] = 7
        state = trace_of("bfs", initial).final.state
        assert state["shortest_path"][0] == 0
        assert state["shortest_path"][-1] == 7
        assert len(state["shortest_path"]) == 4

    def test_dfs_visits_everything(self, final_of):
        assert final_of("dfs")["node_states"].count("unvisited") == 0


class TestShortestPaths:
    def test_dijkstra_sample(self, final_of):
        state = final_of("dijkstra")
        assert state["shortest_path"] == [0, 2, 6, 7]
        assert state["distances"][7] == 8

    def test_dijkstra_rejects_negative_edges(self, trace_of):
        trace = trace_of("dijkstra", dict(NEGATIVE_CYCLE, start_node=0))
        assert len(trace) == 1
        assert "non-negative" in trace.final.state["error"]

    def test_astar_sample(self, final_of):
        assert final_of("astar")["shortest_path"] == [0, 2, 5, 7]

    def test_bellman_ford_sample(self, final_of):
        state = final_of("bellman_ford")
        assert state["distances"] == [0, 1, 3, 5, 0, 4, 3]
        assert state["has_negative_cycle"] is False

    @pytest.mark.parametrize("key", ["bellman_ford", "floyd_warshall", "johnsons"])
    def test_negative_cycle_detected(self, key, final_of):
        state = final_of(key, dict(NEGATIVE_CYCLE, start_node=0))
        assert state["has_negative_cycle"] is True

    def test_floyd_warshall_sample(self, final_of):
        state = final_of("floyd_warshall")
        dist = state["distance_matrix"]
        assert dist[0][2] == -1
        assert dist[0][4] == 6
        assert {"source": 0, "target": 2, "nodes": [0, 1, 3, 2]} in state["routes"]

    def test_johnsons_agrees_with_floyd_warshall(self, trace_of):
        from algorithms.graphs.johnsons import build_initial_state
        initial = build_initial_state()
        johnson = trace_of("johnsons", initial).final.state["distance_matrix"]
        floyd = trace_of("floyd_warshall", initial).final.state["distance_matrix"]
        assert johnson == floyd

    def test_floyd_warshall_two_node_cycle(self, final_of):
        shape = make_shape(["A", "B"], [(0, 1, 1), (1, 0, -3)], directed=True)
        state = final_of("floyd_warshall", shape)
        assert state["has_negative_cycle"] is True

    def test_johnsons_mixed_directed_and_undirected(self, final_of):
        shape = {
            "nodes": [{"label": "0"}, {"label": "1"}, {"label": "2"}],
            "edges": [
                {"source": 2, "target": 0, "weight": -3, "directed": True},
                {"source": 0, "target": 1, "weight": 5},
            ],
        }
        johnson = final_of("johnsons", shape)
        floyd = final_of("floyd_warshall", shape)
        assert johnson["has_negative_cycle"] is False
        assert johnson["distance_matrix"][1][0] == 5
        assert johnson["distance_matrix"] == floyd["distance_matrix"]


class TestGraphInput:
    def test_nodes_must_be_objects(self, trace_of):
        trace = trace_of("bfs", {"nodes": ["A", "B"],
                                 "edges": [{"source": 0, "target": 1}], "start_node": 0})
        assert len(trace) == 1
        assert "objects" in trace.error

    @pytest.mark.parametrize("position", [[1], "x", [1, "y"]])
    def test_bad_position(self, position, trace_of):
        shape = make_shape(["A", "B"], [(0, 1)])
        shape["nodes"][0]["position"] = position
        trace = trace_of("bfs", dict(shape, start_node=0))
        assert trace.error is not None
        assert "position" in trace.error

    def test_position_as_mapping(self, final_of):
        shape = make_shape(["A", "B"], [(0, 1)])
        shape["nodes"][0]["position"] = {"x": 3, "y": 4}
        assert final_of("bfs", dict(shape, start_node=0))["is_complete"] is True

    @pytest.mark.parametrize("scale", ["x", 0, -2])
    def test_astar_heuristic_scale(self, scale, trace_of):
        from algorithms.graphs.astar import build_initial_state
        initial = build_initial_state()
        initial["heuristic_scale"] = scale
        trace = trace_of("astar", initial)
        assert len(trace) == 1
        assert "heuristic_scale" in trace.error


class TestSpanningTrees:
    def test_kruskal_sample(self, final_of):
        state = final_of("kruskals")
        assert len(state["mst_edges"]) == 6
        assert state["total_weight"] == 39
        assert state["connected"] is True

    def test_prim_matches_kruskal(self, final_of):
        for seed in (None, 1, 2):
            assert final_of("prims", seed=seed)["total_weight"] == final_of("kruskals", seed=seed)["total_weight"]

    @pytest.mark.parametrize("key", ["kruskals", "prims"])
    def test_disconnected_graph_gives_forest(self, key, trace_of):
        shape = make_shape(["A", "B", "C", "D"], [(0, 1, 1), (2, 3, 1)])
        trace = trace_of(key, dict(shape, start_node=0))
        assert trace.final.state["connected"] is False
        assert "disconnected" in trace.final.description


class TestOrderingAndFlow:
    def test_topological_order_respects_edges(self, trace_of):
        from algorithms.graphs.topological_sort import build_initial_state
        initial = build_initial_state()
        state = trace_of("topological_sort", initial).final.state
        pos = {v: i for i, v in enumerate(state["order"])}
        assert len(pos) == len(initial["nodes"])
        for e in initial["edges"]:
            assert pos[e["source"]] < pos[e["target"]]
        assert state["has_cycle"] is False

    def test_topological_cycle(self, final_of):
        shape = make_shape(["A", "B", "C", "D"], [(0, 1), (1, 2), (2, 1), (2, 3)], directed=True)
        state = final_of("topological_sort", shape)
        assert state["has_cycle"] is True
        assert set(state["cycle_nodes"]) == {1, 2, 3}

    def test_max_flow_sample(self, final_of):
        state = final_of("ford_fulkerson")
        assert state["max_flow"] == 15
        assert 0 in state["min_cut"]
        assert 5 not in state["min_cut"]

    def test_source_equals_sink(self, trace_of):
        from algorithms.graphs.ford_fulkerson import build_initial_state
        initial = build_initial_state()
        initial["end_node"] = 0
        assert trace_of("ford_fulkerson", initial).error
