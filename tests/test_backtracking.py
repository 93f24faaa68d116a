"""Backtracking family."""

import pytest


class TestNQueens:
    @pytest.mark.parametrize("n", [1, 4, 6, 8])
    def test_solutions_are_safe(self, n, final_of):
        state = final_of("n_queens", {"n": n})
        assert state["solved"] is True
        rows = state["queens"]
        assert sorted(rows) == list(range(n))
        for c1 in range(n):
            for c2 in range(c1 + 1, n):
                assert abs(rows[c1] - rows[c2]) != c2 - c1

    @pytest.mark.parametrize("n", [2, 3])
    def test_unsolvable(self, n, trace_of):
        trace = trace_of("n_queens", {"n": n})
        assert trace.final.state["solved"] is False
        assert trace.final.description.startswith("No solution exists")

    def test_too_large_is_an_error(self, trace_of):
        assert trace_of("n_queens", {"n": 40}).error


class TestRatMaze:
    def test_blocked_maze(self, trace_of):
        trace = trace_of("rat_maze", {"grid": [[1, 0, 0], [0, 0, 0], [0, 0, 0]]})
        state = trace.final.state
        assert state["solved"] is False
        assert state["route"] == []
        assert trace.final.description.startswith("No solution exists")

    @pytest.mark.parametrize("seed", range(8))
    def test_random_mazes_are_solvable(self, seed, trace_of):
        trace = trace_of("rat_maze", seed=seed)
        grid = trace[0].state["grid"]
        state = trace.final.state
        assert state["solved"] is True
        route = state["route"]
        assert route[0] == [0, 0]
        assert route[-1] == [len(grid) - 1, len(grid[0]) - 1]
        for (x1, y1), (x2, y2) in zip(route, route[1:]):
            assert (x2 - x1, y2 - y1) in ((1, 0), (0, 1))
            assert grid[x2][y2] == 1

    def test_solution_grid_matches_route(self, final_of):
        state = final_of("rat_maze", seed=3)
        marked = [[x, y] for x, row in enumerate(state["solution"]) for y, v in enumerate(row) if v]
        assert sorted(marked) == sorted(state["route"])


class TestSudoku:
    def test_sample_is_solved(self, trace_of):
        trace = trace_of("sudoku")
        given = trace[0].state["board"]
        board = trace.final.state["board"]
        assert trace.final.state["solved"] is True
        digits = set(range(1, 10))
        for i in range(9):
            assert set(board[i]) == digits
            assert {board[r][i] for r in range(9)} == digits
        for br in range(0, 9, 3):
            for bc in range(0, 9, 3):
                assert {board[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)} == digits
        for r in range(9):
            for c in range(9):
                if given[r][c]:
                    assert board[r][c] == given[r][c]

    def test_conflicting_givens_are_an_error(self, trace_of):
        board = [[0] * 9 for _ in range(9)]
        board[0][0] = board[0][5] = 7
        trace = trace_of("sudoku", {"board": board})
        assert "row 1" in trace.error

    def test_wrong_shape_is_an_error(self, trace_of):
        assert trace_of("sudoku", {"board": [[0] * 4 for _ in range(4)]}).error


class TestKnightsTour:
    def test_sample_is_capped(self, trace_of):
        trace = trace_of("knights_tour")
        assert len(trace) <= 100
        assert trace.final.is_final

    def test_one_square_board(self, final_of):
        state = final_of("knights_tour", {"size": 1, "start": [0, 0]})
        assert state["solved"] is True
        assert state["solution"] == [[0]]

    def test_three_by_three_has_no_tour(self, final_of):
        assert final_of("knights_tour", {"size": 3, "start": [0, 0]})["solved"] is False

    def test_start_off_the_board_is_an_error(self, trace_of):
        assert trace_of("knights_tour", {"size": 5, "start": [5, 0]}).error


class TestHamiltonianCycle:
    def test_sample(self, trace_of):
        trace = trace_of("hamiltonian_cycle")
        matrix = trace[0].state["matrix"]
        state = trace.final.state
        assert state["solved"] is True
        route = state["route"]
        assert sorted(route) == list(range(len(matrix)))
        for a, b in zip(route, route[1:] + route[:1]):
            assert matrix[a][b]

    def test_path_graph_has_no_cycle(self, final_of):
        matrix = [[0, 1, 0], [1, 0, 1], [0, 1, 0]]
        assert final_of("hamiltonian_cycle", {"matrix": matrix})["solved"] is False

    def test_asymmetric_matrix_is_an_error(self, trace_of):
        assert trace_of("hamiltonian_cycle", {"matrix": [[0, 1], [0, 0]]}).error
