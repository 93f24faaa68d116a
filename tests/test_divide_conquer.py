"""Divide-and-conquer family."""

import cmath
import itertools
import math

import pytest

from algorithms.divide_conquer.fft import spectrum


def _naive_dft(xs):
    n = len(xs)
    return [sum(x * cmath.exp(-2j * math.pi * k * i / n) for i, x in enumerate(xs)) for k in range(n)]


class TestStrassen:
    def test_sample(self, final_of):
        assert final_of("strassen")["result"] == [[28, 38], [26, 36]]

    def test_four_by_four(self, final_of):
        a = [[i * 4 + j for j in range(4)] for i in range(4)]
        b = [[(i + j) % 3 - 1 for j in range(4)] for i in range(4)]
        expected = [[sum(a[i][k] * b[k][j] for k in range(4)) for j in range(4)] for i in range(4)]
        assert final_of("strassen", {"matrix_a": a, "matrix_b": b})["result"] == expected

    def test_products_are_recorded(self, final_of):
        assert sorted(final_of("strassen")["products"]) == [f"M{i}" for i in range(1, 8)]

    def test_size_mismatch_is_an_error(self, trace_of):
        trace = trace_of("strassen", {"matrix_a": [[1, 2], [3, 4]], "matrix_b": [[1]]})
        assert trace.error

    def test_non_power_of_two_is_an_error(self, trace_of):
        m = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
        assert trace_of("strassen", {"matrix_a": m, "matrix_b": m}).error


class TestKaratsuba:
    def test_sample(self, final_of):
        assert final_of("karatsuba")["result"] == 7006652

    @pytest.mark.parametrize("x, y", [(0, 99), (7, 8), (12345, 678), (99999, 99999)])
    def test_products(self, x, y, final_of):
        assert final_of("karatsuba", {"x": x, "y": y})["result"] == x * y

    def test_every_call_has_a_result(self, final_of):
        assert all(c["result"] is not None for c in final_of("karatsuba")["calls"])

    def test_negative_is_an_error(self, trace_of):
        assert trace_of("karatsuba", {"x": -1, "y": 3}).error


class TestClosestPair:
    @pytest.mark.parametrize("seed", [None, 1, 2, 3])
    def test_matches_brute_force(self, seed, trace_of):
        trace = trace_of("closest_pair", seed=seed)
        pts = trace[0].state["points"]
        best = min(math.hypot(p["x"] - q["x"], p["y"] - q["y"]) for p, q in itertools.combinations(pts, 2))
        state = trace.final.state
        assert state["best_distance"] == pytest.approx(best)
        i, j = state["best_pair"]
        assert math.hypot(pts[i]["x"] - pts[j]["x"], pts[i]["y"] - pts[j]["y"]) == pytest.approx(best)

    def test_two_points(self, final_of):
        state = final_of("closest_pair", {"points": [{"x": 0, "y": 0}, {"x": 3, "y": 4}]})
        assert state["best_distance"] == 5

    def test_one_point_is_an_error(self, trace_of):
        assert trace_of("closest_pair", {"points": [{"x": 0, "y": 0}]}).error


class TestFFT:
    @pytest.mark.parametrize("seed", [None, 4, 9])
    def test_matches_naive_dft(self, seed, trace_of):
        trace = trace_of("fft", seed=seed)
        expected = _naive_dft(trace[0].state["samples"])
        got = spectrum(trace.final.state)
        assert len(got) == len(expected)
        for g, e in zip(got, expected):
            assert abs(g - e) < 1e-3

    def test_magnitudes(self, final_of):
        state = final_of("fft")
        assert state["magnitudes"] == pytest.approx([abs(z) for z in spectrum(state)], abs=1e-3)

    def test_single_sample(self, final_of):
        assert spectrum(final_of("fft", {"samples": [3]})) == [3]

    def test_odd_length_is_an_error(self, trace_of):
        assert trace_of("fft", {"samples": [1, 2, 3]}).error

    def test_has_bit_reversal_phase(self, trace_of):
        assert trace_of("fft")[1].title == "Bit reversal"
