"""Tracer, limits, trace building, recording and playback."""

import pytest

from algorithms.step import SearchLimitReached, Step, TraceLimits, Tracer
from algorithms.validate import BLANK_ARRAY, InvalidInput
from engine import (
    Recorder, Stepper, StepperState, UnknownAlgorithm, build_trace, limits_from_config, run_trace,
)

SEARCH_INPUT = {"array": [1, 3, 5, 7, 9, 11], "target": 7}


def _counter(n):
    def fn(t: Tracer) -> None:
        t.emit("start", 0)
        for i in range(n):
            t.state["items"].append(i)
            t.emit(f"item {i}", 1)
        t.finish("done", 2)
    return fn


class TestTracer:
    def test_first_step_is_initial_state(self):
        t = Tracer({"items": [1]})
        t.emit("start")
        assert t.steps[0].state == {"items": [1]}

    def test_steps_do_not_share_containers(self):
        t = Tracer({"items": []})
        t.emit("a")
        t.state["items"].append(1)
        t.emit("b")
        assert t.steps[0].state["items"] == []
        assert t.steps[1].state["items"] == [1]
        assert t.steps[0].state["items"] is not t.steps[1].state["items"]

    def test_initial_is_not_mutated(self):
        initial = {"items": []}
        t = Tracer(initial)
        t.state["items"].append(1)
        assert initial == {"items": []}

    def test_updates_merge_before_snapshot(self):
        t = Tracer({})
        t.emit("a", 3, title="Phase", complexity="O(1)", current=4)
        step = t.steps[0]
        assert step.state == {"current": 4}
        assert (step.pseudocode_line, step.title, step.complexity_info) == (3, "Phase", "O(1)")

    def test_finish_marks_only_last_step(self):
        t = Tracer({})
        t.emit("a")
        t.finish("b")
        assert [s.is_final for s in t.steps] == [False, True]
        assert t.steps[-1].state["is_complete"] is True

    def test_emit_after_finish_raises(self):
        t = Tracer({})
        t.finish("done")
        with pytest.raises(RuntimeError):
            t.emit("late")
        with pytest.raises(RuntimeError):
            t.finish("again")

    def test_truncation_keeps_terminal_step(self):
        t = Tracer({"items": []}, TraceLimits(max_steps=3))
        _counter(10)(t)
        assert len(t.steps) == 3
        assert t.truncated
        assert t.steps[-1].is_final
        assert "intermediate steps omitted" in t.steps[-1].description
        assert [s.step_number for s in t.steps] == [0, 1, 2]

    def test_search_limit_raises(self):
        t = Tracer({}, TraceLimits(search_limit=2))
        t.emit("a")
        t.emit("b")
        with pytest.raises(SearchLimitReached):
            t.emit("c")


class TestTraceLimits:
    def test_rejects_tiny_caps(self):
        with pytest.raises(ValueError):
            TraceLimits(max_steps=1)
        with pytest.raises(ValueError):
            TraceLimits(search_limit=0)

    def test_capped_only_tightens(self):
        base = TraceLimits(max_steps=50)
        assert base.capped(None) is base
        assert base.capped(500) is base
        assert base.capped(10).max_steps == 10

    def test_limits_from_config(self):
        limits = limits_from_config({"MAX_STEPS": "20", "SEARCH_LIMIT": 99})
        assert limits == TraceLimits(max_steps=20, search_limit=99)

    @pytest.mark.parametrize("config", [{"MAX_STEPS": 1}, {"SEARCH_LIMIT": 0}, {"MAX_STEPS": "many"}])
    def test_limits_from_bad_config(self, config):
        with pytest.raises(ValueError):
            limits_from_config(config)


class TestStep:
    def test_to_dict_converts_infinity(self):
        step = Step(state={"distances": [0, float("inf")]}, description="x")
        assert step.to_dict()["state"]["distances"] == [0, "∞"]


class TestRunTrace:
    def test_invalid_input_gives_single_error_step(self):
        def fn(t):
            raise InvalidInput("bad array", BLANK_ARRAY)
        trace = run_trace(fn, {"array": "nope"})
        assert len(trace) == 1
        step = trace[0]
        assert step.is_final
        assert step.state == {"array": [], "error": "bad array", "is_complete": True}
        assert trace.error == "bad array"

    def test_search_limit_closes_trace(self):
        trace = run_trace(_counter(100), {"items": []}, TraceLimits(search_limit=5))
        assert trace.final.is_final
        assert trace.final.title == "Search stopped"
        assert trace.final.state["search_stopped"] is True

    def test_missing_finish_is_an_error(self):
        def fn(t):
            t.emit("start")
        with pytest.raises(RuntimeError):
            run_trace(fn, {})


class TestBuildTrace:
    def test_unknown_key(self):
        with pytest.raises(UnknownAlgorithm):
            build_trace("bogosort")
        with pytest.raises(KeyError):
            build_trace("bogosort")

    def test_per_algorithm_cap(self):
        trace = build_trace("knights_tour")
        assert len(trace) <= 100
        assert trace.final.is_final

    def test_supplied_limits_apply(self):
        trace = build_trace("bubble_sort", seed=1, limits=TraceLimits(max_steps=5))
        assert len(trace) == 5
        assert trace.truncated
        assert trace.final.state["sorted"] == list(range(12))

    def test_search_limit_on_backtracking(self):
        trace = build_trace("n_queens", limits=TraceLimits(search_limit=30))
        assert trace.final.state["search_stopped"] is True
        assert "Search stopped" in trace.final.description

    def test_malformed_state_is_not_raised(self):
        trace = build_trace("binary_search", {"array": [3, 1, 2], "target": 1})
        assert len(trace) == 1
        assert "sorted" in trace.final.state["error"]


class TestRecorder:
    def test_run_and_metrics(self):
        rec = Recorder()
        rec.start("binary_search", initial=SEARCH_INPUT)
        metrics = rec.run_to_completion()
        assert metrics.total_steps == 4
        assert metrics.category == "searching"
        assert metrics.algo_label == "Binary Search"
        assert not metrics.truncated
        assert metrics.error == ""
        assert rec.stepper.current_idx == 0
        assert rec.metrics is metrics

    def test_export(self):
        rec = Recorder()
        rec.start("dijkstra", seed=4)
        rec.run_to_completion()
        out = rec.export()
        assert out["algo_key"] == "dijkstra"
        assert out["seed"] == 4
        assert len(out["steps"]) == out["metrics"]["total_steps"]
        assert out["steps"][-1]["is_final"] is True

    def test_run_before_start(self):
        with pytest.raises(RuntimeError):
            Recorder().run_to_completion()

    def test_unknown_key(self):
        with pytest.raises(UnknownAlgorithm):
            Recorder().start("nope")


class TestStepper:
    @pytest.fixture
    def stepper(self):
        s = Stepper()
        s.load(build_trace("binary_search", SEARCH_INPUT).steps)
        return s

    def test_load_shows_first_step(self, stepper):
        assert stepper.current_idx == 0
        assert stepper.state == StepperState.PAUSED
        assert stepper.total_steps == 4

    def test_load_empty(self):
        with pytest.raises(ValueError):
            Stepper().load([])

    def test_navigation(self, stepper):
        assert not stepper.prev_step()
        assert stepper.next_step()
        assert stepper.current_idx == 1
        stepper.jump_to_end()
        assert stepper.is_finished
        assert not stepper.next_step()
        assert stepper.prev_step()
        assert stepper.state == StepperState.PAUSED
        assert not stepper.goto_step(99)
        stepper.rewind()
        assert stepper.current_idx == 0

    def test_play_ticks_with_delay(self, stepper):
        stepper.set_speed(2.0)
        assert stepper.delay == pytest.approx(0.75)
        stepper.play()
        start = stepper._last_tick
        assert not stepper.tick(start + 0.1)
        assert stepper.tick(start + 0.8)
        assert stepper.current_idx == 1
        stepper.toggle_play()
        assert not stepper.is_playing

    def test_play_is_ignored_when_finished(self, stepper):
        stepper.jump_to_end()
        stepper.play()
        assert stepper.state == StepperState.FINISHED

    def test_speed_presets(self, stepper):
        stepper.set_speed("slow")
        assert stepper.delay == pytest.approx(3.0)
        stepper.set_speed("unknown")
        assert stepper.speed == 1.0

    def test_on_step_callback(self):
        seen = []
        s = Stepper(on_step=lambda step: seen.append(step.step_number))
        s.load(build_trace("binary_search", SEARCH_INPUT).steps)
        s.next_step()
        s.goto_step(3)
        assert seen == [0, 1, 3]

    def test_reset(self, stepper):
        stepper.reset()
        assert stepper.state == StepperState.IDLE
        assert stepper.current_step is None
