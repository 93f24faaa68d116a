"""HTTP surface: routes, status codes and payload shapes."""

import importlib.util
from pathlib import Path

import pytest


class TestIndex:
    def test_lists_every_category(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        body = resp.get_data(as_text=True)
        assert "63 algorithms" in body
        assert "Divide &amp; Conquer" in body or "Divide & Conquer" in body
        assert "/api/algorithms/dijkstra/trace" in body


class TestCatalogue:
    def test_all_cards(self, client):
        cards = client.get("/api/algorithms").get_json()
        assert len(cards) == 63
        assert {"key", "label", "category", "tags"} <= set(cards[0])

    def test_filter_by_category(self, client):
        cards = client.get("/api/algorithms?category=strings").get_json()
        assert {c["category"] for c in cards} == {"strings"}
        assert len(cards) == 5

    def test_unknown_category(self, client):
        resp = client.get("/api/algorithms?category=quantum")
        assert resp.status_code == 400
        assert "quantum" in resp.get_json()["error"]

    def test_one_card(self, client):
        card = client.get("/api/algorithms/knights_tour").get_json()
        assert card["label"]
        assert card["max_steps"] == 100
        assert isinstance(card["pseudocode"], list)

    def test_unknown_algorithm(self, client):
        resp = client.get("/api/algorithms/bogosort")
        assert resp.status_code == 404
        assert resp.get_json() == {"error": "Unknown algorithm: bogosort"}


class TestInitial:
    def test_seeded_initial_is_reproducible(self, client):
        a = client.get("/api/algorithms/bubble_sort/initial?seed=4").get_json()
        b = client.get("/api/algorithms/bubble_sort/initial?seed=4").get_json()
        assert a == b
        assert len(a["array"]) > 0

    def test_bad_seed(self, client):
        resp = client.get("/api/algorithms/bubble_sort/initial?seed=abc")
        assert resp.status_code == 400
        assert "seed" in resp.get_json()["error"]


class TestTrace:
    def test_get_trace(self, client):
        payload = client.get("/api/algorithms/dijkstra/trace").get_json()
        assert payload["algo_key"] == "dijkstra"
        assert payload["error"] is None
        steps = payload["steps"]
        assert steps[0]["step_number"] == 0
        assert steps[-1]["is_final"] is True
        assert payload["metrics"]["total_steps"] == len(steps)

    def test_max_steps_truncates(self, client):
        payload = client.get("/api/algorithms/bubble_sort/trace?seed=1&max_steps=5").get_json()
        assert len(payload["steps"]) <= 5
        assert payload["truncated"] is True
        assert payload["steps"][-1]["state"]["is_complete"] is True

    @pytest.mark.parametrize("value", ["1", "x"])
    def test_bad_max_steps(self, client, value):
        assert client.get(f"/api/algorithms/bubble_sort/trace?max_steps={value}").status_code == 400

    def test_config_step_cap(self, client):
        client.application.config["MAX_STEPS"] = 8
        payload = client.get("/api/algorithms/selection_sort/trace?seed=2").get_json()
        assert len(payload["steps"]) <= 8

    def test_post_initial(self, client):
        resp = client.post("/api/algorithms/binary_search/trace",
                           json={"initial": {"array": [1, 3, 5, 7, 9], "target": 7}})
        assert resp.status_code == 200
        payload = resp.get_json()
        assert payload["error"] is None
        assert payload["steps"][0]["state"]["array"] == [1, 3, 5, 7, 9]

    def test_post_invalid_initial_is_an_error_trace(self, client):
        resp = client.post("/api/algorithms/bubble_sort/trace", json={"initial": {"array": []}})
        assert resp.status_code == 200
        payload = resp.get_json()
        assert payload["error"]
        assert len(payload["steps"]) == 1

    @pytest.mark.parametrize("body", [
        [1, 2],
        {"array": [1]},
        {"initial": {}, "max_steps": 1},
        {"initial": {}, "max_steps": True},
    ])
    def test_post_malformed_body(self, client, body):
        assert client.post("/api/algorithms/bubble_sort/trace", json=body).status_code == 400

    def test_post_unknown_algorithm(self, client):
        assert client.post("/api/algorithms/nope/trace", json={"initial": {}}).status_code == 404


class TestSingleStep:
    def test_step_in_range(self, client):
        payload = client.get("/api/algorithms/inorder/steps/2").get_json()
        assert payload["step"]["step_number"] == 2
        assert payload["total_steps"] > 2

    def test_step_out_of_range(self, client):
        resp = client.get("/api/algorithms/inorder/steps/100000")
        assert resp.status_code == 400
        assert "out of range" in resp.get_json()["error"]


class TestStartupConfig:
    @staticmethod
    def _load_app():
        path = Path(__file__).resolve().parent.parent / "main.py"
        spec = importlib.util.spec_from_file_location("main_startup", path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module.app

    def test_step_cap_from_environment(self, monkeypatch):
        monkeypatch.setenv("ALGOTRACE_MAX_STEPS", "40")
        assert self._load_app().config["MAX_STEPS"] == 40

    @pytest.mark.parametrize("name, value", [
        ("ALGOTRACE_MAX_STEPS", "1"),
        ("ALGOTRACE_SEARCH_LIMIT", "0"),
        ("ALGOTRACE_MAX_STEPS", "lots"),
    ])
    def test_bad_limit_fails_at_startup(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ValueError):
            self._load_app()
