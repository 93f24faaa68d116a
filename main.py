"""
main.py — Algorithm Trace Server (Flask)
=========================================
JSON surface over the registry and the trace engine.  Stateless: every
request rebuilds its trace from (algorithm, seed) or a posted initial
state, which is deterministic.

Routes:
  GET  /                                    – index of algorithms by category
  GET  /api/algorithms                      – every algorithm card
  GET  /api/algorithms/<key>                – one card + pseudocode
  GET  /api/algorithms/<key>/initial?seed=  – initial state
  GET  /api/algorithms/<key>/trace?seed=&max_steps=
  POST /api/algorithms/<key>/trace          – body {"initial": {...}, "max_steps"?: n}
  GET  /api/algorithms/<key>/steps/<n>?seed=

An unknown algorithm is a 404, a malformed query parameter a 400.  An
invalid initial state is *not* an HTTP error: the engine answers with
its single-step error trace.

Configuration (app.config, overridable with ALGOTRACE_* env vars):
  MAX_STEPS, SEARCH_LIMIT, DEFAULT_SEED — see engine/config.py.
"""

import logging
from typing import Any, Dict, Optional

from flask import Flask, abort, jsonify, render_template_string, request

from algorithms import CATEGORIES, algorithms_by_category, get_algorithm, list_algorithms
from engine import DEFAULTS, ENV_PREFIX, Recorder, TraceLimits, UnknownAlgorithm, limits_from_config


app = Flask(__name__)
app.config.from_mapping(DEFAULTS)
app.config.from_prefixed_env(ENV_PREFIX)
limits_from_config(app.config)      # a bad ALGOTRACE_MAX_STEPS or _SEARCH_LIMIT fails at startup
app.json.sort_keys = False


# ---------------------------------------------------------------------------
# Request helpers
# ---------------------------------------------------------------------------
def _int_arg(name: str, minimum: Optional[int] = None) -> Optional[int]:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return None
    try:
        value = int(raw)
    except ValueError:
        abort(400, description=f"'{name}' must be an integer, got {raw!r}")
    if minimum is not None and value < minimum:
        abort(400, description=f"'{name}' must be at least {minimum}")
    return value


def _seed() -> Optional[int]:
    seed = _int_arg("seed")
    return app.config["DEFAULT_SEED"] if seed is None else seed


def _limits(max_steps: Optional[int] = None) -> TraceLimits:
    return limits_from_config(app.config).capped(max_steps)


def _lookup(key: str):
    info = get_algorithm(key)
    if info is None:
        raise UnknownAlgorithm(key)
    return info


def _run(key: str, initial: Optional[Dict[str, Any]], seed: Optional[int],
         max_steps: Optional[int]) -> Dict[str, Any]:
    rec = Recorder(limits=_limits(max_steps))
    rec.start(key, initial=initial, seed=seed)
    metrics = rec.run_to_completion()
    app.logger.info("Trace %s: %d steps in %.1f ms", key, metrics.total_steps, metrics.wall_time_ms)
    payload = rec.export()
    payload["truncated"] = rec.trace.truncated
    payload["error"] = rec.trace.error
    return payload


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------
@app.errorhandler(UnknownAlgorithm)
def handle_unknown_algorithm(exc: UnknownAlgorithm):
    return jsonify({"error": str(exc)}), 404


@app.errorhandler(400)
def handle_bad_request(exc):
    return jsonify({"error": exc.description}), 400


@app.errorhandler(404)
def handle_not_found(exc):
    return jsonify({"error": exc.description}), 404


# ---------------------------------------------------------------------------
# Index
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    groups = [(label, algorithms_by_category(cat)) for cat, label in CATEGORIES.items()]
    return render_template_string(INDEX_TEMPLATE, groups=groups, total=len(list_algorithms()))


# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    category = request.args.get("category")
    if category is not None and category not in CATEGORIES:
        abort(400, description=f"Unknown category {category!r}")
    algos = algorithms_by_category(category) if category else list_algorithms()
    return jsonify([a.card() for a in algos])


@app.route("/api/algorithms/<key>")
def api_algorithm(key: str):
    info = _lookup(key)
    card = info.card()
    card["pseudocode"] = info.pseudocode
    card["max_steps"] = info.max_steps
    return jsonify(card)


@app.route("/api/algorithms/<key>/initial")
def api_initial(key: str):
    info = _lookup(key)
    return jsonify(info.initial_data(_seed()))


@app.route("/api/algorithms/<key>/trace", methods=["GET"])
def api_trace(key: str):
    _lookup(key)
    return jsonify(_run(key, None, _seed(), _int_arg("max_steps", minimum=2)))


@app.route("/api/algorithms/<key>/trace", methods=["POST"])
def api_trace_posted(key: str):
    _lookup(key)
    body = request.get_json(silent=True)
    if not isinstance(body, dict) or "initial" not in body:
        abort(400, description="Body must be a JSON object with an 'initial' field")
    max_steps = body.get("max_steps")
    if max_steps is not None and (not isinstance(max_steps, int) or isinstance(max_steps, bool) or max_steps < 2):
        abort(400, description="'max_steps' must be an integer of at least 2")
    return jsonify(_run(key, body["initial"], None, max_steps))


@app.route("/api/algorithms/<key>/steps/<int:n>")
def api_step(key: str, n: int):
    _lookup(key)
    rec = Recorder(limits=_limits())
    rec.start(key, seed=_seed())
    rec.run_to_completion()
    if n >= len(rec.trace):
        abort(400, description=f"Step {n} out of range (trace has {len(rec.trace)} steps)")
    return jsonify({"step": rec.trace[n].to_dict(), "total_steps": len(rec.trace)})


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>Algorithm Traces</title>
  <style>
    body { font-family: -apple-system, BlinkMacSystemFont, sans-serif; margin: 32px; color: #1f2328; }
    h2 { margin-top: 28px; border-bottom: 1px solid #d0d7de; padding-bottom: 4px; }
    li { margin: 4px 0; }
    code { color: #57606a; }
  </style>
</head>
<body>
  <h1>Algorithm Traces</h1>
  <p>{{ total }} algorithms. Each link returns the full step trace as JSON.</p>
  {% for label, algos in groups %}
  <h2>{{ label }}</h2>
  <ul>
    {% for a in algos %}
    <li>
      <a href="/api/algorithms/{{ a.key }}/trace">{{ a.label }}</a>
      <code>{{ a.complexity_time }}</code>: {{ a.description }}
    </li>
    {% endfor %}
  </ul>
  {% endfor %}
</body>
</html>
"""


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app.run(debug=True, host="0.0.0.0", port=5000)
