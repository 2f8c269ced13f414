"""
main.py - Graph Trace Flask App
================================
JSON API in front of the parser and trace recorder.  The browser owns
the editor, the diagram and the play/pause timer; it sends the current
text (and index) with every request, so the server keeps no state.

Routes:
  GET  /api/algorithms   – trace modes with pseudocode & complexity
  GET  /api/config       – playback defaults + sample document
  POST /api/parse        – text → graph model
  POST /api/trace        – text + mode → model, steps, summary
  POST /api/step         – text + mode + index → one playback frame
  POST /api/diff         – previous text + text → added / removed nodes
"""

import logging

from flask import Flask, jsonify, request

import config
from graph import diff_node_ids, parse
from algorithms import list_algorithms
from engine import export, frame, generate_trace, summarize

logger = logging.getLogger(__name__)


app = Flask(__name__)
app.config.from_object(config)
app.config.from_prefixed_env("TRACEVIZ")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _payload() -> dict:
    """Request body as a dict; missing or malformed JSON counts as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _text(data: dict, key: str = "text") -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


def _mode(data: dict) -> str:
    return data.get("mode") or app.config["DEFAULT_MODE"]


def _int(data: dict, key: str, default: int) -> int:
    try:
        return int(data.get(key, default))
    except (TypeError, ValueError, OverflowError):
        return default


@app.errorhandler(ValueError)
def handle_value_error(e: ValueError):
    logger.warning("%s %s: %s", request.method, request.path, e)
    return jsonify({"error": str(e)}), 400


# ---------------------------------------------------------------------------
# API: Metadata
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({"algorithms": [a.to_dict() for a in list_algorithms()]})


@app.route("/api/config")
def api_config():
    return jsonify({
        "default_mode":         app.config["DEFAULT_MODE"],
        "playback_interval_ms": app.config["PLAYBACK_INTERVAL_MS"],
        "window_size":          app.config["WINDOW_SIZE"],
        "log_lookback":         app.config["LOG_LOOKBACK"],
        "sample_text":          app.config["DEFAULT_GRAPH_TEXT"],
    })


# ---------------------------------------------------------------------------
# API: Parse & Trace
# ---------------------------------------------------------------------------
@app.route("/api/parse", methods=["POST"])
def api_parse():
    model = parse(_text(_payload()))
    return jsonify(model.to_dict())


@app.route("/api/trace", methods=["POST"])
def api_trace():
    data  = _payload()
    mode  = _mode(data)
    model = parse(_text(data))
    trace = generate_trace(model, mode)
    return jsonify(export(model, mode, trace))


@app.route("/api/step", methods=["POST"])
def api_step():
    data  = _payload()
    mode  = _mode(data)
    trace = generate_trace(parse(_text(data)), mode)
    f = frame(
        trace,
        _int(data, "index", 0),
        window=_int(data, "window", app.config["WINDOW_SIZE"]),
        lookback=app.config["LOG_LOOKBACK"],
    )
    return jsonify({"frame": f.to_dict(), "summary": summarize(trace, mode).to_dict()})


@app.route("/api/diff", methods=["POST"])
def api_diff():
    data = _payload()
    before = parse(_text(data, "previous")) if "previous" in data else None
    return jsonify(diff_node_ids(before, parse(_text(data))).to_dict())


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Graph Trace API on http://localhost:5000")
    app.run(debug=False)
