"""Flask JSON API."""

import pytest


def test_algorithms_endpoint(client):
    resp = client.get("/api/algorithms")
    assert resp.status_code == 200
    algos = resp.get_json()["algorithms"]
    assert [a["key"] for a in algos] == ["bfs", "dfs", "linear"]
    assert algos[1]["frontier_kind"] == "Stack"
    assert algos[0]["pseudocode"]


def test_config_endpoint(client):
    data = client.get("/api/config").get_json()
    assert data["default_mode"] == "bfs"
    assert data["playback_interval_ms"] == 800
    assert data["sample_text"].startswith("graph TD")


def test_parse_endpoint(client, tree_text):
    data = client.post("/api/parse", json={"text": tree_text}).get_json()
    assert data["start_node"] == "Root"
    assert data["adjacency"]["Root"] == ["A", "B"]


def test_parse_tolerates_missing_body(client):
    resp = client.post("/api/parse", data="not json", content_type="text/plain")
    assert resp.status_code == 200
    assert resp.get_json() == {"node_ids": [], "adjacency": {}, "start_node": None}


def test_trace_endpoint_defaults_to_bfs(client, tree_text):
    data = client.post("/api/trace", json={"text": tree_text}).get_json()
    assert data["mode"] == "bfs"
    assert data["summary"]["total_steps"] == 8
    assert data["steps"][1]["action"] == "dequeued Root"


def test_trace_endpoint_dfs(client):
    data = client.post("/api/trace", json={"text": "Root --> X\nRoot --> Y", "mode": "dfs"}).get_json()
    assert data["summary"]["visit_order"] == ["Root", "X", "Y"]


def test_trace_unknown_mode_is_400(client):
    resp = client.post("/api/trace", json={"text": "A --> B", "mode": "astar"})
    assert resp.status_code == 400
    assert "astar" in resp.get_json()["error"]


def test_step_endpoint_uses_explicit_index(client, tree_text):
    data = client.post("/api/step", json={"text": tree_text, "mode": "bfs", "index": 2, "window": 2}).get_json()
    f = data["frame"]
    assert f["counter"] == "3/8"
    assert f["step"]["node_id"] == "A"
    assert f["active_nodes"] == ["A", "B"]
    assert f["added"] == ["A1", "A2"]
    assert data["summary"]["mode"] == "bfs"


def test_step_endpoint_with_bad_index_clamps(client):
    data = client.post("/api/step", json={"text": "A --> B", "index": "oops"}).get_json()
    assert data["frame"]["index"] == 0


@pytest.mark.parametrize("index", ["1e400", "-1e400"])
def test_step_endpoint_with_overflowing_index_clamps(client, index):
    body = '{"text": "A --> B", "index": ' + index + ', "window": ' + index + "}"
    resp = client.post("/api/step", data=body, content_type="application/json")
    assert resp.status_code == 200
    assert resp.get_json()["frame"]["index"] == 0


def test_diff_endpoint(client):
    data = client.post("/api/diff", json={"previous": "A --> B\nB --> C", "text": "A --> B\nA --> D"}).get_json()
    assert data == {"added": ["D"], "removed": ["C"], "kept": ["A", "B"]}
