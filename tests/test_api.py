import copy

import pytest
from jsonschema import validate

import app as app_module

RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "ok": {"type": "boolean"},
        "result": {
            "type": "object",
            "properties": {
                "project_duration": {"type": "number"},
                "order": {"type": "array", "items": {"type": "string"}},
                "critical_path": {"type": "array", "items": {"type": "string"}},
                "activities": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "required": ["id", "duration", "es", "ef", "ls", "lf", "slack", "critical"],
                    },
                },
                "nodes": {"type": "array"},
            },
            "required": ["project_duration", "order", "critical_path", "activities", "nodes"],
        },
    },
    "required": ["ok", "result"],
}

ROWS = [
    {"id": "A", "duration": 3, "predecessors": "-"},
    {"id": "B", "duration": 2, "predecessors": "A"},
    {"id": "C", "duration": 4, "predecessors": ["A"]},
    {"id": "D", "duration": 1, "predecessors": "B, C"},
]


@pytest.fixture
def client():
    saved = copy.deepcopy(app_module.PROJECT)
    app_module.app.config["TESTING"] = True
    with app_module.app.test_client() as c:
        yield c
    app_module.PROJECT.clear()
    app_module.PROJECT.update(saved)


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"ok": True}


def test_analyze(client):
    resp = client.post("/api/analyze", json={"activities": ROWS})
    assert resp.status_code == 200, resp.get_data(as_text=True)
    data = resp.get_json()
    validate(instance=data, schema=RESPONSE_SCHEMA)
    result = data["result"]
    assert result["project_duration"] == 8
    assert result["order"] == ["A", "C", "B", "D"]
    assert result["critical_path"] == ["A", "C", "D"]
    by_id = {a["id"]: a for a in result["activities"]}
    assert (by_id["B"]["es"], by_id["B"]["lf"], by_id["B"]["slack"]) == (3, 7, 2)


def test_analyze_cycle(client):
    rows = [
        {"id": "A", "duration": 1, "predecessors": "B"},
        {"id": "B", "duration": 1, "predecessors": "C"},
        {"id": "C", "duration": 1, "predecessors": "A"},
    ]
    resp = client.post("/api/analyze", json={"activities": rows})
    assert resp.status_code == 400
    data = resp.get_json()
    assert data["ok"] is False
    assert "Cycle detected in dependencies" in data["error"]
    assert "result" not in data


def test_analyze_rejects_bad_payload(client):
    resp = client.post("/api/analyze", json={"activities": [{"id": "A", "duration": "x"}]})
    assert resp.status_code == 400
    assert resp.get_json()["ok"] is False

    resp = client.post("/api/analyze", json={"tasks": []})
    assert resp.status_code == 400
    assert "'activities' is a required property" in resp.get_json()["error"]

    resp = client.post("/api/analyze", data="not json")
    assert resp.status_code == 400


def test_analyze_lenient_and_strict(client):
    rows = [{"id": "Z", "duration": 5, "predecessors": "Q"}]
    resp = client.post("/api/analyze", json={"activities": rows})
    assert resp.status_code == 200
    assert resp.get_json()["result"]["project_duration"] == 5

    resp = client.post("/api/analyze", json={"activities": rows, "strict": True})
    assert resp.status_code == 400
    assert "predecessor 'Q' does not exist" in resp.get_json()["error"]

    resp = client.post("/api/analyze", json={"activities": [{"id": "A", "duration": -1}], "strict": True})
    assert resp.status_code == 400
    assert "duration must be >= 0" in resp.get_json()["error"]


def test_activities_roundtrip(client):
    resp = client.get("/api/activities")
    assert resp.status_code == 200
    assert len(resp.get_json()) == 14, "sample project is loaded by default"

    resp = client.post("/api/activities", json={"activities": ROWS})
    assert resp.get_json() == {"ok": True, "count": 4}
    assert client.get("/api/activities").get_json() == ROWS

    resp = client.post("/api/activities", json={"activities": "nope"})
    assert resp.status_code == 400


def test_home_page(client):
    resp = client.get("/")
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "Minimum project duration: 44" in html
    assert "Critical path: A -&gt; N -&gt; C -&gt; E -&gt; F -&gt; J -&gt; L -&gt; B" in html
    assert html.count('class="cpm-row-critical"') == 8


def test_home_page_cycle(client):
    client.post("/api/activities", json={"activities": [
        {"id": "X", "duration": 1, "predecessors": "Y"},
        {"id": "Y", "duration": 1, "predecessors": "X"},
    ]})
    resp = client.get("/")
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "Cycle detected in dependencies" in html
    assert "cpm-table" not in html.split("<body>")[1]
