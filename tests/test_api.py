from __future__ import annotations

import pytest

from src.container_payroll.container_payroll.main import create_app


@pytest.fixture
def client():
    app = create_app("config.testing")
    return app.test_client()


def _add_worker(client, name: str) -> dict:
    resp = client.post("/api/workers", json={"name": name})
    assert resp.status_code == 201
    return resp.get_json()


def test_worker_crud(client):
    anna = _add_worker(client, "  Anna ")
    assert anna["name"] == "Anna"
    assert anna["active"] is True

    resp = client.patch(f"/api/workers/{anna['id']}", json={"name": "Anna K."})
    assert resp.status_code == 200
    assert resp.get_json()["name"] == "Anna K."

    assert client.patch("/api/workers/missing", json={"name": "X"}).status_code == 404
    assert client.post("/api/workers", json={"name": ""}).status_code == 400

    assert client.delete(f"/api/workers/{anna['id']}").status_code == 200
    assert client.get("/api/workers").get_json() == []


def test_team_assignment_conflict(client):
    a = _add_worker(client, "Anna")
    b = _add_worker(client, "Piotr")
    c = _add_worker(client, "Ola")

    resp = client.post("/api/teams", json={"date": "2024-05-06", "workers": [a["id"], b["id"]]})
    assert resp.status_code == 201
    assert resp.get_json()["workerNames"] == ["Anna", "Piotr"]

    resp = client.post("/api/teams", json={"date": "2024-05-06", "workers": [c["id"], a["id"]]})
    assert resp.status_code == 409

    resp = client.post("/api/teams", json={"date": "2024-05-06", "workers": [c["id"], c["id"]]})
    assert resp.status_code == 400

    available = client.get("/api/teams/available?date=2024-05-06").get_json()
    assert [w["id"] for w in available] == [c["id"]]

    assert len(client.get("/api/teams?date=2024-05-06").get_json()) == 1


def test_container_flow_and_unknown_labels(client):
    a = _add_worker(client, "Anna")
    b = _add_worker(client, "Piotr")
    team = client.post("/api/teams", json={"date": "2024-05-06", "workers": [a["id"], b["id"]]}).get_json()

    resp = client.post("/api/containers", json={"date": "2024-05-06", "teamId": team["id"], "packageCount": 1500})
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["payment"] == 85
    assert body["paymentPerWorker"] == 42.5
    assert body["team"] == "Anna, Piotr"

    bad = client.post("/api/containers", json={"date": "2024-05-06", "teamId": team["id"], "packageCount": 0})
    assert bad.status_code == 400
    wrong_day = client.post("/api/containers", json={"date": "2024-05-07", "teamId": team["id"], "packageCount": 10})
    assert wrong_day.status_code == 400

    client.delete(f"/api/workers/{b['id']}")
    history = client.get(f"/api/containers?worker_id={a['id']}").get_json()
    assert history[0]["team"] == "Anna, Unknown worker"

    client.delete(f"/api/teams/{team['id']}")
    assert client.get(f"/api/containers?worker_id={a['id']}").get_json() == []
    assert client.get("/api/containers").get_json()[0]["team"] == "Unknown team"


def test_payment_quote_and_report(client):
    quote = client.get("/api/payment?packageCount=4500").get_json()
    assert quote == {"packageCount": 4500, "payment": 125, "paymentPerWorker": 62.5}
    assert client.get("/api/payment?packageCount=-1").status_code == 400

    a = _add_worker(client, "Anna")
    b = _add_worker(client, "Piotr")
    team = client.post("/api/teams", json={"date": "2024-05-06", "workers": [a["id"], b["id"]]}).get_json()
    client.post("/api/containers", json={"date": "2024-05-06", "teamId": team["id"], "packageCount": 3000})

    report = client.get("/api/reports/payroll?start=2024-05-01&end=2024-05-31").get_json()
    assert len(report["rows"]) == 1
    assert {s["name"]: s["total"] for s in report["summary"]} == {"Anna": 50, "Piotr": 50}
    assert client.get("/api/reports/payroll?start=2024-06-01&end=2024-05-01").status_code == 400
