import pytest
from fastapi.testclient import TestClient

from finance_dashboard.server import app, get_store


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_categorize_tool(client):
    resp = client.post("/tools/categorize", json={"description": "Cafe at the mall", "amount": -12})
    assert resp.status_code == 200
    assert resp.json() == {"category": "Dining"}


def test_aggregate_tool(client):
    resp = client.post(
        "/tools/aggregate_monthly",
        json=[
            {"id": "1", "date": "2025-02-03", "description": "Taxi", "amount": -10},
            {"id": "2", "date": "2025-01-03", "description": "Taxi", "amount": -5.5},
            {"id": "3", "date": "2025-02-09", "description": "Refund", "amount": 2},
        ],
    )
    assert resp.json() == [{"month": "2025-01", "total": -5.5}, {"month": "2025-02", "total": -8.0}]


def test_forecast_tool(client):
    resp = client.post("/tools/forecast", json={"monthly_totals": [], "horizon": 2})
    assert [p["predicted_value"] for p in resp.json()] == [0, 0]

    resp = client.post("/tools/forecast", json={"monthly_totals": [], "horizon": 0})
    assert resp.status_code == 400

    resp = client.post("/tools/forecast", json={"monthly_totals": [{"month": "2025-13", "total": 5}], "horizon": 1})
    assert resp.status_code == 422


def test_evaluate_budget_tool(client):
    resp = client.post(
        "/tools/evaluate_budget",
        json={"predicted_next_period": 1000.01, "budget": {"monthly_limit": 1000, "alert_threshold_percent": 100}},
    )
    assert resp.json() == {"breaches": True, "threshold_value": 1000}

    resp = client.post(
        "/tools/evaluate_budget",
        json={"predicted_next_period": 10, "budget": {"monthly_limit": 1000, "alert_threshold_percent": 150}},
    )
    assert resp.status_code == 422


def test_goal_progress_tool(client):
    resp = client.post(
        "/tools/goal_progress",
        json={
            "transactions": [{"date": "2025-01-01", "description": "Pay", "amount": 250}],
            "goal": {"name": "Trip", "target": 500},
        },
    )
    assert resp.json() == {"saved": 250, "percent": 50}


def test_parse_csv_tool(client):
    resp = client.post("/tools/parse_csv", json={"text": "2025-01-05,Coffee shop,-4.50\nbadrow"})
    body = resp.json()
    assert body["skipped_line_count"] == 1
    assert body["transactions"][0]["category"] == "Dining"


def test_transaction_lifecycle(client):
    resp = client.post("/transactions", json={"date": "2025-05-01", "description": "Uber", "amount": -14})
    assert resp.status_code == 201
    txn = resp.json()
    assert txn["category"] == "Transport"

    assert [t["id"] for t in client.get("/transactions").json()] == [txn["id"]]
    assert client.delete(f"/transactions/{txn['id']}").status_code == 204
    assert client.delete(f"/transactions/{txn['id']}").status_code == 404
    assert client.get("/transactions").json() == []


def test_import_and_sample(client):
    resp = client.post("/transactions/import", json={"text": "2025-01-05,Coffee,-4\n2025-01-06,Pizza,x"})
    assert resp.json()["skipped_line_count"] == 1
    assert len(client.get("/transactions").json()) == 1

    resp = client.post("/transactions/sample", json={"count": 5, "seed": 1})
    assert len(resp.json()) == 6
    assert len(client.get("/transactions").json()) == 6


def test_budget_and_goals(client):
    assert client.put("/budget", json={"monthly_limit": 500, "alert_threshold_percent": 80}).status_code == 200
    assert client.get("/budget").json() == {"monthly_limit": 500, "alert_threshold_percent": 80}

    assert client.post("/goals", json={"name": "Trip", "target": 0}).status_code == 422
    goal = client.post("/goals", json={"name": "Trip", "target": 400}).json()
    client.post("/transactions", json={"date": "2025-05-01", "description": "Salary", "amount": 100})

    progress = client.get(f"/goals/{goal['id']}/progress").json()
    assert progress == {"saved": 100, "percent": 25}
    assert client.get("/goals/missing/progress").status_code == 404
    assert client.delete(f"/goals/{goal['id']}").status_code == 204
    assert client.get("/goals").json() == []


def test_dashboard_and_reset(client):
    client.put("/budget", json={"monthly_limit": 100, "alert_threshold_percent": 100})
    client.post(
        "/transactions/import",
        json={"text": "2025-01-10,Store,150\n2025-02-10,Store,250\n2025-03-10,Store,350"},
    )

    body = client.get("/dashboard").json()

    assert [m["month"] for m in body["monthly_totals"]] == ["2025-01", "2025-02", "2025-03"]
    assert body["predicted_next_period"] == pytest.approx(450)
    assert body["evaluation"] == {"breaches": True, "threshold_value": 100}
    assert client.get("/dashboard", params={"horizon": 0}).status_code == 400

    assert client.post("/reset").status_code == 204
    assert client.get("/transactions").json() == []
