import json

from sqlalchemy.exc import SQLAlchemyError

import watermonitor.routes_alerts
from watermonitor import create_app
from watermonitor.db import db

SAFE = dict(ph=7.2, turbidity=2, temperature=20, dissolved_oxygen=7, total_coliform=0, ecoli=0, chlorine=1.0)
CONTAMINATED = dict(ph=5.0, turbidity=10, temperature=20, dissolved_oxygen=7, total_coliform=20, ecoli=3, chlorine=0.1)


def setup_module(module):
    app = create_app({"SQLALCHEMY_DATABASE_URI": "sqlite://", "EVALUATION_ASYNC": False, "CONFIDENCE_SEED": 1})
    app.testing = True
    module.client = app.test_client()
    module.ctx = app.app_context()
    module.ctx.push()


def teardown_module(module):
    db.session.remove()
    db.drop_all()
    module.ctx.pop()


def setup_function(function):
    db.session.remove()
    db.drop_all()
    db.create_all()


def test_healthz():
    assert client.get("/healthz").get_json() == {"status": "ok"}


def test_empty_state_returns_404():
    assert client.get("/readings/latest").status_code == 404
    assert client.get("/risk/latest").status_code == 404
    assert client.get("/readings/recent").get_json() == []


def test_submit_and_read_back():
    resp = client.post("/readings", json=dict(CONTAMINATED, location="East Tap"))
    assert resp.status_code == 201
    reading_id = resp.get_json()["id"]

    latest = client.get("/readings/latest").get_json()
    assert latest["id"] == reading_id
    assert latest["location"] == "East Tap"
    assert latest["status"]["ph"] == "critical"

    risk = client.get("/risk/latest").get_json()
    assert risk["overall_risk"] == "high"
    assert risk["hepatitis_a"]["risk_level"] == "medium"

    alerts = client.get("/alerts?page=1&page_size=2").get_json()
    assert alerts["pagination"]["total_count"] == 5
    assert alerts["pagination"]["total_pages"] == 3
    assert len(alerts["alerts"]) == 2


def test_acknowledge_flow():
    client.post("/readings", json=dict(SAFE, ecoli=1))
    alert = client.get("/alerts").get_json()["alerts"][0]
    resp = client.post(f"/alerts/{alert['id']}/acknowledge")
    assert resp.status_code == 200
    assert client.post(f"/alerts/{alert['id']}/acknowledge").status_code == 200
    assert client.get("/alerts").get_json()["pagination"]["total_count"] == 0


def test_acknowledge_unknown_alert():
    resp = client.post("/alerts/4242/acknowledge")
    assert resp.status_code == 404
    assert "not found" in resp.get_json()["error"]


def test_validation_errors():
    assert client.post("/readings", json={"ph": 7}).status_code == 400
    assert client.post("/readings", data="not json").status_code == 400
    assert client.post("/readings", json=dict(SAFE, chlorine=True)).status_code == 400
    huge = "1" + "0" * 400
    body = json.dumps(dict(SAFE, ecoli=0)).replace('"ecoli": 0', f'"ecoli": {huge}')
    resp = client.post("/readings", data=body, content_type="application/json")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "ecoli must be finite"}
    assert client.get("/alerts?page=zero").status_code == 400
    assert client.get("/readings/recent?hours=-1").status_code == 400


def test_simulate_and_trends():
    assert client.post("/readings/simulate").status_code == 201
    assert len(client.get("/readings/recent?hours=1").get_json()) == 1
    trends = client.get("/readings/trends?days=7").get_json()
    assert len(trends["ph"]) == 1
    assert set(trends["ph"][0]) == {"day", "min", "avg", "max"}


def test_storage_error_maps_to_500(monkeypatch):
    def _broken_query(*args, **kwargs):
        raise SQLAlchemyError("database is locked")

    monkeypatch.setattr(watermonitor.routes_alerts, "get_active_alerts", _broken_query)
    resp = client.get("/alerts")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "storage failure"}
    assert client.get("/healthz").status_code == 200
