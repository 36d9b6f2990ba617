"""Tests for the internal API — strategy endpoints and health check."""

import json

import pytest
from fastapi.testclient import TestClient

from blueprint.api.routers import configure_routers
from blueprint.main import app

client = TestClient(app)


@pytest.fixture(autouse=True)
def _default_currency():
    configure_routers()
    yield
    configure_routers()


def _form(**overrides) -> dict:
    form = {
        "profile": "DayTrade",
        "capital": 1000,
        "riskPerTrade": 1,
        "indicators": ["EMA"],
        "session": "London",
        "automationLevel": "SemiAutonomous",
    }
    form.update(overrides)
    return form


class TestHealth:
    def test_health_returns_ok(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestOptionsEndpoint:
    def test_lists_all_choices(self):
        data = client.get("/strategy/options").json()
        assert data["profiles"] == ["Scalping", "DayTrade", "Swing"]
        assert data["sessions"] == ["London", "NewYork", "Tokyo"]
        assert data["automation_levels"] == ["Manual", "SemiAutonomous", "Full"]
        assert len(data["indicators"]) == 5


class TestDefaultsEndpoint:
    def test_returns_default_form(self):
        form = client.get("/strategy/defaults").json()["form"]
        assert form["profile"] == "DayTrade"
        assert form["capital"] == 1000
        assert len(form["indicators"]) == 2


class TestDeriveEndpoint:
    def test_valid_form_returns_report_and_plan(self):
        resp = client.post("/strategy/derive", json=_form())
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ok"
        assert data["report"].startswith("Strategy DayTrade London\n")
        assert data["plan"]["risk_capital_amount"] == 10.0
        assert data["plan"]["stop_loss_pips"] == 20
        assert data["plan"]["take_profit_pips"] == 40
        assert data["plan"]["lot_size"] == 0.33
        assert data["plan"]["report_text"] == data["report"]

    def test_invalid_form_returns_error_envelope(self):
        resp = client.post("/strategy/derive", json=_form(riskPerTrade=5.1))
        assert resp.status_code == 200
        assert resp.json() == {
            "status": "error",
            "field": "risk_per_trade",
            "errors": ["risk_per_trade must be between 0.1 and 5"],
        }

    def test_empty_body_reports_profile_first(self):
        data = client.post("/strategy/derive", json={}).json()
        assert data["status"] == "error"
        assert data["field"] == "profile"

    @pytest.mark.parametrize("body", [[], "x", 42])
    def test_non_object_body_returns_error_envelope(self, body):
        resp = client.post("/strategy/derive", json=body)
        assert resp.status_code == 200
        assert resp.json() == {
            "status": "error",
            "field": "payload",
            "errors": ["strategy input must be a mapping"],
        }

    def test_oversized_integer_capital_returns_error_envelope(self):
        body = json.dumps(_form(capital=10**400))
        resp = client.post(
            "/strategy/derive",
            content=body,
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 200
        assert resp.json()["errors"] == ["capital must be a number"]

    def test_configured_currency(self):
        configure_routers(currency="GBP")
        data = client.post("/strategy/derive", json=_form()).json()
        assert "(10.00 GBP)" in data["report"]


class TestPlaybookEndpoint:
    def test_returns_all_sections(self):
        playbook = client.get("/strategy/playbook").json()["playbook"]
        assert list(playbook) == [
            "Next steps", "Robot checklist", "Best practices", "EA export",
        ]
        assert all(len(items) == 3 for items in playbook.values())
