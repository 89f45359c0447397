import pytest
from fastapi.testclient import TestClient

from amortizer.api.app import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def _request(**overrides) -> dict:
    body = {
        "loan": {"principal": 100000, "annual_rate_percent": 5, "term_years": 10, "start_year": 2024},
        "expenses": {"annual_property_tax": 15000, "annual_insurance": 3000},
        "events": [],
    }
    body.update(overrides)
    return body


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestScheduleRoute:
    def test_one_period_per_year(self, client):
        resp = client.post("/api/v1/schedule", json=_request())
        assert resp.status_code == 200
        periods = resp.json()["periods"]
        assert [p["year"] for p in periods] == list(range(1, 11))
        assert periods[0]["calendar_year"] == 2024
        assert periods[2]["label"] == "3rd year (2026)"

    def test_amounts_rounded_to_cents(self, client):
        periods = client.post("/api/v1/schedule", json=_request()).json()["periods"]
        first = periods[0]
        assert first["monthly_property_tax"] == "1250.00"
        assert first["monthly_insurance"] == "250.00"
        assert first["principal_balance"] == "100000.00"

    def test_events_described(self, client):
        events = [
            {"type": "rate", "year": 3, "new_rate_percent": 3},
            {"type": "lump_sum", "year": 5, "amount": 20000},
        ]
        body = client.post("/api/v1/schedule", json=_request(events=events)).json()
        periods = body["periods"]
        assert body["event_years"] == [3, 5]
        assert periods[2]["events"] == ["Rate change to 3.00%"]
        assert periods[4]["events"] == ["Lump sum payment of 20000"]
        assert periods[3]["events"] == []

    def test_zero_rate(self, client):
        loan = {"principal": 120000, "annual_rate_percent": 0, "term_years": 10}
        periods = client.post("/api/v1/schedule", json=_request(loan=loan)).json()["periods"]
        assert all(p["monthly_payment"] == "1000.00" for p in periods)

    def test_non_positive_lump_sum_rejected(self, client):
        events = [{"type": "lump_sum", "year": 2, "amount": 0}]
        resp = client.post("/api/v1/schedule", json=_request(events=events))
        assert resp.status_code == 422

    def test_event_after_term_rejected(self, client):
        events = [{"type": "rate", "year": 11, "new_rate_percent": 4}]
        resp = client.post("/api/v1/schedule", json=_request(events=events))
        assert resp.status_code == 400
        assert "outside" in resp.json()["detail"]

    def test_zero_term_rejected(self, client):
        loan = {"principal": 100000, "annual_rate_percent": 5, "term_years": 0}
        resp = client.post("/api/v1/schedule", json=_request(loan=loan))
        assert resp.status_code == 422


class TestPaymentRoute:
    def test_quote(self, client):
        resp = client.post(
            "/api/v1/payment",
            json={"principal": 400000, "annual_rate_percent": 7, "remaining_years": 30},
        )
        assert resp.status_code == 200
        assert resp.json()["monthly_payment"] == "2661.21"
