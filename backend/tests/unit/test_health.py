from __future__ import annotations

from unittest.mock import AsyncMock


def test_health_reports_store_ok(client):
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["services"]["employee_store"] == "ok"


def test_health_degraded_when_store_check_fails(app, client):
    app.state.employee_store.check_connection = AsyncMock(return_value=False)

    data = client.get("/health").json()
    assert data["status"] == "degraded"
    assert data["services"]["employee_store"] == "error"


def test_health_degraded_when_store_check_raises(app, client):
    app.state.employee_store.check_connection = AsyncMock(side_effect=RuntimeError("boom"))

    data = client.get("/health").json()
    assert data["status"] == "degraded"
    assert data["services"]["employee_store"] == "error"


def test_readiness_probe(client):
    response = client.get("/health/ready")
    assert response.status_code == 200
    assert response.json()["ready"] is True
