"""
Tests for the health endpoints.
"""
from fastapi import status


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "healthy"


def test_readiness(client, monkeypatch):
    monkeypatch.setattr("app.api.health.check_database_health", lambda: {"status": "healthy"})

    response = client.get("/api/health/readiness")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "ready"


def test_readiness_database_down(client, monkeypatch):
    monkeypatch.setattr(
        "app.api.health.check_database_health",
        lambda: {"status": "unhealthy", "error": "database unreachable"}
    )

    response = client.get("/api/health/readiness")
    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
