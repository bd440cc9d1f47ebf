import logging

from fastapi.testclient import TestClient

from stable_api.core.config import settings
from stable_api.main import create_app


def test_health_check_is_public(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "timestamp" in data


def test_openapi_documents_role_header(client):
    schema = client.get("/openapi.json").json()
    scheme = schema["components"]["securitySchemes"]["role"]
    assert scheme["type"] == "apiKey"
    assert scheme["in"] == "header"
    assert scheme["name"] == "x-user-role"


def test_requests_are_logged_outside_test_env(monkeypatch, caplog):
    monkeypatch.setattr(settings, "environment", "development")
    app = create_app()

    with caplog.at_level(logging.INFO, logger="stable_api.requests"):
        TestClient(app).get("/api/health")
        TestClient(app).get("/api/v1/horses")

    messages = [record.getMessage() for record in caplog.records]
    assert any("Request processed: GET /api/health -> 200" in m for m in messages)
    assert any("Request failed: GET /api/v1/horses -> 403" in m for m in messages)
