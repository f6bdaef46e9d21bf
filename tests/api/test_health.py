import pytest
from fastapi.testclient import TestClient

from uml_assistant import __version__
from uml_assistant.main import create_app


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


def test_health_check(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "message": "Server Healthy", "version": __version__}


def test_health_check_echoes_correlation_id(client):
    response = client.get("/api/v1/health", headers={"X-Correlation-ID": "corr-123"})
    assert response.headers["X-Correlation-ID"] == "corr-123"


def test_health_check_generates_correlation_id(client):
    response = client.get("/api/v1/health")
    assert response.headers["X-Correlation-ID"]
