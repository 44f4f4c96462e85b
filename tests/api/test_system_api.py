from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

from timelog.main import app

client = TestClient(app)


def test_health_check_healthy():
    with patch("timelog.api_v1.endpoints.system.check_db_connection", new=AsyncMock(return_value=True)):
        response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["database_connected"] is True


def test_health_check_database_down():
    with patch("timelog.api_v1.endpoints.system.check_db_connection", new=AsyncMock(return_value=False)):
        response = client.get("/health")
    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"


def test_root():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["docs"] == "/api/v1/docs"
