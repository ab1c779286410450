"""
API tests for the root and health endpoints
"""
from sqlalchemy import create_engine

from product_api.core.config import settings
from product_api.core.database import get_engine


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "online"
    assert response.json()["version"] == settings.API_VERSION


def test_health_reports_database(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["service"] == "product-api"
    assert body["database"]["status"] == "connected"
    assert body["database"]["error"] is None


def test_health_checks_the_injected_engine(app, client, tmp_path):
    """Test /health reports degraded when its engine cannot connect"""
    unreachable = create_engine(f"sqlite:///{tmp_path}/missing/dir/db.sqlite")
    app.dependency_overrides[get_engine] = lambda: unreachable

    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "degraded"
    assert body["database"]["status"] == "disconnected"
    assert body["database"]["error"]
