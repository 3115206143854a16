"""Service-level endpoints."""

from app.core.config import settings


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
    }


def test_root_points_to_docs(client):
    assert client.get("/").json()["docs"] == "/docs"
