"""
Basic test to verify the project setup is working correctly.
"""

import pytest
from app.main import create_app


def test_app_creation(test_settings):
    """Test that the FastAPI app can be created successfully."""
    app = create_app(test_settings)
    assert app is not None
    assert app.title == "Banjara Translator"


def test_root_endpoint(client):
    """Test the root endpoint returns expected response."""
    response = client.get("/")

    assert response.status_code == 200
    data = response.json()
    assert "message" in data
    assert "version" in data
    assert data["status"] == "running"
    assert response.headers["X-Request-ID"]


def test_health_endpoint(client, lexicon):
    """Test the health endpoint reports dictionary and store status."""
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["details"]["dictionary"]["entries"] == len(lexicon)
    assert data["details"]["store"]["backend"] == "memory"
    assert data["details"]["external_translation"]["enabled"] is False


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/unknown")
    assert response.status_code == 404
    body = response.json()
    assert body["status"] == "error"
    assert body["error"] == "NOT_FOUND"


if __name__ == "__main__":
    pytest.main([__file__])
