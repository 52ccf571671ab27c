"""Tests for the health check endpoint."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError


@pytest.fixture
def app():
    """
    Create a minimal FastAPI app with only the health endpoint.

    Returns:
        FastAPI: FastAPI application instance.
    """
    from bookstore.api.http.health import router

    test_app = FastAPI()
    test_app.include_router(router)
    return test_app


@pytest.fixture
def client(app):
    """
    Create a test client for the FastAPI application.

    Args:
        app: FastAPI application fixture.

    Returns:
        TestClient: FastAPI test client instance.
    """
    return TestClient(app)


def test_health_endpoint_database_healthy(client):
    """
    Test health endpoint when the database answers.

    Args:
        client: FastAPI test client fixture.
    """
    mock_conn = AsyncMock()
    mock_engine = MagicMock()
    mock_engine.connect.return_value.__aenter__.return_value = mock_conn

    with patch("bookstore.api.http.health.engine", mock_engine):
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "healthy"}
    mock_conn.execute.assert_called_once()


@pytest.mark.parametrize(
    "error",
    [
        OperationalError("SELECT 1", {}, Exception("connection refused")),
        ConnectionRefusedError(),
        TimeoutError(),
    ],
)
def test_health_endpoint_database_unhealthy(client, error):
    """
    Test health endpoint when the database cannot be reached.

    Args:
        client: FastAPI test client fixture.
        error: Exception raised while connecting.
    """
    mock_engine = MagicMock()
    mock_engine.connect.return_value.__aenter__.side_effect = error

    with patch("bookstore.api.http.health.engine", mock_engine):
        response = client.get("/health")

    assert response.status_code == 503
    assert response.json() == {"status": "unhealthy", "database": "unhealthy"}


def test_health_is_not_under_api_prefix():
    """The full application serves health at the root."""
    from bookstore import application
    from bookstore.routing import list_http_routes

    paths = {path for path, _ in list_http_routes()}
    assert "/health" in paths
    assert "/api/authors" in paths
    assert "/api/authors/{author_id}" in paths

    mock_engine = MagicMock()
    mock_engine.connect.return_value.__aenter__.return_value = AsyncMock()
    full_client = TestClient(application())

    with patch("bookstore.api.http.health.engine", mock_engine):
        assert full_client.get("/health").status_code == 200
        assert full_client.get("/api/health").status_code == 404
