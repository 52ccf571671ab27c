"""
Tests for the application-wide exception handlers.

A small FastAPI app with routes that raise is used so every handler can be
reached without touching the database.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from bookstore.constants import ERROR_500_MESSAGE
from bookstore.exceptions import (
    ConcurrencyConflictError,
    NotFoundError,
    StoreFailureError,
    ValidationError as AppValidationError,
)
from bookstore.utils.error_handler import register_exception_handlers


class Payload(BaseModel):
    name: str


@pytest.fixture
def client():
    app = FastAPI()
    register_exception_handlers(app)

    @app.post("/echo")
    async def echo(payload: Payload):
        return payload

    @app.get("/items/{item_id}")
    async def item(item_id: int):
        return {"id": item_id}

    @app.get("/not-found")
    async def not_found():
        raise NotFoundError("Author 7 not found")

    @app.get("/invalid")
    async def invalid():
        raise AppValidationError("name must not be empty")

    @app.get("/conflict")
    async def conflict():
        raise ConcurrencyConflictError("row changed")

    @app.get("/store-failure")
    async def store_failure():
        raise StoreFailureError("password authentication failed for user x")

    @app.get("/crash")
    async def crash():
        raise RuntimeError("secret internal state")

    return TestClient(app, raise_server_exceptions=False)


class TestRequestValidationHandler:
    def test_invalid_body_is_bad_request(self, client):
        response = client.post("/echo", json={"wrong": 1})

        assert response.status_code == 400
        errors = response.json()["detail"]
        assert errors[0]["loc"] == ["body", "name"]

    def test_malformed_json_is_bad_request(self, client):
        response = client.post(
            "/echo",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400

    def test_invalid_path_parameter_is_bad_request(self, client):
        assert client.get("/items/seven").status_code == 400


class TestAppExceptionHandler:
    def test_not_found(self, client):
        response = client.get("/not-found")

        assert response.status_code == 404
        assert response.json() == {"detail": "Author 7 not found"}

    def test_validation_error(self, client):
        response = client.get("/invalid")

        assert response.status_code == 400
        assert response.json() == {"detail": "name must not be empty"}

    def test_conflict(self, client):
        assert client.get("/conflict").status_code == 409

    def test_store_failure_hides_message(self, client):
        response = client.get("/store-failure")

        assert response.status_code == 500
        assert response.json() == {"detail": ERROR_500_MESSAGE}


class TestUnhandledExceptionHandler:
    def test_unexpected_error_is_fixed_500(self, client):
        response = client.get("/crash")

        assert response.status_code == 500
        assert response.json() == {"detail": ERROR_500_MESSAGE}
        assert "secret" not in response.text
