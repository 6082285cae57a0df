"""Tests for the assembled application: middleware, health check, error envelope."""

from __future__ import annotations

import uuid
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient
from slowapi import Limiter
from slowapi.util import get_remote_address

from merchflow.app import app, create_app
from merchflow.database.session import get_db

client = TestClient(app)


@pytest.fixture(autouse=True)
def _no_database():
    async def _override_get_db():
        yield AsyncMock()

    app.dependency_overrides[get_db] = _override_get_db
    yield
    app.dependency_overrides.clear()


def test_health():
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_request_id_is_minted():
    response = client.get("/health")

    request_id = response.headers["X-Request-ID"]
    assert uuid.UUID(request_id).version == 4


def test_request_id_is_echoed():
    response = client.get("/health", headers={"X-Request-ID": "req-abc-123"})

    assert response.headers["X-Request-ID"] == "req-abc-123"


def test_unauthenticated_error_envelope():
    response = client.get(
        "/api/v1/orders/mine", headers={"X-Request-ID": "req-401"}
    )

    assert response.status_code == 401
    error = response.json()["error"]
    assert error["code"] == "UNAUTHORIZED"
    assert error["message"] == "Authentication required"
    assert error["details"] == []
    assert error["requestId"] == "req-401"
    assert error["redirectTo"] == "/auth"


def test_request_validation_envelope():
    response = client.get("/api/v1/auth/access")

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["field"] == "query.page"
    assert "redirectTo" not in error


def test_routes_are_mounted_under_api_v1():
    paths = app.openapi()["paths"]

    assert "/api/v1/orders/" in paths
    assert "/api/v1/orders/{order_id}" in paths
    assert "/api/v1/products/" in paths
    assert "/api/v1/dashboard/admin" in paths
    assert "/api/v1/auth/access" in paths


def test_rate_limit_uses_error_envelope():
    limited = create_app()
    limited.state.limiter = Limiter(key_func=get_remote_address, default_limits=["2/minute"])
    limited_client = TestClient(limited)

    for _ in range(2):
        assert limited_client.get("/health").status_code == 200
    response = limited_client.get("/health", headers={"X-Request-ID": "req-429"})

    assert response.status_code == 429
    error = response.json()["error"]
    assert error["code"] == "RATE_LIMITED"
    assert error["requestId"] == "req-429"
    assert "2 per 1 minute" in error["message"]
