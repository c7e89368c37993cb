"""Tests for system API endpoints (health, config check, middleware)."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi.testclient import TestClient


class TestHealthCheck:
    def test_healthy(self, client: TestClient):
        resp = client.get("/api/v1/health")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"
        assert data["db_connected"] is True


class TestConfigCheck:
    def test_nothing_configured(self, client: TestClient):
        resp = client.get("/api/v1/config/check")
        assert resp.status_code == 200
        assert resp.json()["configured"] == {
            "identity_provider": False,
            "payment_provider": False,
        }


class TestCorrelationId:
    def test_generated_when_missing(self, client: TestClient):
        resp = client.get("/api/v1/health")
        assert len(resp.headers["X-Correlation-ID"]) == 12

    def test_echoed_when_given(self, client: TestClient):
        resp = client.get("/api/v1/health", headers={"X-Correlation-ID": "abc123"})
        assert resp.headers["X-Correlation-ID"] == "abc123"


class TestAuthentication:
    def test_missing_token_is_401(self, client: TestClient):
        resp = client.get("/api/v1/cart")
        assert resp.status_code == 401
        assert resp.json() == {"error": "unauthorized", "detail": "Please sign in to continue"}

    def test_non_bearer_scheme_is_401(self, client: TestClient):
        resp = client.get("/api/v1/cart", headers={"Authorization": "Basic dXNlcg=="})
        assert resp.status_code == 401
