"""
Tests for health check endpoints and utilities.
"""

import asyncio

import pytest

from shared.utils.health import (
    HealthCheckResult,
    HealthStatus,
    aggregate_health_checks,
    health_check_with_timeout,
    sync_health_check_with_timeout,
)


class TestHealthEndpoints:
    """Test health check API endpoints."""

    def test_health_check(self, client):
        """Basic health check should return ok status."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["message"] == "Server is running"
        assert data["service"] == "retail-catalog-api"

    def test_detailed_health_reports_database(self, client):
        """Database is checked, Redis is reported as disabled when unconfigured."""
        response = client.get("/health/detailed")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["dependencies"]["database"]["status"] == "healthy"
        assert data["dependencies"]["database"]["details"] == {"backend": "sqlite"}
        assert data["dependencies"]["redis"]["status"] == "disabled"

    def test_response_carries_request_id(self, client):
        """Correlation middleware echoes the incoming X-Request-ID."""
        response = client.get("/health", headers={"X-Request-ID": "abc-123"})
        assert response.headers["X-Request-ID"] == "abc-123"


class TestHealthDecorators:
    """Test timeout and failure handling of the health decorators."""

    def test_async_check_success(self):
        @health_check_with_timeout(timeout=1.0, component="cache")
        async def check():
            return {"pong": True}

        result = asyncio.run(check())
        assert result.status == HealthStatus.HEALTHY
        assert result.component == "cache"
        assert result.details == {"pong": True}

    def test_async_check_timeout(self):
        @health_check_with_timeout(timeout=0.01, component="slow")
        async def check():
            await asyncio.sleep(1)

        result = asyncio.run(check())
        assert result.status == HealthStatus.UNHEALTHY
        assert "timeout" in result.error

    def test_sync_check_failure(self):
        @sync_health_check_with_timeout(timeout=1.0)
        def check_database_health():
            raise RuntimeError("connection refused")

        result = check_database_health()
        assert result.status == HealthStatus.UNHEALTHY
        assert result.component == "database"
        assert result.error == "connection refused"

    def test_aggregate_degraded_when_any_unhealthy(self):
        report = aggregate_health_checks([
            HealthCheckResult(status=HealthStatus.HEALTHY, component="database"),
            HealthCheckResult(status=HealthStatus.UNHEALTHY, component="redis", error="down"),
        ])
        assert report["status"] == "degraded"
        assert report["components"]["redis"] == {"status": "unhealthy", "error": "down"}

    def test_aggregate_ignores_disabled(self):
        report = aggregate_health_checks([
            HealthCheckResult(status=HealthStatus.HEALTHY, component="database"),
            HealthCheckResult(status=HealthStatus.DISABLED, component="redis"),
        ])
        assert report["status"] == "healthy"
