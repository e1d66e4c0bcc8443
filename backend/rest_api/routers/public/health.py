"""
Health check endpoints for the REST API.
Provides basic and detailed health status of the service and its dependencies.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from shared.config.settings import settings
from shared.infrastructure.db import get_db
from shared.infrastructure.redis_client import ping_redis
from shared.utils.health import (
    HealthCheckResult,
    HealthStatus,
    aggregate_health_checks,
    health_check_with_timeout,
    sync_health_check_with_timeout,
)

SERVICE_NAME = "retail-catalog-api"

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    """
    Basic health check endpoint.
    Returns service status without checking dependencies.
    """
    return {
        "status": "ok",
        "message": "Server is running",
        "service": SERVICE_NAME,
        "environment": settings.environment,
    }


@sync_health_check_with_timeout(timeout=3.0, component="database")
def check_database_health(db: Session) -> dict:
    db.execute(text("SELECT 1"))
    return {"backend": db.get_bind().dialect.name}


@health_check_with_timeout(timeout=3.0, component="redis")
async def check_redis_health(client) -> dict:
    return await ping_redis(client)


@router.get("/health/detailed")
async def detailed_health_check(request: Request, db: Session = Depends(get_db)):
    """
    Detailed health check that verifies connectivity to dependencies.

    Redis is reported as "disabled" when REDIS_URL is empty. Returns 503
    if any configured dependency is down.
    """
    results = [await run_in_threadpool(check_database_health, db)]

    redis_client = getattr(request.app.state, "redis", None)
    if redis_client is None:
        results.append(HealthCheckResult(status=HealthStatus.DISABLED, component="redis"))
    else:
        results.append(await check_redis_health(redis_client))

    report = aggregate_health_checks(results)
    body = {
        "service": SERVICE_NAME,
        "environment": settings.environment,
        "status": report["status"],
        "dependencies": report["components"],
    }

    if report["status"] != HealthStatus.HEALTHY.value:
        return JSONResponse(content=body, status_code=503)
    return body
