"""
Health check utilities.

Decorators give every dependency check the same timeout handling and the
same result shape.

Usage:
    from shared.utils.health import health_check_with_timeout

    @health_check_with_timeout(timeout=3.0, component="redis")
    async def check_redis():
        await client.ping()

    result = await check_redis()
    # HealthCheckResult(status=HEALTHY, component="redis", latency_ms=1.3)
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import functools
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Coroutine

from shared.config.logging import get_logger

logger = get_logger(__name__)


class HealthStatus(str, Enum):
    """Health check status values."""
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    DEGRADED = "degraded"
    DISABLED = "disabled"


@dataclass
class HealthCheckResult:
    """Outcome of one dependency check."""
    status: HealthStatus
    component: str
    latency_ms: float | None = None
    error: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"status": self.status.value}
        if self.latency_ms is not None:
            result["latency_ms"] = round(self.latency_ms, 2)
        if self.error:
            result["error"] = self.error
        if self.details:
            result["details"] = self.details
        return result


def _component_name(func: Callable, component: str | None) -> str:
    return component or func.__name__.replace("check_", "").replace("_health", "")


def _failed(comp_name: str, start_time: float, error: str) -> HealthCheckResult:
    latency_ms = (time.perf_counter() - start_time) * 1000
    logger.warning("Health check failed", component=comp_name, error=error, latency_ms=latency_ms)
    return HealthCheckResult(
        status=HealthStatus.UNHEALTHY,
        component=comp_name,
        latency_ms=latency_ms,
        error=error,
    )


def health_check_with_timeout(
    timeout: float = 5.0,
    component: str | None = None,
):
    """
    Decorator for async health checks.

    The wrapped coroutine may return a dict of details. Timeouts and
    exceptions turn into an UNHEALTHY result instead of propagating.
    """
    def decorator(
        func: Callable[..., Coroutine[Any, Any, dict[str, Any] | None]]
    ) -> Callable[..., Coroutine[Any, Any, HealthCheckResult]]:
        comp_name = _component_name(func, component)

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> HealthCheckResult:
            start_time = time.perf_counter()
            try:
                result = await asyncio.wait_for(func(*args, **kwargs), timeout=timeout)
            except asyncio.TimeoutError:
                return _failed(comp_name, start_time, f"timeout after {timeout}s")
            except Exception as e:
                return _failed(comp_name, start_time, str(e))

            return HealthCheckResult(
                status=HealthStatus.HEALTHY,
                component=comp_name,
                latency_ms=(time.perf_counter() - start_time) * 1000,
                details=result if isinstance(result, dict) else {},
            )

        return wrapper
    return decorator


def sync_health_check_with_timeout(
    timeout: float = 5.0,
    component: str | None = None,
):
    """
    Decorator for blocking health checks (e.g. a SQLAlchemy session).

    Runs the check in a worker thread so the timeout can be enforced.
    """
    def decorator(
        func: Callable[..., dict[str, Any] | None]
    ) -> Callable[..., HealthCheckResult]:
        comp_name = _component_name(func, component)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> HealthCheckResult:
            start_time = time.perf_counter()
            executor = concurrent.futures.ThreadPoolExecutor(max_workers=1)
            try:
                result = executor.submit(func, *args, **kwargs).result(timeout=timeout)
            except concurrent.futures.TimeoutError:
                return _failed(comp_name, start_time, f"timeout after {timeout}s")
            except Exception as e:
                return _failed(comp_name, start_time, str(e))
            finally:
                executor.shutdown(wait=False)

            return HealthCheckResult(
                status=HealthStatus.HEALTHY,
                component=comp_name,
                latency_ms=(time.perf_counter() - start_time) * 1000,
                details=result if isinstance(result, dict) else {},
            )

        return wrapper
    return decorator


def aggregate_health_checks(results: list[HealthCheckResult]) -> dict[str, Any]:
    """
    Combine component results into one report.

    Overall status is "healthy" unless some component is UNHEALTHY, in
    which case it is "degraded". DISABLED components do not count.
    """
    components = {result.component: result.to_dict() for result in results}
    all_healthy = all(result.status != HealthStatus.UNHEALTHY for result in results)

    return {
        "status": HealthStatus.HEALTHY.value if all_healthy else HealthStatus.DEGRADED.value,
        "components": components,
    }
