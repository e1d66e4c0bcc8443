"""
Redis client management.

The cache store is optional: the core CRUD logic never touches it, the
application only keeps a client around to report connectivity in the
detailed health check. The client is created in the application lifespan
and handed to consumers through ``app.state`` rather than a module global.
"""

from __future__ import annotations

import redis.asyncio as redis

from shared.config.settings import settings
from shared.config.logging import get_logger

logger = get_logger(__name__)


def create_redis_client(url: str | None = None) -> redis.Redis | None:
    """
    Build an async Redis client from a URL.

    Returns None when no URL is configured. No connection is opened until
    the first command is sent.
    """
    url = settings.redis_url if url is None else url
    if not url:
        logger.info("Redis not configured, cache connectivity checks disabled")
        return None

    client = redis.from_url(
        url,
        decode_responses=True,
        socket_connect_timeout=settings.redis_socket_timeout,
        socket_timeout=settings.redis_socket_timeout,
        health_check_interval=30,
    )
    logger.info("Redis client initialized", timeout=settings.redis_socket_timeout)
    return client


async def ping_redis(client: redis.Redis) -> dict[str, str]:
    """Ping the cache store. Raises on connection failure."""
    await client.ping()
    return {"url": _redact(settings.redis_url)}


async def close_redis_client(client: redis.Redis | None) -> None:
    """Close the client and its connection pool."""
    if client is None:
        return
    await client.aclose()
    logger.info("Redis client closed")


def _redact(url: str) -> str:
    """Strip credentials from a connection URL before exposing it."""
    if "@" not in url:
        return url
    scheme, _, rest = url.partition("://")
    return f"{scheme}://***@{rest.split('@', 1)[1]}"
