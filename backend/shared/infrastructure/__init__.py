"""
Infrastructure module: Database, Redis and request correlation.

Provides:
- Database sessions and transactions (db.py)
- Optional Redis client for connectivity checks (redis_client.py)
- Correlation IDs for request tracing (correlation.py)
"""

from shared.infrastructure.db import (
    engine,
    SessionLocal,
    build_engine,
    get_db,
    get_db_context,
    safe_commit,
)
from shared.infrastructure.redis_client import (
    create_redis_client,
    close_redis_client,
    ping_redis,
)

__all__ = [
    # db
    "engine",
    "SessionLocal",
    "build_engine",
    "get_db",
    "get_db_context",
    "safe_commit",
    # redis
    "create_redis_client",
    "close_redis_client",
    "ping_redis",
]
