"""
Public routers - No authentication required.
- /health, /health/detailed - Health checks
"""

from .health import router as health_router

__all__ = ["health_router"]
