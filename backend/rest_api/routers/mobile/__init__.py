"""
Mobile API router - read-only, paginated listings of active entities.

All routes are prefixed with /api.
"""

from fastapi import APIRouter

from .users import router as users_router
from .stores import router as stores_router
from .brands import router as brands_router


router = APIRouter(prefix="/api")

router.include_router(users_router)
router.include_router(stores_router)
router.include_router(brands_router)

__all__ = ["router"]
