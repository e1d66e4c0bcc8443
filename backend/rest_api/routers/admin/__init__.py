"""
Admin API router - combines all back-office sub-routers.

- users: User CRUD
- stores: Store CRUD
- brands: Brand CRUD
- tables: Grid/form declarations for the admin renderer

CRUD routes are mounted at the root (/users, /stores, /brands);
table metadata lives under /admin/tables.
"""

from fastapi import APIRouter

from .users import router as users_router
from .stores import router as stores_router
from .brands import router as brands_router
from .tables import router as tables_router


router = APIRouter()

router.include_router(users_router)
router.include_router(stores_router)
router.include_router(brands_router)
router.include_router(tables_router)

__all__ = ["router"]
