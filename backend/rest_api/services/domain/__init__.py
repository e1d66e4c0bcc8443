"""
Domain Services - Application Layer.

Services contain business logic and own the transaction. They use
Repositories for data access.

Structure:
    Router (thin controller)
        ↓
    Service (business logic)  ← YOU ARE HERE
        ↓
    Repository (data access)
        ↓
    Model (entity)

Usage:
    from rest_api.services.domain import UserService

    # In router
    service = UserService(db)
    users = service.list_all()
"""

from .user_service import UserService
from .store_service import StoreService
from .brand_service import BrandService

__all__ = [
    "UserService",
    "StoreService",
    "BrandService",
]
