"""
SQLAlchemy ORM Models Package.

- base: Base class and SoftDeleteMixin
- user: User
- store: Store
- brand: Brand
"""

from .base import Base, SoftDeleteMixin
from .user import User
from .store import Store
from .brand import Brand

__all__ = [
    "Base",
    "SoftDeleteMixin",
    "User",
    "Store",
    "Brand",
]
