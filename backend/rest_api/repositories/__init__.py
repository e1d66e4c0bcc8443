"""
Repository Pattern implementation.
Centralizes data access and the soft delete filter.

Usage:
    from rest_api.repositories import SoftDeleteRepository

    repo = SoftDeleteRepository(Store, db)
    stores = repo.find_all()
"""

from .base import SoftDeleteRepository

__all__ = [
    "SoftDeleteRepository",
]
