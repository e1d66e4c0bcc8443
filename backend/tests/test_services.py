"""
Tests for the domain services (transactions, business rules, error mapping).
"""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from rest_api.models import Brand, User
from rest_api.services.domain import BrandService, StoreService, UserService
from shared.utils.exceptions import (
    DatabaseError,
    DuplicateEntityError,
    NotFoundError,
    ValidationError,
)


class TestUserService:
    """Test user-specific rules."""

    def test_create_commits(self, db_session):
        user = UserService(db_session).create({"name": "Ann", "email": "ann@x.com"})
        assert user.id is not None
        assert user.status == "active"

        db_session.expire_all()
        assert db_session.get(User, user.id) is not None

    def test_duplicate_email_rejected(self, db_session, seed_user):
        with pytest.raises(DuplicateEntityError) as exc_info:
            UserService(db_session).create({"name": "Other", "email": seed_user.email})
        assert exc_info.value.status_code == 400

    def test_email_reusable_after_delete(self, db_session, seed_user):
        service = UserService(db_session)
        service.delete(seed_user.id)
        user = service.create({"name": "Ann again", "email": seed_user.email})
        assert user.id != seed_user.id

    def test_update_to_taken_email_rejected(self, db_session, seed_user):
        service = UserService(db_session)
        other = service.create({"name": "Bob", "email": "bob@x.com"})
        with pytest.raises(DuplicateEntityError):
            service.update(other.id, {"email": seed_user.email})

    def test_update_keeping_own_email(self, db_session, seed_user):
        user = UserService(db_session).update(seed_user.id, {"email": seed_user.email, "name": "Annie"})
        assert user.name == "Annie"

    def test_update_missing_user_is_not_found(self, db_session, seed_user):
        with pytest.raises(NotFoundError):
            UserService(db_session).update(999, {"email": seed_user.email})

    def test_storage_failure_in_email_check_on_create(self, db_session):
        service = UserService(db_session)
        with patch.object(service.repo, "find_by", side_effect=OperationalError("SELECT", {}, Exception("gone"))):
            with pytest.raises(DatabaseError) as exc_info:
                service.create({"name": "Bob", "email": "bob@example.com"})
        assert exc_info.value.detail == "Failed to create user"

    def test_storage_failure_in_lookup_on_update(self, db_session, seed_user):
        service = UserService(db_session)
        with patch.object(service.repo, "find_by_id", side_effect=OperationalError("SELECT", {}, Exception("gone"))):
            with pytest.raises(DatabaseError) as exc_info:
                service.update(seed_user.id, {"email": "new@example.com"})
        assert exc_info.value.detail == "Failed to update user"


class TestStoreService:
    def test_list_all_and_get(self, db_session, seed_store):
        service = StoreService(db_session)
        assert [s.id for s in service.list_all()] == [seed_store.id]
        assert service.get(seed_store.id).name == "Downtown"

    def test_delete_then_get(self, db_session, seed_store):
        service = StoreService(db_session)
        service.delete(seed_store.id)
        with pytest.raises(NotFoundError) as exc_info:
            service.get(seed_store.id)
        assert exc_info.value.detail == "Store not found"

    def test_list_active_page(self, db_session, make_stores):
        make_stores("active", "inactive", "active")
        items, total = StoreService(db_session).list_active_page(offset=0, limit=1)
        assert len(items) == 1
        assert total == 2

    def test_storage_failure_on_create(self, db_session):
        service = StoreService(db_session)
        with patch.object(db_session, "commit", side_effect=OperationalError("INSERT", {}, Exception("disk full"))):
            with pytest.raises(DatabaseError) as exc_info:
                service.create({"name": "Broken"})
        assert exc_info.value.status_code == 500
        assert exc_info.value.detail == "Failed to create store"

    def test_storage_failure_on_list(self, db_session):
        service = StoreService(db_session)
        with patch.object(service.repo, "find_all", side_effect=OperationalError("SELECT", {}, Exception("gone"))):
            with pytest.raises(DatabaseError) as exc_info:
                service.list_all()
        assert exc_info.value.detail == "Failed to fetch stores"


class TestBrandService:
    def test_create_with_logo(self, db_session):
        brand = BrandService(db_session).create(
            {"name": "Acme", "logo": " https://cdn.example.com/a.png "}
        )
        assert brand.logo == "https://cdn.example.com/a.png"

    def test_internal_logo_rejected(self, db_session):
        with pytest.raises(ValidationError):
            BrandService(db_session).create({"name": "Acme", "logo": "http://localhost/a.png"})
        assert db_session.query(Brand).count() == 0

    def test_update_description_only(self, db_session, seed_brand):
        brand = BrandService(db_session).update(seed_brand.id, {"description": "New"})
        assert brand.description == "New"
        assert brand.logo == seed_brand.logo
