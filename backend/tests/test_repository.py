"""
Tests for SoftDeleteRepository.
"""

import pytest

from rest_api.models import Brand, Store, User
from rest_api.repositories import SoftDeleteRepository
from shared.utils.exceptions import NotFoundError, ValidationError


@pytest.fixture
def store_repo(db_session):
    return SoftDeleteRepository(Store, db_session)


@pytest.fixture
def user_repo(db_session):
    return SoftDeleteRepository(User, db_session)


class TestCreate:
    def test_assigns_id_and_default_status(self, store_repo):
        store = store_repo.create({"name": "Uptown"})
        assert store.id is not None
        assert store.status == "active"
        assert store.created_at is not None
        assert store.deleted_at is None

    def test_ids_ascend(self, store_repo):
        first = store_repo.create({"name": "A"})
        second = store_repo.create({"name": "B"})
        assert second.id > first.id

    def test_keeps_explicit_status(self, store_repo):
        store = store_repo.create({"name": "Closed", "status": "inactive"})
        assert store.status == "inactive"

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_rejects_blank_required_field(self, store_repo, name):
        with pytest.raises(ValidationError) as exc_info:
            store_repo.create({"name": name})
        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "name is required"

    def test_user_requires_email(self, user_repo):
        with pytest.raises(ValidationError):
            user_repo.create({"name": "Ann"})

    def test_ignores_unknown_fields(self, db_session):
        repo = SoftDeleteRepository(Brand, db_session)
        brand = repo.create({"name": "Acme", "deleted_at": "2020-01-01", "bogus": 1})
        assert brand.deleted_at is None


class TestFind:
    def test_find_by_id_missing_raises(self, store_repo):
        with pytest.raises(NotFoundError) as exc_info:
            store_repo.find_by_id(999)
        assert exc_info.value.detail == "Store not found"

    def test_entity_name_override(self, db_session):
        repo = SoftDeleteRepository(Store, db_session, entity_name="Shop")
        with pytest.raises(NotFoundError) as exc_info:
            repo.find_by_id(1)
        assert exc_info.value.detail == "Shop not found"

    def test_find_all_includes_inactive(self, store_repo, make_stores):
        make_stores("active", "inactive", "active")
        assert [s.status for s in store_repo.find_all()] == ["active", "inactive", "active"]

    def test_find_by_skips_excluded_id(self, user_repo, seed_user):
        assert user_repo.find_by("email", "ann@example.com").id == seed_user.id
        assert user_repo.find_by("email", "ann@example.com", exclude_id=seed_user.id) is None


class TestUpdate:
    def test_empty_string_means_unchanged(self, user_repo, seed_user):
        updated = user_repo.update(seed_user.id, {"name": "", "email": "new@x.com"})
        assert updated.name == "Ann"
        assert updated.email == "new@x.com"

    def test_none_means_unchanged(self, user_repo, seed_user):
        updated = user_repo.update(seed_user.id, {"phone": None, "status": "inactive"})
        assert updated.phone == "+1234567890"
        assert updated.status == "inactive"

    def test_refreshes_updated_at(self, store_repo, seed_store):
        before = seed_store.updated_at
        updated = store_repo.update(seed_store.id, {"address": "2 Side St"})
        assert updated.updated_at.replace(tzinfo=None) >= before.replace(tzinfo=None)
        assert updated.address == "2 Side St"

    def test_missing_raises(self, store_repo):
        with pytest.raises(NotFoundError):
            store_repo.update(42, {"name": "Ghost"})


class TestSoftDelete:
    def test_deleted_row_is_invisible(self, store_repo, seed_store):
        store_repo.soft_delete(seed_store.id)

        with pytest.raises(NotFoundError):
            store_repo.find_by_id(seed_store.id)
        assert seed_store.id not in [s.id for s in store_repo.find_all()]

    def test_row_is_kept(self, db_session, store_repo, seed_store):
        store_repo.soft_delete(seed_store.id)
        db_session.commit()

        row = db_session.get(Store, seed_store.id)
        assert row is not None
        assert row.deleted_at is not None

    def test_second_delete_raises(self, store_repo, seed_store):
        store_repo.soft_delete(seed_store.id)
        with pytest.raises(NotFoundError):
            store_repo.soft_delete(seed_store.id)

    def test_deleted_row_cannot_be_updated(self, store_repo, seed_store):
        store_repo.soft_delete(seed_store.id)
        with pytest.raises(NotFoundError):
            store_repo.update(seed_store.id, {"name": "Back"})


class TestActivePage:
    def test_count_active(self, store_repo, make_stores):
        stores = make_stores("active", "inactive", "active", "active")
        store_repo.soft_delete(stores[0].id)
        assert store_repo.count_active() == 2

    def test_page_ordered_and_bounded(self, store_repo, make_stores):
        stores = make_stores(*["active"] * 5)
        page = store_repo.find_active_page(offset=2, limit=2)
        assert [s.id for s in page] == [stores[2].id, stores[3].id]

    def test_page_excludes_inactive_and_deleted(self, store_repo, make_stores):
        stores = make_stores("active", "inactive", "active")
        store_repo.soft_delete(stores[2].id)
        assert [s.id for s in store_repo.find_active_page(0, 10)] == [stores[0].id]

    def test_offset_past_end_is_empty(self, store_repo, make_stores):
        make_stores("active")
        assert list(store_repo.find_active_page(offset=10, limit=10)) == []
