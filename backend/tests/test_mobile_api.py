"""
Tests for the paginated mobile listings.
"""

import pytest


class TestMobileListings:
    """Test /api/{users,stores,brands} pagination."""

    def test_envelope_shape(self, client, make_stores):
        make_stores("active", "active", "active")
        response = client.get("/api/stores?page=1&limit=2")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert len(body["data"]) == 2
        assert body["pagination"] == {"page": 1, "limit": 2, "total": 3}

    def test_second_page(self, client, make_stores):
        stores = make_stores("active", "active", "active")
        body = client.get("/api/stores?page=2&limit=2").json()
        assert [s["id"] for s in body["data"]] == [stores[2].id]

    def test_only_active_rows(self, client, make_stores):
        stores = make_stores("active", "inactive", "active")
        client.delete(f"/stores/{stores[2].id}")

        body = client.get("/api/stores").json()
        assert [s["id"] for s in body["data"]] == [stores[0].id]
        assert body["pagination"]["total"] == 1

    @pytest.mark.parametrize(
        "query",
        ["", "?page=abc&limit=xyz", "?page=0&limit=0", "?page=-1&limit=-10"],
    )
    def test_bad_parameters_use_defaults(self, client, query):
        response = client.get(f"/api/brands{query}")
        assert response.status_code == 200
        assert response.json()["pagination"] == {"page": 1, "limit": 10, "total": 0}

    def test_limit_is_clamped(self, client):
        body = client.get("/api/users?limit=100000").json()
        assert body["pagination"]["limit"] == 100

    def test_page_past_end_is_empty(self, client, seed_brand):
        body = client.get("/api/brands?page=5&limit=10").json()
        assert body["data"] == []
        assert body["pagination"]["total"] == 1

    def test_huge_page_is_empty(self, client, seed_user):
        response = client.get("/api/users?page=99999999999999999999&limit=10")
        assert response.status_code == 200
        body = response.json()
        assert body["data"] == []
        assert body["pagination"]["total"] == 1
        assert body["pagination"]["limit"] == 10

    def test_users_listing(self, client, seed_user):
        body = client.get("/api/users").json()
        assert body["data"][0]["email"] == seed_user.email
