"""
Tests for admin store management endpoints.
"""


class TestStoreEndpoints:
    """Test admin store CRUD operations."""

    def test_create_store_minimal(self, client):
        response = client.post("/stores", json={"name": "Uptown"})
        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "Uptown"
        assert data["email"] is None
        assert data["status"] == "active"

    def test_create_store_empty_email_allowed(self, client):
        response = client.post("/stores", json={"name": "Uptown", "email": ""})
        assert response.status_code == 201

    def test_create_store_invalid_email(self, client):
        response = client.post("/stores", json={"name": "Uptown", "email": "nope"})
        assert response.status_code == 400

    def test_create_store_blank_name(self, client):
        response = client.post("/stores", json={"name": "   "})
        assert response.status_code == 400
        assert response.json() == {"error": "name is required"}

    def test_list_includes_inactive(self, client, make_stores):
        make_stores("active", "inactive")
        body = client.get("/stores").json()
        assert body["total"] == 2
        assert [s["status"] for s in body["data"]] == ["active", "inactive"]

    def test_update_store(self, client, seed_store):
        response = client.put(
            f"/stores/{seed_store.id}",
            json={"address": "9 New Rd", "phone": "", "status": "inactive"},
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["address"] == "9 New Rd"
        assert data["phone"] == "+1555000111"
        assert data["status"] == "inactive"

    def test_delete_absent_store(self, client):
        response = client.delete("/stores/999")
        assert response.status_code == 404
        assert response.json() == {"error": "Store not found"}

    def test_unsupported_media_type(self, client):
        response = client.post(
            "/stores", content=b"name=x", headers={"Content-Type": "text/plain"}
        )
        assert response.status_code == 415
        assert "error" in response.json()
