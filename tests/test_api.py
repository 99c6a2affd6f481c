"""
Tests for the HTTP endpoints.
"""
from postplanner.models import Post, Scheduler


class TestUsersEndpoints:
    """Test user endpoints."""

    def test_create_user(self, client):
        response = client.post(
            "/api/users",
            json={"name": "NewUser", "email": "new@example.com", "password": "secret123"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "NewUser"
        assert data["email"] == "new@example.com"
        assert "password" not in data

    def test_duplicate_email_conflict(self, client, seeded):
        response = client.post(
            "/api/users",
            json={"name": "Impostor", "email": "john.doe@example.com", "password": "x"},
        )
        assert response.status_code == 409
        body = response.json()
        assert body["ok"] is False
        assert body["error_code"] == "CONSTRAINT_VIOLATION"
        assert body["details"] == {"kind": "unique", "table": "users", "column": "email"}

    def test_find_by_email(self, client, seeded):
        response = client.get("/api/users", params={"email": "jane.smith@example.com"})
        assert response.status_code == 200
        assert [u["name"] for u in response.json()] == ["JaneSmith"]

    def test_delete_unknown_user(self, client):
        response = client.delete("/api/users/999")
        assert response.status_code == 404
        body = response.json()
        assert body["ok"] is False
        assert body["error"] == "User not found"
        assert body["error_code"] == "HTTP_404"

    def test_delete_unknown_post(self, client):
        response = client.delete("/api/posts/999")
        assert response.status_code == 404
        assert response.json()["error_code"] == "HTTP_404"


class TestPostsEndpoints:
    """Test design, platform and post endpoints."""

    def test_create_post_flow(self, client):
        user = client.post(
            "/api/users",
            json={"name": "Creator", "email": "creator@example.com", "password": "pw"},
        ).json()
        platform = client.post(
            "/api/platforms",
            json={"name": "Instagram", "image_size_constraint": "1080x1080"},
        ).json()
        design = client.post(
            "/api/designs",
            json={"user_id": user["id"], "name": "Carousel"},
        ).json()

        response = client.post(
            "/api/posts",
            json={
                "design_id": design["id"],
                "user_id": user["id"],
                "platform_id": platform["id"],
                "content": "New drop",
                "scheduled_at": "2024-12-24T18:00:00",
            },
        )
        assert response.status_code == 200
        assert response.json()["content"] == "New drop"

        report = client.get("/api/reports/posts", params={"user_name": "Creator"})
        assert report.json() == [
            {
                "content": "New drop",
                "design_name": "Carousel",
                "platform_name": "Instagram",
                "scheduled_at": "2024-12-24T18:00:00",
            }
        ]

    def test_design_for_unknown_user(self, client):
        response = client.post("/api/designs", json={"user_id": 42, "name": "Orphan"})
        assert response.status_code == 409
        assert response.json()["details"]["column"] == "user_id"

    def test_list_platforms(self, client, seeded):
        response = client.get("/api/platforms")
        assert [p["name"] for p in response.json()] == ["Facebook", "Instagram", "LinkedIn"]

    def test_delete_platform_cascades(self, client, seeded):
        facebook = client.get("/api/platforms").json()[0]

        response = client.delete(f"/api/platforms/{facebook['id']}")
        assert response.status_code == 200
        assert response.json()["ok"] is True

        assert seeded.query(Post).count() == 1
        assert seeded.query(Scheduler).count() == 1
        assert client.get("/api/reports/posts", params={"user_name": "JohnDoe"}).json() == []


class TestReportsEndpoints:
    """Test the posts-by-user report endpoint."""

    def test_john_doe(self, client, seeded):
        response = client.get("/api/reports/posts", params={"user_name": "JohnDoe"})
        assert response.status_code == 200
        assert response.json() == [
            {
                "content": "Check out our summer sale!",
                "design_name": "Summer Campaign Design",
                "platform_name": "Facebook",
                "scheduled_at": "2024-10-25T10:00:00",
            }
        ]

    def test_unknown_user(self, client, seeded):
        response = client.get("/api/reports/posts", params={"user_name": "NoSuchUser"})
        assert response.status_code == 200
        assert response.json() == []


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
