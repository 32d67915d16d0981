# =============================================================================
# tests/test_public_routes.py - Public Endpoint Tests
# =============================================================================
# Tests for GET /, GET /post/{slug}, POST /api/contact, GET /favicon.ico and
# the health endpoints, using a TestClient against a temporary database.
# =============================================================================

import pytest

from core.models import PostUpsert
from core.services import MessageService, PostService


def _message_count(database):
    with database.connect() as conn:
        return len(MessageService.list_messages(conn))


# =============================================================================
# Contact API
# =============================================================================

class TestContact:
    """Tests for POST /api/contact."""

    def test_json_submission_creates_one_message(self, client, database, sample_contact_data):
        response = client.post("/api/contact", json=sample_contact_data)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True

        with database.connect() as conn:
            messages = MessageService.list_messages(conn)
        assert len(messages) == 1
        assert messages[0].id == body["id"]
        assert messages[0].email == sample_contact_data["email"]

    def test_form_submission_accepted(self, client, database, sample_contact_data):
        response = client.post("/api/contact", data=sample_contact_data)

        assert response.status_code == 200
        assert _message_count(database) == 1

    def test_each_submission_gets_new_id(self, client, sample_contact_data):
        first = client.post("/api/contact", json=sample_contact_data).json()["id"]
        second = client.post("/api/contact", json=sample_contact_data).json()["id"]

        assert first != second

    @pytest.mark.parametrize("field", ["name", "email", "message"])
    def test_missing_field_returns_400(self, client, database, sample_contact_data, field):
        del sample_contact_data[field]

        response = client.post("/api/contact", json=sample_contact_data)

        assert response.status_code == 400
        assert response.json()["error"] == "name, email and message required"
        assert field in response.json()["details"]["fields"]
        assert _message_count(database) == 0

    @pytest.mark.parametrize("field", ["name", "email", "message"])
    def test_empty_field_returns_400(self, client, database, sample_contact_data, field):
        sample_contact_data[field] = ""

        response = client.post("/api/contact", json=sample_contact_data)

        assert response.status_code == 400
        assert _message_count(database) == 0

    def test_malformed_json_returns_400(self, client, database):
        response = client.post(
            "/api/contact",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert _message_count(database) == 0

    def test_store_failure_returns_500(self, client, database, sample_contact_data):
        with database.connect() as conn:
            conn.execute("DROP TABLE messages")

        response = client.post("/api/contact", json=sample_contact_data)

        assert response.status_code == 500
        assert response.json()["error"] == "db error"

    def test_unopenable_database_returns_500(self, client, unopenable_database, sample_contact_data):
        response = client.post("/api/contact", json=sample_contact_data)

        assert response.status_code == 500
        assert response.json()["error"] == "db error"

    def test_long_fields_are_stored(self, client, database):
        submission = {
            "name": "N" * 500,
            "email": "e" * 400 + "@example.com",
            "message": "x" * 20_000,
        }

        response = client.post("/api/contact", json=submission)

        assert response.status_code == 200
        with database.connect() as conn:
            messages = MessageService.list_messages(conn)
        assert len(messages) == 1
        assert messages[0].message == submission["message"]
        assert messages[0].name == submission["name"]


# =============================================================================
# Pages
# =============================================================================

class TestPages:
    """Tests for the home and post pages."""

    def test_home_without_posts(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "No posts yet." in response.text
        assert "Selected Projects" in response.text

    def test_home_lists_posts(self, client, database, sample_post_data):
        with database.connect() as conn:
            PostService.upsert_post(conn, PostUpsert(**sample_post_data))

        response = client.get("/")

        assert 'href="/post/hello-world"' in response.text
        assert "Hello World" in response.text

    def test_home_degrades_when_posts_unreadable(self, client, database):
        with database.connect() as conn:
            conn.execute("DROP TABLE posts")

        response = client.get("/")

        assert response.status_code == 200
        assert "No posts yet." in response.text

    def test_home_degrades_when_database_cannot_be_opened(self, client, unopenable_database):
        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "No posts yet." in response.text

    def test_home_shows_admin_link_when_logged_in(self, admin_client):
        assert "Go to admin" in admin_client.get("/").text

    def test_post_page(self, client, database, sample_post_data):
        with database.connect() as conn:
            PostService.upsert_post(conn, PostUpsert(**sample_post_data))

        response = client.get("/post/hello-world")

        assert response.status_code == 200
        assert "<h1>Hello World</h1>" in response.text
        assert "<strong>bold</strong>" in response.text

    def test_post_page_escapes_content(self, client, database):
        with database.connect() as conn:
            PostService.upsert_post(conn, PostUpsert(
                slug="xss",
                title="<img src=x onerror=alert(1)>",
                content="<script>alert('x')</script>",
            ))

        response = client.get("/post/xss")

        assert "<script>alert" not in response.text
        assert "<img src=x" not in response.text
        assert "&lt;script&gt;" in response.text

    def test_unknown_post_returns_404_page(self, client):
        response = client.get("/post/missing")

        assert response.status_code == 404
        assert "Post not found" in response.text

    def test_post_page_404_when_database_cannot_be_opened(self, client, unopenable_database):
        response = client.get("/post/hello-world")

        assert response.status_code == 404
        assert "text/html" in response.headers["content-type"]
        assert "Post not found" in response.text

    def test_favicon(self, client):
        response = client.get("/favicon.ico")

        assert response.status_code == 204


# =============================================================================
# Health
# =============================================================================

class TestHealth:
    """Tests for health endpoints."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["database"] == "healthy"

    def test_health_degraded_when_database_cannot_be_opened(self, client, unopenable_database):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "degraded"
        assert response.json()["database"] == "unhealthy"

    def test_liveness(self, client):
        assert client.get("/health/live").json()["status"] == "alive"
