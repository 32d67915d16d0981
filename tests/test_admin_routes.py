# =============================================================================
# tests/test_admin_routes.py - Admin Endpoint Tests
# =============================================================================
# Tests for login/logout and the guarded dashboard endpoints:
# - GET/POST /admin/login, GET /admin/logout
# - GET /admin
# - POST /admin/posts, /admin/posts/delete, /admin/messages/delete
# =============================================================================

from core.models import ContactRequest, PostUpsert
from core.services import MessageService, PostService

from tests.conftest import ADMIN_EMAIL, ADMIN_PASSWORD


# =============================================================================
# Login / Logout
# =============================================================================

class TestLogin:
    """Tests for admin login and logout."""

    def test_login_page(self, client):
        response = client.get("/admin/login")

        assert response.status_code == 200
        assert 'action="/admin/login"' in response.text
        assert "Invalid credentials" not in response.text

    def test_login_page_shows_error(self, client):
        response = client.get("/admin/login?error=invalid")

        assert "Invalid credentials" in response.text

    def test_wrong_password(self, client):
        response = client.post(
            "/admin/login",
            data={"email": ADMIN_EMAIL, "password": "wrong"},
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/admin/login?error=invalid"
        assert client.get("/admin").status_code == 303

    def test_wrong_email(self, client):
        response = client.post(
            "/admin/login",
            data={"email": "someone@example.com", "password": ADMIN_PASSWORD},
        )

        assert response.headers["location"] == "/admin/login?error=invalid"

    def test_missing_fields(self, client):
        response = client.post("/admin/login", data={})

        assert response.headers["location"] == "/admin/login?error=invalid"

    def test_login_sets_session_cookie(self, admin_client):
        response = admin_client.get("/admin")

        assert response.status_code == 200
        assert ADMIN_EMAIL in response.text

    def test_login_page_redirects_when_logged_in(self, admin_client):
        response = admin_client.get("/admin/login")

        assert response.status_code == 303
        assert response.headers["location"] == "/admin"

    def test_logout(self, admin_client, session_store):
        response = admin_client.get("/admin/logout")

        assert response.status_code == 303
        assert response.headers["location"] == "/"
        assert len(session_store) == 0
        assert admin_client.get("/admin").headers["location"] == "/admin/login"

    def test_logout_without_session(self, client):
        response = client.get("/admin/logout")

        assert response.status_code == 303
        assert response.headers["location"] == "/"


# =============================================================================
# Dashboard
# =============================================================================

class TestDashboard:
    """Tests for GET /admin."""

    def test_lists_messages_and_posts(self, admin_client, database, sample_post_data, sample_contact_data):
        with database.connect() as conn:
            PostService.upsert_post(conn, PostUpsert(**sample_post_data))
            MessageService.create_message(conn, ContactRequest(**sample_contact_data))

        response = admin_client.get("/admin")

        assert sample_contact_data["message"] in response.text
        assert 'value="hello-world"' in response.text

    def test_notice_from_msg_flag(self, admin_client):
        response = admin_client.get("/admin?msg=deleted")

        assert "Deleted." in response.text

    def test_degrades_when_tables_unreadable(self, admin_client, database):
        with database.connect() as conn:
            conn.execute("DROP TABLE messages")
            conn.execute("DROP TABLE posts")

        response = admin_client.get("/admin")

        assert response.status_code == 200
        assert "No messages yet." in response.text
        assert "No posts." in response.text

    def test_degrades_when_database_cannot_be_opened(self, admin_client, unopenable_database):
        response = admin_client.get("/admin")

        assert response.status_code == 200
        assert "No messages yet." in response.text
        assert "No posts." in response.text


# =============================================================================
# Posts
# =============================================================================

class TestPosts:
    """Tests for POST /admin/posts and /admin/posts/delete."""

    def test_create_post(self, admin_client, database, sample_post_data):
        response = admin_client.post("/admin/posts", data=sample_post_data)

        assert response.status_code == 303
        assert response.headers["location"] == "/admin?msg=ok"
        with database.connect() as conn:
            post = PostService.get_post(conn, "hello-world")
        assert post.title == "Hello World"

    def test_update_post_keeps_id(self, admin_client, database, sample_post_data):
        admin_client.post("/admin/posts", data=sample_post_data)
        with database.connect() as conn:
            original = PostService.get_post(conn, "hello-world")

        admin_client.post("/admin/posts", data={
            "slug": "hello-world",
            "title": "Changed",
            "excerpt": "",
            "content": "Changed content",
        })

        with database.connect() as conn:
            updated = PostService.get_post(conn, "hello-world")
            posts = PostService.list_posts(conn)
        assert updated.id == original.id
        assert updated.title == "Changed"
        assert updated.excerpt is None
        assert updated.content == "Changed content"
        assert len(posts) == 1

    def test_missing_field_redirects_with_flag(self, admin_client, database, sample_post_data):
        del sample_post_data["content"]

        response = admin_client.post("/admin/posts", data=sample_post_data)

        assert response.headers["location"] == "/admin?msg=missing"
        with database.connect() as conn:
            assert PostService.list_posts(conn) == []

    def test_invalid_slug_redirects_with_flag(self, admin_client, sample_post_data):
        sample_post_data["slug"] = "a/b"

        response = admin_client.post("/admin/posts", data=sample_post_data)

        assert response.headers["location"] == "/admin?msg=invalid"

    def test_store_failure_redirects_with_error(self, admin_client, database, sample_post_data):
        with database.connect() as conn:
            conn.execute("DROP TABLE posts")

        response = admin_client.post("/admin/posts", data=sample_post_data)

        assert response.headers["location"] == "/admin?msg=error"

    def test_unopenable_database_redirects_with_error(self, admin_client, unopenable_database, sample_post_data):
        response = admin_client.post("/admin/posts", data=sample_post_data)

        assert response.status_code == 303
        assert response.headers["location"] == "/admin?msg=error"

    def test_long_excerpt_is_saved(self, admin_client, database, sample_post_data):
        sample_post_data["excerpt"] = "e" * 5000
        sample_post_data["title"] = "T" * 1000

        response = admin_client.post("/admin/posts", data=sample_post_data)

        assert response.headers["location"] == "/admin?msg=ok"
        with database.connect() as conn:
            post = PostService.get_post(conn, "hello-world")
        assert post.excerpt == "e" * 5000
        assert post.title == "T" * 1000

    def test_delete_post(self, admin_client, database, sample_post_data):
        admin_client.post("/admin/posts", data=sample_post_data)

        response = admin_client.post("/admin/posts/delete", data={"slug": "hello-world"})

        assert response.headers["location"] == "/admin?msg=deleted"
        with database.connect() as conn:
            assert PostService.get_post(conn, "hello-world") is None

    def test_delete_unknown_slug_is_noop(self, admin_client):
        response = admin_client.post("/admin/posts/delete", data={"slug": "nope"})

        assert response.headers["location"] == "/admin?msg=deleted"

    def test_delete_without_slug(self, admin_client):
        response = admin_client.post("/admin/posts/delete", data={})

        assert response.headers["location"] == "/admin?msg=missing"


# =============================================================================
# Messages
# =============================================================================

class TestMessages:
    """Tests for POST /admin/messages/delete."""

    def test_delete_message(self, admin_client, database, sample_contact_data):
        with database.connect() as conn:
            message_id = MessageService.create_message(conn, ContactRequest(**sample_contact_data))

        response = admin_client.post("/admin/messages/delete", data={"id": str(message_id)})

        assert response.headers["location"] == "/admin?msg=deleted"
        with database.connect() as conn:
            assert MessageService.list_messages(conn) == []

    def test_delete_unknown_id_is_noop(self, admin_client):
        response = admin_client.post("/admin/messages/delete", data={"id": "12345"})

        assert response.headers["location"] == "/admin?msg=deleted"

    def test_delete_without_id(self, admin_client):
        response = admin_client.post("/admin/messages/delete", data={"id": ""})

        assert response.headers["location"] == "/admin?msg=missing"

    def test_delete_non_numeric_id(self, admin_client):
        response = admin_client.post("/admin/messages/delete", data={"id": "abc"})

        assert response.headers["location"] == "/admin?msg=invalid"
