"""End-to-end tests for the post HTTP API."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from quickblog.interface.api.app import create_app
from tests.conftest import LONG_CONTENT
from tests.di import build_test_container

API = "/blog-api"

CORS = {
    "access-control-allow-origin": "*",
    "access-control-allow-headers": "Content-Type",
    "access-control-allow-methods": "GET, POST, PUT, DELETE, OPTIONS",
}


@pytest.fixture
def client():
    """Create test client over in-memory persistence."""
    with TestClient(create_app(build_test_container())) as test_client:
        yield test_client


def assert_cors(response) -> None:
    for header, value in CORS.items():
        assert response.headers[header] == value


def create(client, **fields):
    body = {"title": "Hello, World! 2024", "content": LONG_CONTENT, **fields}
    response = client.post(API, json=body)
    assert response.status_code == 201
    return response.json()


class TestPostsApi:
    """CRUD over HTTP."""

    def test_list_starts_empty(self, client):
        response = client.get(API)

        assert response.status_code == 200
        assert response.json() == []
        assert_cors(response)

    def test_create_returns_full_record(self, client):
        # Act
        post = create(client, tags=["intro"])

        # Assert
        assert post["slug"] == "hello-world-2024"
        assert post["status"] == "draft"
        assert post["tags"] == ["intro"]
        assert post["excerpt"] == LONG_CONTENT
        assert post["created_at"] == post["updated_at"]
        assert post["id"]

    def test_create_ignores_client_supplied_identity(self, client):
        post = create(client, id="chosen", slug="chosen-slug")

        assert post["id"] != "chosen"
        assert post["slug"] == "hello-world-2024"

    def test_get_by_slug(self, client):
        # Arrange
        created = create(client)

        # Act
        response = client.get(f"{API}/{created['slug']}")

        # Assert
        assert response.status_code == 200
        assert response.json() == created

    def test_update_merges_and_recomputes_slug(self, client):
        # Arrange
        created = create(client, tags=["a"])

        # Act
        response = client.put(
            f"{API}/{created['id']}",
            json={"title": "Brand New Title", "status": "published", "id": "ignored"},
        )

        # Assert
        assert response.status_code == 200
        updated = response.json()
        assert updated["id"] == created["id"]
        assert updated["slug"] == "brand-new-title"
        assert updated["status"] == "published"
        assert updated["tags"] == ["a"]
        assert updated["created_at"] == created["created_at"]
        assert client.get(f"{API}/brand-new-title").status_code == 200
        assert client.get(f"{API}/{created['slug']}").status_code == 404

    def test_empty_update_keeps_fields(self, client):
        created = create(client)

        updated = client.put(f"{API}/{created['id']}", json={}).json()

        assert updated["slug"] == created["slug"]
        assert updated["created_at"] == created["created_at"]
        assert datetime.fromisoformat(updated["updated_at"]) >= datetime.fromisoformat(
            created["updated_at"]
        )

    def test_delete_then_get(self, client):
        # Arrange
        created = create(client)

        # Act
        response = client.delete(f"{API}/{created['id']}")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"message": "Post deleted successfully"}
        assert client.get(f"{API}/{created['slug']}").status_code == 404


class TestPostsApiErrors:
    """Error responses share the {"error": ...} shape."""

    def test_unknown_slug(self, client):
        response = client.get(f"{API}/nothing-here")

        assert response.status_code == 404
        assert response.json() == {"error": "Post not found"}
        assert_cors(response)

    @pytest.mark.parametrize("body", [{}, {"title": "Only title"}, {"content": "x"}])
    def test_create_requires_title_and_content(self, client, body):
        response = client.post(API, json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Title and content are required"}
        assert_cors(response)

    def test_malformed_body_is_400(self, client):
        response = client.post(
            API, content=b"{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert "error" in response.json()

    def test_create_with_too_many_tags(self, client):
        tags = [f"tag-{i}" for i in range(11)]

        response = client.post(
            API, json={"title": "Tagged", "content": LONG_CONTENT, "tags": tags}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "A post can have at most 10 tags"}
        assert_cors(response)

    def test_update_with_empty_title(self, client):
        created = create(client)

        response = client.put(f"{API}/{created['id']}", json={"title": ""})

        assert response.status_code == 400
        assert response.json() == {"error": "String should have at least 1 character"}
        stored = client.get(f"{API}/{created['slug']}").json()
        assert stored["title"] == created["title"]

    def test_update_unknown_post(self, client):
        response = client.put(f"{API}/missing", json={"title": "X"})

        assert response.status_code == 404
        assert response.json() == {"error": "Post not found"}

    def test_delete_unknown_post(self, client):
        response = client.delete(f"{API}/missing")

        assert response.status_code == 404
        assert response.json() == {"error": "Post not found"}

    def test_method_not_allowed_uses_error_shape(self, client):
        response = client.patch(f"{API}/anything", json={})

        assert response.status_code == 405
        assert "error" in response.json()
        assert_cors(response)


class TestCors:
    """Preflight and CORS headers."""

    @pytest.mark.parametrize("path", [API, f"{API}/some-id", "/anything/else"])
    def test_options_is_empty_200(self, client, path):
        response = client.options(path)

        assert response.status_code == 200
        assert response.content == b""
        assert_cors(response)

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert_cors(response)

    def test_health_reports_where_posts_live(self, client):
        body = client.get("/health").json()

        assert body["api_prefix"] == API
        assert body["posts_url"].endswith(API)
        assert datetime.fromisoformat(body["timestamp"]).tzinfo is not None
