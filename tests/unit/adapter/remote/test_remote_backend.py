"""Unit tests for the HTTP post backend."""

import json

import httpx
import pytest

from quickblog.adapter.error import PostApiError
from quickblog.adapter.remote import RemotePostBackend
from quickblog.domain.model import PostChanges, PostDraft
from tests.conftest import make_post

BASE_URL = "http://blog.test/blog-api"


def backend_for(handler) -> RemotePostBackend:
    return RemotePostBackend(BASE_URL, transport=httpx.MockTransport(handler))


class TestRemotePostBackend:
    """Tests for RemotePostBackend."""

    @pytest.mark.asyncio
    async def test_list_posts(self):
        # Arrange
        post = make_post()

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "GET"
            assert str(request.url) == BASE_URL
            return httpx.Response(200, json=[post.model_dump(mode="json")])

        # Act
        posts = await backend_for(handler).list_posts()

        # Assert
        assert posts == [post]

    @pytest.mark.asyncio
    async def test_get_by_slug_404_is_none(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/blog-api/missing"
            return httpx.Response(404, json={"error": "Post not found"})

        assert await backend_for(handler).get_post_by_slug("missing") is None

    @pytest.mark.asyncio
    async def test_create_sends_draft(self):
        # Arrange
        sent = {}
        created = make_post(title="Sent")

        def handler(request: httpx.Request) -> httpx.Response:
            sent.update(json.loads(request.content))
            return httpx.Response(201, json=created.model_dump(mode="json"))

        # Act
        post = await backend_for(handler).create_post(
            PostDraft(title="Sent", content="Body", tags=["x"])
        )

        # Assert
        assert post == created
        assert sent["title"] == "Sent"
        assert sent["tags"] == ["x"]
        assert sent["status"] == "draft"

    @pytest.mark.asyncio
    async def test_update_sends_only_supplied_fields(self):
        # Arrange
        sent = {}
        updated = make_post(title="Renamed")

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "PUT"
            assert request.url.path == f"/blog-api/{updated.id}"
            sent.update(json.loads(request.content))
            return httpx.Response(200, json=updated.model_dump(mode="json"))

        # Act
        await backend_for(handler).update_post(updated.id, PostChanges(title="Renamed"))

        # Assert
        assert sent == {"title": "Renamed"}

    @pytest.mark.asyncio
    async def test_server_error_message_is_surfaced(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"error": "Post not found"})

        with pytest.raises(PostApiError, match="Post not found") as exc_info:
            await backend_for(handler).delete_post("missing")
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_status_only_error_message(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="boom")

        with pytest.raises(PostApiError, match="HTTP error! status: 500"):
            await backend_for(handler).list_posts()

    @pytest.mark.asyncio
    async def test_transport_error_becomes_api_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        backend = backend_for(handler)

        with pytest.raises(PostApiError, match="Could not reach the blog API"):
            await backend.list_posts()
        assert await backend.is_available() is False

    @pytest.mark.asyncio
    async def test_is_available(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[])

        assert await backend_for(handler).is_available() is True
