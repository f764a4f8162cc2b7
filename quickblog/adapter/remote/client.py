"""HTTP client for the remote Post Store."""

from typing import Any, Optional

import httpx
import logfire
from pydantic import ValidationError

from quickblog.adapter.error import PostApiError
from quickblog.domain.model.post import Post, PostChanges, PostDraft
from quickblog.domain.repository import PostBackend
from quickblog.domain.value import PostId


class RemotePostBackend(PostBackend):
    """PostBackend talking to the Post Store over HTTP.

    Every failure (transport error, non-2xx status, unreadable body) is
    raised as PostApiError, except a 404 on slug lookup which is just "not
    here".
    """

    name = "remote"

    def __init__(
        self,
        base_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize remote backend.

        Args:
            base_url: URL of the post collection, e.g. http://localhost:8888/blog-api
            transport: Optional httpx transport (tests plug in ASGI/mock transports)
        """
        self.base_url = base_url.rstrip("/")
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport)

    def _url(self, *parts: str) -> str:
        return "/".join([self.base_url, *parts])

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            message = response.json().get("error")
        except (ValueError, AttributeError):
            message = None
        return message or f"HTTP error! status: {response.status_code}"

    async def _request(
        self, method: str, url: str, json: Any = None
    ) -> httpx.Response:
        try:
            async with self._client() as client:
                response = await client.request(method, url, json=json)
        except httpx.HTTPError as e:
            logfire.warn("Post Store unreachable", method=method, url=url, error=str(e))
            raise PostApiError(f"Could not reach the blog API: {e}") from e

        if response.status_code == 404 and method == "GET":
            return response
        if not response.is_success:
            message = self._error_message(response)
            logfire.warn(
                "Post Store request failed",
                method=method,
                url=url,
                status_code=response.status_code,
                error=message,
            )
            raise PostApiError(message, status_code=response.status_code)
        return response

    @staticmethod
    def _parse_post(data: Any) -> Post:
        try:
            return Post.model_validate(data)
        except ValidationError as e:
            raise PostApiError(f"Unexpected post data from the blog API: {e}") from e

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise PostApiError("The blog API returned an invalid response") from e

    async def is_available(self) -> bool:
        """Check once whether the Post Store answers.

        Returns:
            True if the collection endpoint answers successfully
        """
        try:
            async with self._client() as client:
                response = await client.get(self.base_url)
        except httpx.HTTPError as e:
            logfire.info("Post Store not available", url=self.base_url, error=str(e))
            return False
        return response.is_success

    async def list_posts(self) -> list[Post]:
        with logfire.span("remote_backend.list_posts"):
            response = await self._request("GET", self.base_url)
            if response.status_code == 404:
                raise PostApiError("HTTP error! status: 404", status_code=404)
            data = self._json(response)
            if not isinstance(data, list):
                raise PostApiError("The blog API returned an invalid response")
            return [self._parse_post(item) for item in data]

    async def get_post_by_slug(self, slug: str) -> Optional[Post]:
        with logfire.span("remote_backend.get_post_by_slug", slug=slug):
            response = await self._request("GET", self._url(slug))
            if response.status_code == 404:
                return None
            return self._parse_post(self._json(response))

    async def create_post(self, draft: PostDraft) -> Post:
        with logfire.span("remote_backend.create_post", title=draft.title):
            response = await self._request(
                "POST", self.base_url, json=draft.model_dump(mode="json")
            )
            return self._parse_post(self._json(response))

    async def update_post(self, post_id: PostId, changes: PostChanges) -> Post:
        with logfire.span("remote_backend.update_post", post_id=post_id):
            response = await self._request(
                "PUT",
                self._url(post_id),
                json=changes.model_dump(mode="json", exclude_unset=True),
            )
            return self._parse_post(self._json(response))

    async def delete_post(self, post_id: PostId) -> None:
        with logfire.span("remote_backend.delete_post", post_id=post_id):
            await self._request("DELETE", self._url(post_id))
