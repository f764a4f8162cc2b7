"""Client-side post repository.

The facade the editing and reading views talk to. Reads degrade to the
local store when the primary backend fails; writes are validated against
the form rules before any request goes out.
"""

from typing import Any, Optional

import logfire

from quickblog.adapter.error import PostApiError
from quickblog.adapter.local import LocalPostStore
from quickblog.domain import text
from quickblog.domain.error import DraftValidationError
from quickblog.domain.model.post import Post, PostChanges, PostDraft
from quickblog.domain.repository import PostBackend
from quickblog.domain.service import validate_draft
from quickblog.domain.value import PostId


class ClientPostRepository:
    """Post access for the client, over one primary backend."""

    def __init__(self, backend: PostBackend, local_store: LocalPostStore) -> None:
        """Initialize client repository.

        Args:
            backend: Primary backend, chosen once at startup
            local_store: On-device store read when the backend fails
        """
        self.backend = backend
        self.local_store = local_store

    async def get_all_posts(self) -> list[Post]:
        """All posts, newest first. Never raises."""
        with logfire.span("client_repository.get_all_posts", backend=self.backend.name):
            try:
                return await self.backend.list_posts()
            except PostApiError as e:
                logfire.warn("Falling back to local posts", error=str(e))
                posts = self.local_store.list_posts()
                posts.sort(key=lambda p: p.created_at, reverse=True)
                return posts

    async def get_post_by_slug(self, slug: str) -> Optional[Post]:
        """Find a post by slug, trying the local store when the backend misses."""
        with logfire.span("client_repository.get_post_by_slug", slug=slug):
            try:
                post = await self.backend.get_post_by_slug(slug)
            except PostApiError as e:
                logfire.warn("Falling back to local post", slug=slug, error=str(e))
                post = None
            return post or self.local_store.get_by_slug(slug)

    @staticmethod
    def _check(fields: dict[str, Any], partial: bool = False) -> None:
        errors = validate_draft(fields, partial=partial)
        if errors:
            raise DraftValidationError(errors)

    async def create_post(self, draft: PostDraft) -> Post:
        """Create a post.

        Raises:
            DraftValidationError: If the draft breaks the form rules
            PostApiError: If the backend rejects or cannot take the write
        """
        self._check(draft.model_dump())
        with logfire.span("client_repository.create_post", backend=self.backend.name):
            return await self.backend.create_post(draft)

    async def update_post(self, post_id: PostId, changes: PostChanges) -> Post:
        """Apply a partial update; only the supplied fields are validated.

        Raises:
            DraftValidationError: If a supplied field breaks the form rules
            PostApiError: If the backend rejects or cannot take the write
        """
        self._check(changes.model_dump(exclude_unset=True), partial=True)
        with logfire.span(
            "client_repository.update_post", post_id=post_id, backend=self.backend.name
        ):
            return await self.backend.update_post(post_id, changes)

    async def delete_post(self, post_id: PostId) -> None:
        """Delete a post.

        Raises:
            PostApiError: If the backend rejects or cannot take the delete
        """
        with logfire.span(
            "client_repository.delete_post", post_id=post_id, backend=self.backend.name
        ):
            await self.backend.delete_post(post_id)

    def generate_slug(self, title: str) -> str:
        return text.generate_slug(title)

    def generate_excerpt(self, content: str, max_length: int = text.EXCERPT_LENGTH) -> str:
        return text.generate_excerpt(content, max_length=max_length)
