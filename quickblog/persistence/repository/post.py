"""Blob-backed implementation of Post repository."""

from typing import List, Optional

import logfire
from pydantic import ValidationError

from quickblog.domain.model import Post
from quickblog.domain.repository.post import PostRepository
from quickblog.domain.value import PostId
from quickblog.persistence.blob import BlobStore


class BlobPostRepository(PostRepository):
    """PostRepository storing each post as a JSON blob keyed by id.

    There is no slug index: ``find_by_slug`` and ``find_all`` read every
    blob, which is fine for a single-author blog.
    """

    def __init__(self, store: BlobStore) -> None:
        """Initialize repository with a blob store.

        Args:
            store: Key-value blob store
        """
        self.store = store

    def _decode(self, key: str, raw: Optional[str]) -> Optional[Post]:
        """Decode a stored blob; unreadable entries are logged and skipped."""
        if raw is None:
            return None
        try:
            return Post.model_validate_json(raw)
        except ValidationError as e:
            logfire.warn(
                "Skipping unreadable post blob",
                key=key,
                error_count=e.error_count(),
            )
            return None

    async def _read_all(self) -> List[Post]:
        posts = []
        for key in await self.store.keys():
            post = self._decode(key, await self.store.get(key))
            if post is not None:
                posts.append(post)
        return posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._decode(post_id, await self.store.get(post_id))

    async def find_by_slug(self, slug: str) -> Optional[Post]:
        """Find a post by slug (linear scan)."""
        with logfire.span("post_repository.find_by_slug", slug=slug):
            for post in await self._read_all():
                if post.slug == slug:
                    return post
            return None

    async def find_all(self) -> List[Post]:
        """Return all readable posts, newest first."""
        with logfire.span("post_repository.find_all"):
            posts = await self._read_all()
            posts.sort(key=lambda p: p.created_at, reverse=True)
            return posts

    async def save(self, post: Post) -> Post:
        """Save or overwrite a post."""
        await self.store.set(post.id, post.model_dump_json())
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return await self.store.delete(post_id)
