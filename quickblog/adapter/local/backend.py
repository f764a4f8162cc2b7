"""Offline post backend over the local store."""

from datetime import timedelta
from typing import Optional

import logfire

from quickblog.adapter.local.store import LocalPostStore
from quickblog.domain.error import NotFoundError
from quickblog.domain.model.common import utcnow
from quickblog.domain.model.post import Post, PostChanges, PostDraft
from quickblog.domain.repository import PostBackend
from quickblog.domain.text import generate_excerpt, generate_slug
from quickblog.domain.value import PostId, PostStatus, new_post_id

LOCAL_ID_PREFIX = "local-"


class LocalPostBackend(PostBackend):
    """PostBackend that keeps posts on this device only.

    Records are synthesized here the way the Post Store would build them
    (fresh id, derived slug and excerpt, current timestamps).
    """

    name = "local"

    def __init__(
        self, store: LocalPostStore, synthesize_missing_on_update: bool = True
    ) -> None:
        """Initialize local backend.

        Args:
            store: On-device post store
            synthesize_missing_on_update: Write a best-effort replacement when
                an update targets an unknown id instead of raising NotFoundError
        """
        self.store = store
        self.synthesize_missing_on_update = synthesize_missing_on_update

    async def list_posts(self) -> list[Post]:
        posts = self.store.list_posts()
        posts.sort(key=lambda p: p.created_at, reverse=True)
        return posts

    async def get_post_by_slug(self, slug: str) -> Optional[Post]:
        return self.store.get_by_slug(slug)

    async def create_post(self, draft: PostDraft) -> Post:
        post = Post.create(new_post_id(LOCAL_ID_PREFIX), draft, now=utcnow())
        self.store.save(post)
        logfire.info("Post created in local storage", post_id=post.id, slug=post.slug)
        return post

    async def update_post(self, post_id: PostId, changes: PostChanges) -> Post:
        now = utcnow()
        updated = self.store.update(post_id, changes.as_update(), now=now)
        if updated is not None:
            logfire.info("Post updated in local storage", post_id=post_id)
            return updated

        if not self.synthesize_missing_on_update:
            raise NotFoundError("Post", post_id)

        # The editor holds an id this device never stored; keep it usable
        logfire.warn(
            "Updating unknown post in local storage, writing a replacement",
            post_id=post_id,
        )
        replacement = self._replacement(post_id, changes, now)
        self.store.save(replacement)
        return replacement

    @staticmethod
    def _replacement(post_id: PostId, changes: PostChanges, now) -> Post:
        content = changes.content or "Updated content"
        return Post(
            id=post_id,
            title=changes.title or "Updated Post",
            slug=generate_slug(changes.title) if changes.title else f"updated-{post_id}",
            content=content,
            excerpt=changes.excerpt or generate_excerpt(content),
            tags=changes.tags or [],
            status=changes.status or PostStatus.PUBLISHED,
            created_at=now - timedelta(days=1),
            updated_at=now,
        )

    async def delete_post(self, post_id: PostId) -> None:
        deleted = self.store.delete(post_id)
        logfire.info(
            "Post deleted from local storage" if deleted else "Post to delete not in local storage",
            post_id=post_id,
        )
