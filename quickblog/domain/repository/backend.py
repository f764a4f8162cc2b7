"""Client-side post backend interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quickblog.domain.model.post import Post, PostChanges, PostDraft
from quickblog.domain.value import PostId


class PostBackend(ABC):
    """Where the client post repository reads and writes posts.

    Implementations live in the adapter layer: the remote Post Store over
    HTTP, and the local on-device store used when working offline.
    """

    name: str = "backend"

    @abstractmethod
    async def list_posts(self) -> list[Post]:
        """List all posts, newest first."""
        pass

    @abstractmethod
    async def get_post_by_slug(self, slug: str) -> Optional[Post]:
        """Find a post by slug.

        Returns:
            The post, or None if this backend does not have it
        """
        pass

    @abstractmethod
    async def create_post(self, draft: PostDraft) -> Post:
        """Create a post from a draft and return the stored record."""
        pass

    @abstractmethod
    async def update_post(self, post_id: PostId, changes: PostChanges) -> Post:
        """Apply a partial update and return the stored record."""
        pass

    @abstractmethod
    async def delete_post(self, post_id: PostId) -> None:
        """Delete a post."""
        pass
