"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from quickblog.domain.model.post import Post
from quickblog.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for server-side post persistence. Posts are keyed
    by id only; there is no secondary index, so slug lookups and listings
    scan every stored post.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[Post]:
        """Find the first post with the given slug.

        Args:
            slug: URL slug

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Return every readable post, newest first.

        Entries that cannot be decoded are skipped.
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or overwrite).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post.

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was removed
        """
        pass
