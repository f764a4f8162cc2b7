"""Post domain service."""

import logfire

from quickblog.domain.model.post import Post
from quickblog.domain.repository import PostRepository
from quickblog.domain.value import PostId

from .base import Service


class PostService(Service):
    """Domain service for post persistence operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def save_post(self, post: Post) -> Post:
        """Save a post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.save_post", post_id=post.id, title=post.title
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=saved.id, slug=saved.slug)
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=post_id, title=post.title)
            else:
                logfire.warn("Post not found", post_id=post_id)

            return post

    async def get_post_by_slug(self, slug: str) -> Post | None:
        """Get a post by slug.

        Args:
            slug: Post slug

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_slug", slug=slug):
            post = await self.post_repository.find_by_slug(slug)

            if post:
                logfire.info(
                    "Post found by slug",
                    slug=slug,
                    post_id=post.id,
                    title=post.title,
                )
            else:
                logfire.warn("Post not found by slug", slug=slug)

            return post

    async def list_posts(self) -> list[Post]:
        """List all posts, newest first."""
        with logfire.span("post_service.list_posts"):
            posts = await self.post_repository.find_all()
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def delete_post(self, post_id: PostId) -> bool:
        """Delete a post.

        Args:
            post_id: Post ID

        Returns:
            True if the post existed and was removed
        """
        with logfire.span("post_service.delete_post", post_id=post_id):
            deleted = await self.post_repository.delete(post_id)
            if deleted:
                logfire.info("Post deleted", post_id=post_id)
            else:
                logfire.warn("Post not found for delete", post_id=post_id)
            return deleted
