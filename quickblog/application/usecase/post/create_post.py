"""Create post use case."""

import logfire

from quickblog.domain.error import ValidationError
from quickblog.domain.model.common import utcnow
from quickblog.domain.model.post import Post, PostDraft
from quickblog.domain.service import PostService
from quickblog.domain.value import new_post_id


class CreatePostRequest(PostDraft):
    """Create post request."""


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> Post:
        """Execute create post flow.

        Steps:
        1. Check title and content are present
        2. Assign a fresh id, derive slug and (if missing) excerpt
        3. Stamp created_at/updated_at and save

        Args:
            request: Create post request

        Returns:
            The stored post

        Raises:
            ValidationError: If title or content is missing
        """
        if not request.title.strip() or not request.content.strip():
            raise ValidationError("Title and content are required")

        with logfire.span("create_post.execute", title=request.title, tags=request.tags):
            post = Post.create(new_post_id(), request, now=utcnow())
            saved = await self.post_service.save_post(post)

            logfire.info("Post created", post_id=saved.id, slug=saved.slug)
            return saved
