"""Get post use case."""

from typing import Optional

from pydantic import BaseModel

from quickblog.domain.model.post import Post
from quickblog.domain.service import PostService


class GetPostRequest(BaseModel):
    """Get post request."""

    slug: str


class GetPostUseCase:
    """Use case for retrieving a post by slug."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> Optional[Post]:
        """Find the post with the requested slug.

        Returns:
            Post if found, None otherwise
        """
        return await self.post_service.get_post_by_slug(request.slug)
