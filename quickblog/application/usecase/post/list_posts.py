"""List posts use case."""

from quickblog.domain.model.post import Post
from quickblog.domain.service import PostService


class ListPostsUseCase:
    """Use case for listing every post, newest first.

    No pagination: the whole collection is returned.
    """

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self) -> list[Post]:
        return await self.post_service.list_posts()
