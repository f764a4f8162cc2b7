"""Update post use case."""

import logfire
from pydantic import BaseModel

from quickblog.domain.error import NotFoundError
from quickblog.domain.model.common import utcnow
from quickblog.domain.model.post import Post, PostChanges
from quickblog.domain.service import PostService
from quickblog.domain.value import PostId


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: str
    changes: PostChanges


class UpdatePostUseCase:
    """Use case for partially updating a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> Post:
        """Execute update post flow.

        Supplied fields overwrite the stored ones, the slug follows a changed
        title, and updated_at is always refreshed. Concurrent updates are
        last-write-wins.

        Args:
            request: Update post request with post ID and changed fields

        Returns:
            Updated post

        Raises:
            NotFoundError: If the post does not exist
        """
        post_id = PostId(request.post_id)
        changes = request.changes.as_update()

        with logfire.span(
            "update_post.execute", post_id=post_id, fields=sorted(changes)
        ):
            post = await self.post_service.get_post_by_id(post_id)
            if post is None:
                raise NotFoundError("Post", post_id)

            updated = post.apply_changes(changes, now=utcnow())
            saved = await self.post_service.save_post(updated)

            logfire.info(
                "Post updated",
                post_id=post_id,
                slug_changed=saved.slug != post.slug,
            )
            return saved
