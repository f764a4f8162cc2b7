"""Delete post use case."""

from pydantic import BaseModel

from quickblog.domain.error import NotFoundError
from quickblog.domain.service import PostService
from quickblog.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str


class DeletePostResponse(BaseModel):
    """Delete post response."""

    message: str = "Post deleted successfully"


class DeletePostUseCase:
    """Use case for deleting a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Delete the post.

        Raises:
            NotFoundError: If the post does not exist
        """
        post_id = PostId(request.post_id)
        if not await self.post_service.delete_post(post_id):
            raise NotFoundError("Post", post_id)
        return DeletePostResponse()
