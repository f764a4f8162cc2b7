"""Post routes.

Mounted under the configured API prefix (``/blog-api`` by default). Errors
are raised as HTTPException and rendered as ``{"error": ...}`` by the app's
error handlers.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import ValidationError as ModelValidationError

from quickblog.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from quickblog.domain.error import NotFoundError, ValidationError
from quickblog.domain.model import Post, PostChanges, PostDraft
from quickblog.interface.error import first_error_message

router = APIRouter(tags=["posts"], route_class=DishkaRoute)

POST_NOT_FOUND = "Post not found"


class CreatePostAPIRequest(PostDraft):
    """API request for creating a post.

    Title and content default to empty so that a missing field is reported
    as "Title and content are required" rather than a schema error.
    """


class UpdatePostAPIRequest(PostChanges):
    """API request for updating a post.

    Unknown keys (``id``, ``slug``, ``created_at``...) are ignored.
    """


@router.get("", response_model=list[Post])
async def list_posts(list_posts_use_case: FromDishka[ListPostsUseCase]) -> list[Post]:
    """List all posts, newest first."""
    try:
        return await list_posts_use_case.execute()
    except Exception as e:
        logfire.error("Unexpected error listing posts", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch posts",
        )


@router.get("/{slug}", response_model=Post)
async def get_post(slug: str, get_post_use_case: FromDishka[GetPostUseCase]) -> Post:
    """Get a post by slug.

    Raises:
        HTTPException: 404 if no post has this slug
    """
    try:
        post = await get_post_use_case.execute(GetPostRequest(slug=slug))
    except Exception as e:
        logfire.error("Unexpected error fetching post", slug=slug, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch post",
        )

    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_FOUND)
    return post


@router.post("", response_model=Post, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> Post:
    """Create a new post.

    Args:
        request: Post fields; title and content are required
        create_post_use_case: Create post use case from DI

    Returns:
        The stored post, with id, slug, excerpt and timestamps filled in

    Raises:
        HTTPException: 400 if title or content is missing
    """
    try:
        return await create_post_use_case.execute(
            CreatePostRequest(**request.model_dump())
        )
    except ValidationError as e:
        logfire.warn("Post creation validation error", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ModelValidationError as e:
        message = first_error_message(e.errors())
        logfire.warn("Post creation rejected", error=message)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
    except ValueError as e:
        logfire.warn("Post creation rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error creating post", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create post",
        )


@router.put("/{post_id}", response_model=Post)
async def update_post(
    post_id: str,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> Post:
    """Partially update a post.

    Args:
        post_id: Post ID
        request: Fields to change; omitted fields keep their value
        update_post_use_case: Update post use case from DI

    Returns:
        The merged post

    Raises:
        HTTPException: 404 if the post does not exist, 400 if a value is invalid
    """
    try:
        changes = PostChanges.model_validate(request.model_dump(exclude_unset=True))
        return await update_post_use_case.execute(
            UpdatePostRequest(post_id=post_id, changes=changes)
        )
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_FOUND)
    except ModelValidationError as e:
        message = first_error_message(e.errors())
        logfire.warn("Post update rejected", post_id=post_id, error=message)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
    except ValueError as e:
        logfire.warn("Post update rejected", post_id=post_id, error=str(e))
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error updating post", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update post",
        )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> DeletePostResponse:
    """Delete a post.

    Raises:
        HTTPException: 404 if the post does not exist
    """
    try:
        return await delete_post_use_case.execute(DeletePostRequest(post_id=post_id))
    except NotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_FOUND)
    except Exception as e:
        logfire.error("Unexpected error deleting post", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete post",
        )
