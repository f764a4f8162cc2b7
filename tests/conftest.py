"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import logfire

from quickblog.domain.model import Post
from quickblog.domain.text import generate_excerpt, generate_slug
from quickblog.domain.value import PostId, PostStatus, new_post_id

LONG_CONTENT = (
    "This post has enough content to pass the form rules, which ask for fifty "
    "characters or more."
)

BASE_TIME = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)

# Keep spans local; nothing is sent or printed during tests
logfire.configure(send_to_logfire=False, console=False)


def make_post(
    title: str = "Test Post",
    content: str = LONG_CONTENT,
    tags: Optional[list[str]] = None,
    status: PostStatus = PostStatus.PUBLISHED,
    created_at: Optional[datetime] = None,
    post_id: Optional[str] = None,
    excerpt: Optional[str] = None,
) -> Post:
    """Helper function to build a stored post for tests.

    Derives slug and excerpt the way the Post Store does.

    Args:
        title: Post title
        content: Post content
        tags: Post tags
        status: Publication status
        created_at: Creation time (also used as updated_at)
        post_id: Post id (fresh one if omitted)
        excerpt: Excerpt (derived from content if omitted)

    Returns:
        Post
    """
    created = created_at or BASE_TIME
    return Post(
        id=PostId(post_id) if post_id else new_post_id(),
        title=title,
        slug=generate_slug(title),
        content=content,
        excerpt=excerpt if excerpt is not None else generate_excerpt(content),
        tags=tags or [],
        status=status,
        created_at=created,
        updated_at=created,
    )


def days_after_base(days: float) -> datetime:
    """BASE_TIME shifted by a number of days."""
    return BASE_TIME + timedelta(days=days)
