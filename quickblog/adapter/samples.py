"""Built-in sample posts.

Shown when neither the Post Store nor local storage has anything, so the
listing is never empty.
"""

from datetime import datetime, timedelta
from typing import Optional

from quickblog.domain.model.common import utcnow
from quickblog.domain.model.post import Post
from quickblog.domain.value import PostId, PostStatus

_WELCOME = """# Welcome to QuickBlog!

Your blog is running. Posts are kept by the QuickBlog API, which stores each
post as a small JSON document keyed by its id.

## Getting Started

1. **Create Posts**: Use the Create Post button to add new content
2. **Edit Content**: Click edit on any post to make changes
3. **Manage Drafts**: Save drafts before publishing

Working offline? Posts are saved on this device until the API is back."""

_HOW_IT_WORKS = """# How QuickBlog Stores Your Posts

## Architecture

- **API**: a small HTTP service with list, read, create, update and delete
- **Storage**: one JSON document per post, keyed by post id
- **Offline mode**: posts are written to a local file on this device

## Good to know

- Slugs are derived from titles and change when the title changes
- Excerpts are generated from the content when you leave them empty
- The newest post is always listed first

Start writing and see it for yourself!"""


class SamplePostCatalog:
    """Fixed sample posts, timestamped relative to when the catalog is built."""

    def __init__(self, now: Optional[datetime] = None) -> None:
        now = now or utcnow()
        day_ago = now - timedelta(days=1)
        self._posts = [
            Post(
                id=PostId("sample-1"),
                title="Welcome to QuickBlog",
                slug="welcome-to-quickblog",
                content=_WELCOME,
                excerpt="Welcome to your new QuickBlog, with posts stored by a tiny JSON API.",
                tags=["welcome", "quickblog", "blog"],
                status=PostStatus.PUBLISHED,
                created_at=now,
                updated_at=now,
            ),
            Post(
                id=PostId("sample-2"),
                title="How QuickBlog Stores Your Posts",
                slug="how-quickblog-stores-your-posts",
                content=_HOW_IT_WORKS,
                excerpt="A quick look at the API, the storage, and offline mode behind your blog.",
                tags=["quickblog", "storage", "architecture"],
                status=PostStatus.PUBLISHED,
                created_at=day_ago,
                updated_at=day_ago,
            ),
        ]

    def list_posts(self) -> list[Post]:
        """Sample posts, newest first."""
        return list(self._posts)

    def get_by_slug(self, slug: str) -> Optional[Post]:
        return next((p for p in self._posts if p.slug == slug), None)
