"""On-device fallback store for posts.

A single JSON file holding a list of post records, used when the remote
Post Store is unavailable. The store never raises for storage problems:
unreadable or unwritable files are logged and treated as "no data".
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import logfire
from pydantic import ValidationError

from quickblog.domain.model.post import Post
from quickblog.domain.value import PostId


class LocalPostStore:
    """JSON-file post storage that persists until explicitly cleared."""

    def __init__(self, path: Path) -> None:
        """Initialize local store.

        Args:
            path: JSON file backing the store (created on first write)
        """
        self.path = Path(path)

    def _read(self) -> list[Post]:
        if not self.path.exists():
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logfire.warn(
                "Failed to load posts from local storage",
                path=str(self.path),
                error=str(e),
            )
            return []

        if not isinstance(raw, list):
            logfire.warn("Local storage does not hold a post list", path=str(self.path))
            return []

        posts = []
        for item in raw:
            try:
                posts.append(Post.model_validate(item))
            except ValidationError as e:
                logfire.warn(
                    "Skipping unreadable post in local storage",
                    path=str(self.path),
                    error_count=e.error_count(),
                )
        return posts

    def _write(self, posts: list[Post]) -> bool:
        payload = json.dumps([post.model_dump(mode="json") for post in posts], indent=2)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload, encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as e:
            logfire.warn(
                "Failed to write posts to local storage",
                path=str(self.path),
                error=str(e),
            )
            return False
        return True

    def list_posts(self) -> list[Post]:
        """Return all stored posts in storage order."""
        return self._read()

    def save(self, post: Post) -> bool:
        """Insert or replace a post.

        Returns:
            True if the post was written
        """
        posts = [p for p in self._read() if p.id != post.id]
        posts.append(post)
        return self._write(posts)

    def get_by_id(self, post_id: PostId) -> Optional[Post]:
        return next((p for p in self._read() if p.id == post_id), None)

    def get_by_slug(self, slug: str) -> Optional[Post]:
        return next((p for p in self._read() if p.slug == slug), None)

    def update(
        self, post_id: PostId, changes: dict[str, Any], now: datetime
    ) -> Optional[Post]:
        """Apply changes to a stored post.

        Returns:
            The updated post, or None if the post is unknown or could not
            be written
        """
        posts = self._read()
        for index, post in enumerate(posts):
            if post.id == post_id:
                posts[index] = post.apply_changes(changes, now=now)
                return posts[index] if self._write(posts) else None
        return None

    def delete(self, post_id: PostId) -> bool:
        """Remove a post.

        Returns:
            True if the post existed and the removal was written
        """
        posts = self._read()
        remaining = [p for p in posts if p.id != post_id]
        if len(remaining) == len(posts):
            return False
        return self._write(remaining)

    def clear(self) -> None:
        """Remove every stored post."""
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            logfire.warn(
                "Failed to clear local storage", path=str(self.path), error=str(e)
            )
