"""Domain model entities for QuickBlog."""

from quickblog.domain.model.post import Post, PostChanges, PostDraft

__all__ = [
    "Post",
    "PostChanges",
    "PostDraft",
]
