"""Repository interfaces for QuickBlog."""

from quickblog.domain.repository.backend import PostBackend
from quickblog.domain.repository.post import PostRepository

__all__ = [
    "PostBackend",
    "PostRepository",
]
