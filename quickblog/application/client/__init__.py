"""Client-side post access."""

from .browser import PostBrowser
from .post_repository import ClientPostRepository

__all__ = ["ClientPostRepository", "PostBrowser"]
