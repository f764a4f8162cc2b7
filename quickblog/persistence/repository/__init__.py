"""Repository implementations."""

from .post import BlobPostRepository

__all__ = [
    "BlobPostRepository",
]
