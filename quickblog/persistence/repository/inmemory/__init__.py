"""In-memory storage implementations for testing."""

from .blob import InMemoryBlobStore

__all__ = [
    "InMemoryBlobStore",
]
