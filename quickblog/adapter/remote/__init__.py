"""Remote Post Store adapter."""

from .client import RemotePostBackend

__all__ = ["RemotePostBackend"]
