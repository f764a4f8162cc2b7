"""Local (on-device) post storage adapter."""

from .backend import LocalPostBackend
from .store import LocalPostStore

__all__ = ["LocalPostBackend", "LocalPostStore"]
