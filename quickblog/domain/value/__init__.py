"""Domain value objects for QuickBlog."""

from quickblog.domain.value.identifiers import PostId, new_post_id
from quickblog.domain.value.types import (
    DateRange,
    PostStatus,
    SortOption,
    StatusFilter,
)

__all__ = [
    # Identifiers
    "PostId",
    "new_post_id",
    # Types
    "DateRange",
    "PostStatus",
    "SortOption",
    "StatusFilter",
]
