"""Domain services."""

from .filtering import FilterCriteria, apply_filters, collect_tags
from .post_service import PostService
from .validation import validate_draft

__all__ = [
    "FilterCriteria",
    "PostService",
    "apply_filters",
    "collect_tags",
    "validate_draft",
]
