"""Domain value types for QuickBlog."""

from enum import Enum


class PostStatus(str, Enum):
    """Publication status of a post."""

    DRAFT = "draft"
    PUBLISHED = "published"


class StatusFilter(str, Enum):
    """Status restriction applied by the listing filters."""

    ALL = "all"
    PUBLISHED = "published"
    DRAFT = "draft"


class DateRange(str, Enum):
    """How far back the listing reaches, measured from now."""

    ALL = "all"
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class SortOption(str, Enum):
    """Listing sort order."""

    NEWEST = "newest"
    OLDEST = "oldest"
    POPULAR = "popular"  # Tag count stands in for engagement
    ALPHABETICAL = "alphabetical"
