"""Listing filters and sort orders.

Everything here is pure: the listing view already holds the full post list
in memory and narrows it down with ``apply_filters``.
"""

import calendar
from datetime import datetime, timedelta
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field

from quickblog.domain.model.post import Post
from quickblog.domain.value import DateRange, SortOption, StatusFilter


class FilterCriteria(BaseModel):
    """What the reader asked the listing to show."""

    model_config = ConfigDict(frozen=True)

    search_term: str = ""
    selected_tags: tuple[str, ...] = Field(default_factory=tuple)
    date_range: DateRange = DateRange.ALL
    sort_by: SortOption = SortOption.NEWEST
    status: StatusFilter = StatusFilter.ALL


def _months_back(moment: datetime, months: int) -> datetime:
    # Same day-of-month, clamped to the length of the target month
    year, month_index = divmod(moment.year * 12 + moment.month - 1 - months, 12)
    month = month_index + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def date_cutoff(date_range: DateRange, now: datetime) -> Optional[datetime]:
    """Earliest creation time a post may have to fall in the range.

    Args:
        date_range: Selected range
        now: Reference time (its timezone defines "today"; naive means local)

    Returns:
        Cutoff instant, or None for ``DateRange.ALL``
    """
    if now.tzinfo is None:
        now = now.astimezone()
    if date_range == DateRange.TODAY:
        return now.replace(hour=0, minute=0, second=0, microsecond=0)
    if date_range == DateRange.WEEK:
        return now - timedelta(days=7)
    if date_range == DateRange.MONTH:
        return _months_back(now, 1)
    if date_range == DateRange.YEAR:
        return _months_back(now, 12)
    return None


def _matches_search(post: Post, term: str) -> bool:
    return (
        term in post.title.lower()
        or term in post.content.lower()
        or (post.excerpt is not None and term in post.excerpt.lower())
        or any(term in tag.lower() for tag in post.tags)
    )


def sort_posts(posts: Iterable[Post], sort_by: SortOption) -> list[Post]:
    """Order posts by the chosen sort option (stable for ties)."""
    if sort_by == SortOption.OLDEST:
        return sorted(posts, key=lambda p: p.created_at)
    if sort_by == SortOption.ALPHABETICAL:
        return sorted(posts, key=lambda p: p.title.casefold())
    if sort_by == SortOption.POPULAR:
        # No engagement data yet; tag count is the stand-in
        return sorted(posts, key=lambda p: len(p.tags), reverse=True)
    return sorted(posts, key=lambda p: p.created_at, reverse=True)


def apply_filters(
    posts: Iterable[Post],
    criteria: FilterCriteria,
    now: Optional[datetime] = None,
) -> list[Post]:
    """Filter and sort a post list for display.

    Steps, in order: free-text search, tag match (any selected tag), status,
    creation-date range, then sort.

    Args:
        posts: Full post list
        criteria: Reader's filter selection
        now: Reference time for date ranges (defaults to local now)

    Returns:
        New list with the matching posts in display order
    """
    filtered = list(posts)

    if criteria.search_term:
        term = criteria.search_term.lower()
        filtered = [p for p in filtered if _matches_search(p, term)]

    if criteria.selected_tags:
        wanted = set(criteria.selected_tags)
        filtered = [p for p in filtered if wanted.intersection(p.tags)]

    if criteria.status != StatusFilter.ALL:
        filtered = [p for p in filtered if p.status.value == criteria.status.value]

    if criteria.date_range != DateRange.ALL:
        cutoff = date_cutoff(criteria.date_range, now or datetime.now())
        filtered = [p for p in filtered if p.created_at >= cutoff]

    return sort_posts(filtered, criteria.sort_by)


def collect_tags(posts: Iterable[Post], limit: int = 20) -> dict[str, int]:
    """Tags available for filtering, with how many posts carry each.

    Args:
        posts: Post list the tags are drawn from
        limit: Maximum number of tags returned

    Returns:
        Mapping of tag -> post count, alphabetically ordered
    """
    posts = list(posts)
    tags = sorted({tag for post in posts for tag in post.tags})[:limit]
    return {tag: sum(1 for post in posts if tag in post.tags) for tag in tags}
