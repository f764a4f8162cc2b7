"""Listing and reading helpers for the client views."""

from datetime import datetime
from typing import Optional

from quickblog.adapter.samples import SamplePostCatalog
from quickblog.application.client.post_repository import ClientPostRepository
from quickblog.domain.model.post import Post
from quickblog.domain.service import FilterCriteria, apply_filters, collect_tags


class PostBrowser:
    """What the index and post pages show.

    Sample posts stand in whenever there is nothing else to show, so a
    reader never lands on an empty blog.
    """

    def __init__(
        self, repository: ClientPostRepository, catalog: SamplePostCatalog
    ) -> None:
        self.repository = repository
        self.catalog = catalog

    async def _posts(self) -> list[Post]:
        posts = await self.repository.get_all_posts()
        return posts or self.catalog.list_posts()

    async def browse(
        self,
        criteria: Optional[FilterCriteria] = None,
        now: Optional[datetime] = None,
    ) -> list[Post]:
        """Posts for the index page, filtered and sorted.

        Args:
            criteria: Reader's filter selection (defaults to everything, newest first)
            now: Reference time for date ranges

        Returns:
            Posts in display order
        """
        return apply_filters(await self._posts(), criteria or FilterCriteria(), now=now)

    async def available_tags(self, limit: int = 20) -> dict[str, int]:
        """Tags offered in the filter panel, with post counts."""
        return collect_tags(await self._posts(), limit=limit)

    async def find(self, slug: str) -> Optional[Post]:
        """Post for the reading page, falling back to the samples."""
        post = await self.repository.get_post_by_slug(slug)
        return post or self.catalog.get_by_slug(slug)
