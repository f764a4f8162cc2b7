"""Unit tests for the listing helper."""

import pytest

from quickblog.adapter.local import LocalPostBackend, LocalPostStore
from quickblog.adapter.samples import SamplePostCatalog
from quickblog.application.client import ClientPostRepository, PostBrowser
from quickblog.domain.service import FilterCriteria
from quickblog.domain.value import SortOption
from tests.conftest import days_after_base, make_post


@pytest.fixture
def store(tmp_path):
    return LocalPostStore(tmp_path / "posts.json")


@pytest.fixture
def browser(store):
    repo = ClientPostRepository(LocalPostBackend(store), store)
    return PostBrowser(repo, SamplePostCatalog())


class TestPostBrowser:
    """Tests for PostBrowser."""

    @pytest.mark.asyncio
    async def test_samples_shown_when_nothing_stored(self, browser):
        posts = await browser.browse()

        assert [p.id for p in posts] == ["sample-1", "sample-2"]

    @pytest.mark.asyncio
    async def test_stored_posts_replace_samples(self, browser, store):
        # Arrange
        a = make_post(title="A", tags=["x"], created_at=days_after_base(1))
        b = make_post(title="B", tags=["y"], created_at=days_after_base(3))
        store.save(a)
        store.save(b)

        # Act
        oldest = await browser.browse(FilterCriteria(sort_by=SortOption.OLDEST))
        tagged = await browser.browse(FilterCriteria(selected_tags=("y",)))

        # Assert
        assert oldest == [a, b]
        assert tagged == [b]

    @pytest.mark.asyncio
    async def test_available_tags(self, browser, store):
        store.save(make_post(tags=["python", "web"]))
        store.save(make_post(tags=["python"]))

        assert await browser.available_tags() == {"python": 2, "web": 1}

    @pytest.mark.asyncio
    async def test_find_falls_back_to_samples(self, browser, store):
        post = make_post(title="Real Post")
        store.save(post)

        assert await browser.find("real-post") == post
        assert (await browser.find("welcome-to-quickblog")).id == "sample-1"
        assert await browser.find("missing") is None
