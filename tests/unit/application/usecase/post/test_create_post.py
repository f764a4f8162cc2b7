"""Unit tests for CreatePostUseCase."""

import pytest

from quickblog.application.usecase.post import CreatePostRequest, CreatePostUseCase
from quickblog.domain.error import ValidationError
from quickblog.domain.repository import PostRepository
from quickblog.domain.text import generate_slug
from quickblog.domain.value import PostStatus
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_create_post_derives_fields_and_persists(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        title = "Hello, World! 2024"

        # Act
        post = await use_case.execute(
            CreatePostRequest(title=title, content="<p>Body text</p>", tags=["intro"])
        )

        # Assert
        assert post.slug == generate_slug(title)
        assert post.excerpt == "Body text"
        assert post.status == PostStatus.DRAFT
        assert post.created_at == post.updated_at
        assert await post_repo.find_by_id(post.id) == post

    @pytest.mark.asyncio
    async def test_each_post_gets_a_fresh_id(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        request = CreatePostRequest(title="Same", content="Same")

        # Act
        first = await use_case.execute(request)
        second = await use_case.execute(request)

        # Assert
        assert first.id != second.id
        assert first.slug == second.slug

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "title,content", [("", "Body"), ("Title", ""), ("   ", "Body")]
    )
    async def test_missing_title_or_content_rejected(self, unit_env, title, content):
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        post_repo = await unit_env.get(PostRepository)

        # Act / Assert
        with pytest.raises(ValidationError, match="Title and content are required"):
            await use_case.execute(CreatePostRequest(title=title, content=content))
        assert await post_repo.find_all() == []
