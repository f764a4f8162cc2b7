"""Post aggregate root.

Posts are the only entity in QuickBlog. A post's slug is always derived from
its title and its excerpt, when not written by hand, from its content.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from quickblog.domain.model.common import DomainModel, ensure_utc
from quickblog.domain.text import generate_excerpt, generate_slug
from quickblog.domain.value import PostId, PostStatus

MAX_TAGS = 10


def _dedupe(tags: list[str]) -> list[str]:
    seen: set[str] = set()
    unique = []
    for tag in tags:
        if tag not in seen:
            seen.add(tag)
            unique.append(tag)
    return unique


class Post(DomainModel):
    """Post aggregate root.

    Length rules on title and content belong to the editing forms (see
    ``validate_draft``); the model only insists they are present.
    """

    id: PostId
    title: str = Field(min_length=1)
    slug: str
    content: str = Field(min_length=1)
    excerpt: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    status: PostStatus = PostStatus.DRAFT
    created_at: datetime
    updated_at: datetime

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        """Drop duplicate tags (first wins) and cap the count."""
        tags = _dedupe(v)
        if len(tags) > MAX_TAGS:
            raise ValueError(f"A post can have at most {MAX_TAGS} tags")
        return tags

    @field_validator("created_at", "updated_at")
    @classmethod
    def normalize_timestamp(cls, v: datetime) -> datetime:
        """Store all timestamps as UTC."""
        return ensure_utc(v)

    @model_validator(mode="after")
    def validate_timestamps(self) -> "Post":
        """A post cannot be updated before it was created."""
        if self.updated_at < self.created_at:
            raise ValueError("updated_at must not be earlier than created_at")
        return self

    @classmethod
    def create(
        cls,
        post_id: PostId,
        draft: "PostDraft",
        now: datetime,
    ) -> "Post":
        """Build a new post from a draft.

        Args:
            post_id: Freshly generated post ID
            draft: Author-supplied fields
            now: Creation time, used for both timestamps

        Returns:
            New Post with derived slug and (if missing) excerpt
        """
        return cls(
            id=post_id,
            title=draft.title,
            slug=generate_slug(draft.title),
            content=draft.content,
            excerpt=draft.excerpt or generate_excerpt(draft.content),
            tags=draft.tags,
            status=draft.status,
            created_at=now,
            updated_at=now,
        )

    def apply_changes(self, changes: dict[str, Any], now: datetime) -> "Post":
        """Shallow-merge changes into a new post.

        The slug is recomputed only when the title actually changes, and
        ``updated_at`` is always refreshed (never before ``created_at``).

        Args:
            changes: Field values to overwrite; omitted fields keep their value
            now: Time of the update

        Returns:
            New, validated Post
        """
        data = self.model_dump()
        data.update(changes)

        new_title = changes.get("title")
        if new_title is not None and new_title != self.title:
            data["slug"] = generate_slug(new_title)
        else:
            data["slug"] = self.slug

        # Identity and creation time never change
        data["id"] = self.id
        data["created_at"] = self.created_at
        data["updated_at"] = max(ensure_utc(now), self.created_at)

        return Post.model_validate(data)


class PostDraft(BaseModel):
    """Fields an author supplies when creating a post."""

    title: str = ""
    content: str = ""
    excerpt: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    status: PostStatus = PostStatus.DRAFT


class PostChanges(BaseModel):
    """Partial update of a post; only fields explicitly set are applied."""

    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    tags: Optional[list[str]] = None
    status: Optional[PostStatus] = None

    def as_update(self) -> dict[str, Any]:
        """Return the explicitly supplied fields.

        An explicit null clears the excerpt; for every other field it is
        ignored since those fields cannot be empty.
        """
        supplied = self.model_dump(exclude_unset=True)
        return {
            key: value
            for key, value in supplied.items()
            if value is not None or key == "excerpt"
        }
