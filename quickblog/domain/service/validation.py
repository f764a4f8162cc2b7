"""Form rules for post drafts.

These run on the client before any request is made. The store itself only
checks that title and content are present.
"""

from typing import Any

from quickblog.domain.model.post import MAX_TAGS

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 200
CONTENT_MIN_LENGTH = 50
EXCERPT_MAX_LENGTH = 300


def validate_draft(fields: dict[str, Any], partial: bool = False) -> dict[str, str]:
    """Check draft fields against the editing form rules.

    Args:
        fields: Draft fields (title, content, excerpt, tags)
        partial: Only check the fields present (for updates)

    Returns:
        Mapping of field name -> error message; empty when valid
    """
    errors: dict[str, str] = {}

    if not partial or "title" in fields:
        title = fields.get("title") or ""
        if not title.strip():
            errors["title"] = "Title is required"
        elif len(title) < TITLE_MIN_LENGTH:
            errors["title"] = f"Title must be at least {TITLE_MIN_LENGTH} characters"
        elif len(title) > TITLE_MAX_LENGTH:
            errors["title"] = f"Title must be less than {TITLE_MAX_LENGTH} characters"

    if not partial or "content" in fields:
        content = fields.get("content") or ""
        if not content.strip():
            errors["content"] = "Content is required"
        elif len(content) < CONTENT_MIN_LENGTH:
            errors["content"] = (
                f"Content must be at least {CONTENT_MIN_LENGTH} characters"
            )

    excerpt = fields.get("excerpt")
    if excerpt and len(excerpt) > EXCERPT_MAX_LENGTH:
        errors["excerpt"] = f"Excerpt must be less than {EXCERPT_MAX_LENGTH} characters"

    tags = fields.get("tags") or []
    if len(tags) > MAX_TAGS:
        errors["tags"] = f"A post can have at most {MAX_TAGS} tags"
    elif len(set(tags)) != len(tags):
        errors["tags"] = "Tags must be unique"

    return errors
