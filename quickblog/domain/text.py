"""Slug and excerpt derivation."""

import re

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")
_MARKUP_TAG = re.compile(r"<[^>]*>")

EXCERPT_LENGTH = 150


def generate_slug(title: str) -> str:
    """Convert a title to a URL-safe slug.

    - Converts to lowercase
    - Replaces each run of non-alphanumeric chars with a single hyphen
    - Strips leading/trailing hyphens

    Slugs are not guaranteed unique.

    Args:
        title: Title to slugify

    Returns:
        Slug string (may be empty if title has no valid chars)
    """
    return _NON_ALPHANUMERIC.sub("-", title.lower()).strip("-")


def strip_markup(content: str) -> str:
    """Remove ``<...>`` tags from content."""
    return _MARKUP_TAG.sub("", content)


def generate_excerpt(content: str, max_length: int = EXCERPT_LENGTH) -> str:
    """Derive a short plain-text summary from post content.

    Args:
        content: Post content, possibly containing markup
        max_length: Maximum number of characters kept before the ellipsis

    Returns:
        The plain text if it fits, otherwise its first ``max_length``
        characters followed by "..."
    """
    plain = strip_markup(content)
    if len(plain) <= max_length:
        return plain
    return plain[:max_length] + "..."
