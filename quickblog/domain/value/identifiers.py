"""Identifiers for QuickBlog domain entities.

Post ids are opaque strings: a base-36 millisecond timestamp followed by a
random base-36 suffix, so ids sort roughly by creation time and collide
only if two posts land in the same millisecond with the same suffix.
"""

import secrets
import time
from typing import NewType

PostId = NewType("PostId", str)

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_ALPHABET[remainder])
    return "".join(reversed(digits))


def new_post_id(prefix: str = "") -> PostId:
    """Generate a fresh post id.

    Args:
        prefix: Optional marker prepended to the id (e.g. "local-")

    Returns:
        New PostId
    """
    timestamp = _to_base36(time.time_ns() // 1_000_000)
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(11))
    return PostId(f"{prefix}{timestamp}{suffix}")
