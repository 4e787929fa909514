"""Content rules applied to posts before they are written."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from chatterbox_posts.core.exceptions import ValidationError


@dataclass(frozen=True)
class ContentBounds:
    """Inclusive length bounds for post content."""

    minimum: int = 5
    maximum: int = 100


class CandidatePost(Protocol):
    username: str | None
    content: str | None


def validate_post(post: CandidatePost, bounds: ContentBounds) -> None:
    """Check required fields and content length of a candidate post.

    Args:
        post: Anything exposing ``username`` and ``content`` attributes.
        bounds: Allowed content length range.

    Raises:
        ValidationError: If a required field is blank or the content length
            falls outside ``bounds``. All problems are reported together.
    """
    errors: list[str] = []

    if not post.username or not post.username.strip():
        errors.append("username must not be blank")

    content = post.content
    if not content:
        errors.append("content must not be empty")
    elif not bounds.minimum <= len(content) <= bounds.maximum:
        errors.append(
            f"content length must be between {bounds.minimum} and {bounds.maximum} "
            f"characters (got {len(content)})"
        )

    if errors:
        raise ValidationError("Post validation failed", errors)
