"""Message bus event schemas.

Consumers read these from the post events topic, so field names are the
camelCase wire names and every event carries its type and version.
"""

from __future__ import annotations

import uuid
from typing import Literal

from pydantic import BaseModel, Field

from chatterbox_posts.db.time import isoformat_utc
from chatterbox_posts.models import Post


class PostCreatedEvent(BaseModel):
    """Announcement that a post was persisted."""

    eventId: str = Field(default_factory=lambda: uuid.uuid4().hex)
    eventType: Literal["PostCreated"] = "PostCreated"
    eventVersion: int = 1
    timestamp: str = Field(default_factory=isoformat_utc)

    postId: str
    username: str
    content: str
    createdAt: str | None = None

    @classmethod
    def from_post(cls, post: Post) -> PostCreatedEvent:
        """Build the event for a persisted post."""
        return cls(
            postId=post.post_id,
            username=post.username,
            content=post.content,
            createdAt=isoformat_utc(post.created_at) if post.created_at else None,
        )
