# src/chatterbox_posts/models/post.py
"""SQLAlchemy model for posts."""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from chatterbox_posts.db.session import Base
from chatterbox_posts.db.time import utcnow


class Post(Base):
    """A single user-authored post.

    The identifier is assigned by the repository on insert and never changes.
    The author is looked up through the ``username`` index.
    """

    __tablename__ = "post"

    post_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
