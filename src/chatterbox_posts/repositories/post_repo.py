"""Data access helpers for working with posts."""
from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from typing import TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from chatterbox_posts.core.exceptions import NotFoundError, PersistenceError
from chatterbox_posts.db.time import utcnow
from chatterbox_posts.models import Post

__all__ = ["PostRepository"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PostRepository:
    """Thin wrapper around database access for post entities.

    Store failures surface as ``PersistenceError`` after the session is rolled
    back; lookups of a missing identifier raise ``NotFoundError``.
    """

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def _run(self, operation: str, work: Callable[[], T]) -> T:
        try:
            return work()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("Post store %s failed: %s", operation, exc)
            raise PersistenceError(f"Post store unavailable during {operation}") from exc

    def _get(self, post_id: str) -> Post:
        post = self.session.get(Post, post_id)
        if post is None:
            raise NotFoundError(f"Post not found with id: {post_id}")
        return post

    def insert(self, *, username: str, content: str) -> Post:
        """Insert a new post under a freshly assigned identifier.

        Returns:
            The persisted post, carrying its ``post_id``.
        """

        def work() -> Post:
            now = utcnow()
            post = Post(
                post_id=uuid.uuid4().hex,
                username=username,
                content=content,
                created_at=now,
                updated_at=now,
            )
            self.session.add(post)
            self.session.commit()
            self.session.refresh(post)
            return post

        return self._run("insert", work)

    def update(self, post_id: str, *, content: str) -> Post:
        """Replace the content of an existing post.

        The author and creation time of the stored post are kept.
        """

        def work() -> Post:
            post = self._get(post_id)
            post.content = content
            post.updated_at = utcnow()
            self.session.commit()
            self.session.refresh(post)
            return post

        return self._run("update", work)

    def find_by_id(self, post_id: str) -> Post:
        """Return a post by identifier."""
        return self._run("find_by_id", lambda: self._get(post_id))

    def find_by_username(self, username: str) -> list[Post]:
        """Return every post written by ``username``, oldest first."""
        stmt = (
            select(Post)
            .where(Post.username == username)
            .order_by(Post.created_at, Post.post_id)
        )
        return self._run("find_by_username", lambda: list(self.session.scalars(stmt)))

    def find_all(self) -> list[Post]:
        """Return all stored posts, oldest first."""
        stmt = select(Post).order_by(Post.created_at, Post.post_id)
        return self._run("find_all", lambda: list(self.session.scalars(stmt)))

    def delete_by_id(self, post_id: str) -> None:
        """Delete a single post."""

        def work() -> None:
            post = self._get(post_id)
            self.session.delete(post)
            self.session.commit()

        self._run("delete_by_id", work)

    def delete_by_username(self, username: str) -> int:
        """Delete every post written by ``username``.

        Returns:
            Number of posts removed, possibly zero.
        """

        def work() -> int:
            result = self.session.execute(delete(Post).where(Post.username == username))
            self.session.commit()
            return result.rowcount or 0

        return self._run("delete_by_username", work)

    def delete_all(self) -> int:
        """Delete every stored post and return how many were removed."""

        def work() -> int:
            result = self.session.execute(delete(Post))
            self.session.commit()
            return result.rowcount or 0

        return self._run("delete_all", work)
