"""Business operations on posts.

The service validates writes and delegates storage to the repository. It
never talks to the message bus: the caller publishes the creation event only
after ``create_post`` has returned the persisted post.
"""
from __future__ import annotations

from chatterbox_posts.models import Post
from chatterbox_posts.repositories.post_repo import PostRepository
from chatterbox_posts.schemas.post import PostPayload
from chatterbox_posts.services.validation import ContentBounds, validate_post


class PostService:
    """Create, read, update and delete posts."""

    def __init__(self, repo: PostRepository, bounds: ContentBounds) -> None:
        self.repo = repo
        self.bounds = bounds

    def create_post(self, payload: PostPayload) -> Post:
        """Validate and persist a new post.

        Any identifier in the payload is ignored; the repository assigns one.

        Returns:
            The persisted post.

        Raises:
            ValidationError: If the payload breaks a content rule. Nothing is
                written in that case.
            PersistenceError: If the store rejects the write.
        """
        validate_post(payload, self.bounds)
        return self.repo.insert(username=payload.username, content=payload.content)

    def update_post(self, post_id: str, payload: PostPayload) -> Post:
        """Validate and apply new content to an existing post.

        ``post_id`` overrides any identifier carried in the payload.

        Raises:
            ValidationError: If the payload breaks a content rule.
            NotFoundError: If no post has that identifier.
        """
        payload.post_id = post_id
        validate_post(payload, self.bounds)
        return self.repo.update(post_id, content=payload.content)

    def get_posts_by_username(self, username: str) -> list[Post]:
        """Return the user's posts; an empty list if there are none."""
        return self.repo.find_by_username(username)

    def get_post_by_post_id(self, post_id: str) -> Post:
        return self.repo.find_by_id(post_id)

    def get_all_posts(self) -> list[Post]:
        return self.repo.find_all()

    def delete_post_by_post_id(self, post_id: str) -> str:
        self.repo.delete_by_id(post_id)
        return f"Post deleted successfully: {post_id}"

    def delete_post_by_username(self, username: str) -> str:
        deleted = self.repo.delete_by_username(username)
        return f"Deleted {deleted} post(s) for user: {username}"

    def delete_all_posts(self) -> str:
        deleted = self.repo.delete_all()
        return f"Deleted all posts ({deleted})"
