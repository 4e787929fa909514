"""Error kinds raised by the post service layers.

Each error carries the HTTP status the API layer answers with, so handlers in
``chatterbox_posts.api.errors`` never need to branch on the exception type.
"""

from __future__ import annotations

from fastapi import status


class PostServiceError(Exception):
    """Base exception for all post service failures."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PostServiceError):
    """Raised when a candidate post breaks a content or required-field rule."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


class NotFoundError(PostServiceError):
    """Raised when no post exists for the requested identifier."""

    status_code = status.HTTP_404_NOT_FOUND


class PersistenceError(PostServiceError):
    """Raised when the document store is unavailable or rejects a write."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class PublishError(PostServiceError):
    """Raised when a post event could not be handed to the message bus."""

    status_code = status.HTTP_502_BAD_GATEWAY


class RouteNotFoundError(PostServiceError):
    """Raised for unrouted paths under the posts base path."""

    status_code = status.HTTP_404_NOT_FOUND
