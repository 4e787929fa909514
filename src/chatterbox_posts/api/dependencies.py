"""Shared API dependencies for wiring the post service."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from chatterbox_posts.core.settings import settings
from chatterbox_posts.db.session import get_db
from chatterbox_posts.repositories.post_repo import PostRepository
from chatterbox_posts.services.events import PostEventPublisher, get_event_publisher
from chatterbox_posts.services.post_service import PostService

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_post_service(db: SessionDep) -> PostService:
    """Build a post service bound to the request's database session."""
    return PostService(PostRepository(db), settings.content_bounds)


def get_event_publisher_dep() -> PostEventPublisher:
    """Return the shared post event publisher."""
    return get_event_publisher()


PostServiceDep = Annotated[PostService, Depends(get_post_service)]
EventPublisherDep = Annotated[PostEventPublisher, Depends(get_event_publisher_dep)]
