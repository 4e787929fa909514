# src/chatterbox_posts/api/posts.py
"""Post endpoints for the Chatterbox post service.

Routes are registered explicitly; the catch-all fallback is registered last so
that it only answers paths and methods no other route claims.
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from chatterbox_posts.api.dependencies import EventPublisherDep, PostServiceDep
from chatterbox_posts.core.exceptions import PublishError, RouteNotFoundError
from chatterbox_posts.models import Post
from chatterbox_posts.schemas.post import PostPayload, PostResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/posts", tags=["posts"])

FALLBACK_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    payload: PostPayload,
    service: PostServiceDep,
    publisher: EventPublisherDep,
) -> Post:
    """Create a post, then announce it on the message bus.

    The event is published only once the post is stored. A failed publish is
    logged and does not change the response.
    """
    logger.info("Creating post for username: %s", payload.username)
    post = service.create_post(payload)

    if publisher.enabled:
        try:
            publisher.publish_post_created(post)
        except PublishError as exc:
            logger.warning(
                "Post %s by %s was stored but its creation event was not published: %s",
                post.post_id,
                post.username,
                exc,
                exc_info=True,
            )

    return post


@router.put("/{post_id}", response_class=PlainTextResponse)
def update_post(post_id: str, payload: PostPayload, service: PostServiceDep) -> str:
    """Replace the content of an existing post."""
    logger.info("Updating post with id: %s", post_id)
    post = service.update_post(post_id, payload)
    return f"Post updated successfully: {post.post_id}"


@router.get("/user/{username}", response_model=list[PostResponse])
def get_posts_by_username(username: str, service: PostServiceDep) -> list[Post]:
    logger.info("Fetching posts for username: %s", username)
    return service.get_posts_by_username(username)


@router.get("/{post_id}", response_model=PostResponse)
def get_post_by_id(post_id: str, service: PostServiceDep) -> Post:
    logger.info("Fetching post by id: %s", post_id)
    return service.get_post_by_post_id(post_id)


@router.get("", response_model=list[PostResponse])
def get_all_posts(service: PostServiceDep) -> list[Post]:
    logger.info("Fetching all posts")
    return service.get_all_posts()


@router.delete("/user/{username}", response_class=PlainTextResponse)
def delete_posts_by_username(username: str, service: PostServiceDep) -> str:
    logger.info("Deleting all posts by username: %s", username)
    return service.delete_post_by_username(username)


@router.delete("/{post_id}", response_class=PlainTextResponse)
def delete_post_by_id(post_id: str, service: PostServiceDep) -> str:
    logger.info("Deleting post with id: %s", post_id)
    return service.delete_post_by_post_id(post_id)


@router.delete("", response_class=PlainTextResponse)
def delete_all_posts(service: PostServiceDep) -> str:
    logger.warning("Deleting all posts from the system")
    return service.delete_all_posts()


@router.api_route("", methods=FALLBACK_METHODS, include_in_schema=False)
@router.api_route("/{invalid_path:path}", methods=FALLBACK_METHODS, include_in_schema=False)
def handle_invalid_path(invalid_path: str = "") -> None:
    """Fallback for any unsupported route under /api/posts."""
    logger.warning("Invalid endpoint hit under /api/posts: /%s", invalid_path)
    raise RouteNotFoundError("The requested endpoint is not valid. Please check the URL.")
