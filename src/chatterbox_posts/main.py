# src/chatterbox_posts/main.py
"""Main entry point for the Chatterbox post service."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from chatterbox_posts.api.errors import register_exception_handlers
from chatterbox_posts.api.posts import router as posts_router
from chatterbox_posts.core.logging import configure_logging
from chatterbox_posts.core.settings import settings
from chatterbox_posts.db.session import create_tables
from chatterbox_posts.services.events import get_event_publisher

configure_logging(settings.log_level, json_output=settings.log_json)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Chatterbox Post Service",
    description="CRUD for posts with post-created events on Kafka",
    version=settings.app_version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add GZip middleware for compression
app.add_middleware(GZipMiddleware)

register_exception_handlers(app)
app.include_router(posts_router)


@app.on_event("startup")
async def on_startup() -> None:
    if settings.auto_create_tables:
        create_tables()
    publisher = get_event_publisher()
    logger.info(
        "%s %s started (events %s, topic %s)",
        settings.app_name,
        settings.app_version,
        "enabled" if publisher.enabled else "disabled",
        publisher.config.topic,
    )


@app.on_event("shutdown")
async def on_shutdown() -> None:
    get_event_publisher().close()


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the service is running."""
    return {"status": "ok"}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint with basic information about the API."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "CRUD for posts with post-created events on Kafka",
        "docs": "/docs",
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "chatterbox_posts.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
