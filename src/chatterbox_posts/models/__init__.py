# src/chatterbox_posts/models/__init__.py
"""SQLAlchemy models for the post service."""

from .post import Post

__all__ = ["Post"]
