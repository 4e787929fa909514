# src/chatterbox_posts/services/__init__.py
"""Business logic services for the post service."""

from .validation import ContentBounds, validate_post

__all__ = ["ContentBounds", "validate_post"]
