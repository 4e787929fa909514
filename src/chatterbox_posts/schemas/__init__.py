"""
Pydantic schemas for API request/response models and bus events.

These schemas define the structure of API data for serialization and validation.
"""

from .events import PostCreatedEvent
from .post import PostPayload, PostResponse

__all__ = ["PostCreatedEvent", "PostPayload", "PostResponse"]
