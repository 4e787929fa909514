"""Post-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chatterbox_posts.db.time import as_utc


class PostPayload(BaseModel):
    """Schema for creating or updating a post.

    Both fields are optional here so that blank or missing values are reported
    by the content rules with a 400 instead of a schema error.
    """

    post_id: str | None = Field(None, alias="postId", description="Ignored on create")
    username: str | None = Field(None, description="Author username")
    content: str | None = Field(None, description="Post text")

    model_config = ConfigDict(populate_by_name=True)


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    post_id: str = Field(serialization_alias="postId")
    username: str
    content: str
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    @field_validator("created_at", "updated_at")
    @classmethod
    def _ensure_utc(cls, value: datetime) -> datetime:
        return as_utc(value)

    model_config = ConfigDict(from_attributes=True)
