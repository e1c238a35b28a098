"""
Pydantic Data Transfer Objects (DTOs) for the Reddit API service.

Request schemas are validated explicitly by ``reddit_api.core.validation`` so
each handler controls when validation happens relative to its existence
checks. Response DTOs serialize with camelCase aliases.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class SubredditCreate(BaseModel):
    """Schema for a new subreddit. Unknown keys are rejected."""
    name: StrictStr = Field(..., min_length=1)
    description: StrictStr = Field(..., min_length=1)

    model_config = ConfigDict(extra="forbid")


class PostWrite(BaseModel):
    """Schema for creating or updating a post."""
    title: StrictStr = Field(..., min_length=1)
    content: StrictStr = Field(..., min_length=1)


class MessageResponse(BaseModel):
    message: str


class SubredditCreatedResponse(MessageResponse):
    subreddit_id: int = Field(..., alias="subredditId")

    model_config = ConfigDict(populate_by_name=True)


class PostCreatedResponse(MessageResponse):
    post_id: int = Field(..., alias="postId")

    model_config = ConfigDict(populate_by_name=True)


class PostDTO(BaseModel):
    """
    DTO for a stored post.

    Mirrors PostORM and is used for API responses.
    """
    id: int
    title: str
    content: str
    subreddit_name: str = Field(..., alias="subredditName")
    created_at: datetime = Field(..., alias="createdAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class CommentDTO(BaseModel):
    """
    DTO for a stored comment.

    Mirrors CommentORM and is used for API responses.
    """
    id: int
    post_id: int = Field(..., alias="postId")
    author: Optional[str] = None
    content: str
    created_at: datetime = Field(..., alias="createdAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    timestamp: datetime
    database: str
