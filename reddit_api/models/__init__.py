"""
Models package for the Reddit API service.

This package contains SQLAlchemy ORM models and Pydantic DTOs.
"""

# Ensure all ORM models are registered with the Base metadata when this package is imported.
from .base import Base
from .comment_orm import CommentORM
from .post_orm import PostORM
from .subreddit_orm import SubredditORM

from .dtos import (
    CommentDTO,
    HealthResponse,
    MessageResponse,
    PostCreatedResponse,
    PostDTO,
    PostWrite,
    SubredditCreate,
    SubredditCreatedResponse,
)

__all__ = [
    # Base
    "Base",
    # ORMs
    "CommentORM",
    "PostORM",
    "SubredditORM",
    # DTOs
    "CommentDTO",
    "HealthResponse",
    "MessageResponse",
    "PostCreatedResponse",
    "PostDTO",
    "PostWrite",
    "SubredditCreate",
    "SubredditCreatedResponse",
]
