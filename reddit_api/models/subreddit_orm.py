"""
SQLAlchemy ORM model for the 'subreddits' collection.
"""

from sqlalchemy import Column, Integer, Text, TIMESTAMP, UniqueConstraint

from .base import Base


class SubredditORM(Base):
    """
    A top-level named container for posts.

    Attributes:
        id (int): Store-generated identity, auto-incrementing.
        name (str): Unique subreddit name, also used to address it in URLs.
        description (str): Free-form description.
        created_at (datetime): Creation timestamp set by the API.
    """
    __tablename__ = "subreddits"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, comment="Unique subreddit name.")
    description = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False)

    __table_args__ = (
        UniqueConstraint("name", name="uq_subreddit_name"),
    )

    def __repr__(self) -> str:
        return f"<SubredditORM(id={self.id}, name='{self.name}')>"
