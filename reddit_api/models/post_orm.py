"""
SQLAlchemy ORM model for the 'posts' collection.
"""

from sqlalchemy import Column, Index, Integer, Text, TIMESTAMP

from .base import Base


class PostORM(Base):
    """
    A content item owned by exactly one subreddit.

    ``subreddit_name`` logically references ``subreddits.name``. It is not an
    enforced FK: the parent is checked by the API at creation time.
    """
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    content = Column(Text, nullable=False)
    subreddit_name = Column(Text, nullable=False, comment="Name of the parent subreddit.")
    created_at = Column(TIMESTAMP(timezone=True), nullable=False)

    __table_args__ = (
        Index("idx_post_subreddit_name", "subreddit_name"),
    )

    def __repr__(self) -> str:
        return f"<PostORM(id={self.id}, subreddit='{self.subreddit_name}', title='{self.title}')>"
