"""
SQLAlchemy ORM model for the 'comments' collection.
"""

from sqlalchemy import Column, Index, Integer, Text, TIMESTAMP

from .base import Base


class CommentORM(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(Integer, nullable=False, comment="Identity of the parent post. Not an enforced FK.")
    author = Column(Text, nullable=True)
    content = Column(Text, nullable=False)
    created_at = Column(TIMESTAMP(timezone=True), nullable=False)

    __table_args__ = (
        Index("idx_comment_post_id", "post_id"),
    )

    def __repr__(self) -> str:
        return f"<CommentORM(id={self.id}, post_id={self.post_id})>"
