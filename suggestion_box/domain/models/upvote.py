"""Upvote domain model — maps to the 'upvotes' table."""

from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func

from suggestion_box.infrastructure.database import Base


class Upvote(Base):
    __tablename__ = "upvotes"
    __table_args__ = (
        # One upvote per user per suggestion, enforced by the database
        UniqueConstraint("suggestion_id", "user_id", name="uq_upvote_suggestion_user"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    # No FK to suggestions: rows are cleaned up by the service after the parent is deleted
    suggestion_id = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<Upvote suggestion={self.suggestion_id} user={self.user_id}>"
