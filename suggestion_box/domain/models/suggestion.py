"""Suggestion domain model — maps to the 'suggestions' table."""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from suggestion_box.infrastructure.database import Base

STATUS_PENDING = "pending"
STATUS_APPROVED = "approved"
STATUS_REJECTED = "rejected"
STATUS_IN_PROGRESS = "in-progress"
STATUS_COMPLETED = "completed"

STATUSES = (
    STATUS_PENDING,
    STATUS_APPROVED,
    STATUS_REJECTED,
    STATUS_IN_PROGRESS,
    STATUS_COMPLETED,
)


class Suggestion(Base):
    __tablename__ = "suggestions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    # NULL once the category has been deleted ("Uncategorized")
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True)
    # Plain string, not a DB enum: legacy values may exist in storage
    status = Column(String(50), nullable=False, default=STATUS_PENDING, index=True)
    is_anonymous = Column(Boolean, nullable=False, default=True)
    submitted_by_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    admin_notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    category = relationship("Category", lazy="joined")
    submitted_by = relationship("User", lazy="joined")

    def __repr__(self):
        return f"<Suggestion {self.id} - {self.status}>"
