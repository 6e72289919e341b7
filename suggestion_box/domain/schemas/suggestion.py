"""Pydantic schemas for Suggestion and its aggregates."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from suggestion_box.domain.models.suggestion import Suggestion
from suggestion_box.domain.schemas.auth import UserSummary
from suggestion_box.domain.schemas.base import CamelModel
from suggestion_box.domain.schemas.category import CategorySummary

SuggestionStatus = Literal["pending", "approved", "rejected", "in-progress", "completed"]


class SuggestionCreate(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=2000)
    category: int
    is_anonymous: bool = True


class SuggestionUpdate(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    status: Optional[SuggestionStatus] = None
    admin_notes: Optional[str] = Field(default=None, max_length=1000)

    @field_validator("status", "admin_notes", mode="before")
    @classmethod
    def reject_null(cls, value):
        # Omit a field to leave it unchanged; null is not a value
        if value is None:
            raise ValueError("Field may be omitted but not null")
        return value


class SuggestionRead(CamelModel):
    id: int
    title: str
    content: str
    category: Optional[CategorySummary] = None
    status: str
    is_anonymous: bool
    submitted_by: Optional[UserSummary] = None
    admin_notes: Optional[str] = None
    upvote_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, suggestion: Suggestion, upvote_count: int = 0) -> "SuggestionRead":
        """Build the public representation; anonymous submitters are never exposed."""
        submitted_by = None
        if not suggestion.is_anonymous and suggestion.submitted_by is not None:
            submitted_by = UserSummary.model_validate(suggestion.submitted_by)

        return cls(
            id=suggestion.id,
            title=suggestion.title,
            content=suggestion.content,
            category=CategorySummary.model_validate(suggestion.category) if suggestion.category else None,
            status=suggestion.status,
            is_anonymous=suggestion.is_anonymous,
            submitted_by=submitted_by,
            admin_notes=suggestion.admin_notes,
            upvote_count=upvote_count,
            created_at=suggestion.created_at,
            updated_at=suggestion.updated_at,
        )


class SuggestionFilter(BaseModel):
    status: Optional[str] = None
    category: Optional[int] = None
    page: int = 1
    page_size: int = 10


class StatusCounts(CamelModel):
    total: int = 0
    pending: int = 0
    approved: int = 0
    rejected: int = 0
    in_progress: int = Field(default=0, alias="in-progress")
    completed: int = 0


class ChangesSummary(CamelModel):
    count: int
    most_recent_id: Optional[int] = None
    most_recent_created_at: Optional[datetime] = None


class SuggestionNotification(BaseModel):
    """Payload handed to the notification service after a suggestion is created."""
    title: str
    content: str
    category: str
    submitted_by: str
    is_anonymous: bool
