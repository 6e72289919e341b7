"""Pydantic schemas for the upvote ledger."""

from typing import Optional

from suggestion_box.domain.schemas.base import CamelModel


class UpvoteResult(CamelModel):
    success: bool = True
    upvote_count: int
    removed: Optional[bool] = None
    message: Optional[str] = None


class UpvoteStatus(CamelModel):
    upvote_count: int
    has_upvoted: bool
