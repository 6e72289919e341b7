"""Pydantic schemas for comments."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from suggestion_box.domain.schemas.auth import UserSummary
from suggestion_box.domain.schemas.base import CamelModel


class CommentCreate(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    content: str = Field(min_length=1, max_length=1000)
    is_internal: bool = False


class CommentRead(CamelModel):
    id: int
    suggestion_id: int
    author: Optional[UserSummary] = None
    content: str
    is_internal: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
