"""Pydantic schemas for Category."""

from datetime import datetime
from typing import Optional

from pydantic import ConfigDict, Field

from suggestion_box.domain.schemas.base import CamelModel

HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class CategoryCreate(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=50)
    description: Optional[str] = Field(default=None, max_length=200)
    color: str = Field(pattern=HEX_COLOR_PATTERN)
    is_active: Optional[bool] = None


class CategoryUpdate(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    description: Optional[str] = Field(default=None, max_length=200)
    color: Optional[str] = Field(default=None, pattern=HEX_COLOR_PATTERN)
    is_active: Optional[bool] = None


class CategorySummary(CamelModel):
    id: int
    name: str
    color: str


class CategoryRead(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    color: str
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
