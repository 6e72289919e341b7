"""Pydantic schemas for User and Auth."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from suggestion_box.domain.schemas.base import CamelModel


class UserSummary(CamelModel):
    id: int
    name: Optional[str] = None
    email: str


class UserRead(CamelModel):
    id: int
    name: Optional[str] = None
    email: str
    role: str
    created_at: Optional[datetime] = None


class LoginRequest(BaseModel):
    email: str
    password: str


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    user: UserRead
