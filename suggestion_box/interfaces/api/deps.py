"""FastAPI dependency — bearer token authentication."""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from suggestion_box.core.exceptions import ForbiddenException, UnauthorizedException
from suggestion_box.infrastructure.database import get_db
from suggestion_box.application.services.auth_service import decode_access_token, get_or_create_user
from suggestion_box.domain.models.user import User

security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """Resolve the caller from the bearer token, provisioning first-time users."""
    if credentials is None:
        raise UnauthorizedException("Unauthorized")

    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise UnauthorizedException("Invalid or expired token")

    email: Optional[str] = payload.get("sub")
    if not email:
        raise UnauthorizedException("Invalid token")

    return get_or_create_user(db, email=email, name=payload.get("name"))


def require_admin(user: User = Depends(get_current_user)) -> User:
    """Require admin role."""
    if not user.is_admin:
        raise ForbiddenException("Admin access required")
    return user
