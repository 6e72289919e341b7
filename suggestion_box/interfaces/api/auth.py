"""Auth API routes — local login and current user."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from suggestion_box.application.services.auth_service import authenticate_user, create_access_token
from suggestion_box.core.exceptions import UnauthorizedException
from suggestion_box.domain.models.user import User
from suggestion_box.domain.schemas.auth import LoginRequest, TokenResponse, UserRead
from suggestion_box.infrastructure.database import get_db
from suggestion_box.interfaces.api.deps import get_current_user

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest, db: Session = Depends(get_db)):
    user = authenticate_user(db, body.email, body.password)
    if not user:
        raise UnauthorizedException("Invalid email or password")

    access_token = create_access_token(data={"sub": user.email, "name": user.name, "role": user.role})
    return TokenResponse(access_token=access_token, user=UserRead.model_validate(user))


@router.get("/me", response_model=UserRead)
def get_me(user: User = Depends(get_current_user)):
    return UserRead.model_validate(user)
