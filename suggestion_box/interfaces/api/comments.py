"""Comment API routes — read the thread, append, remove."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from suggestion_box.application.services.comment_service import add_comment, list_comments, remove_comment
from suggestion_box.core.exceptions import ValidationException
from suggestion_box.domain.models.user import User
from suggestion_box.domain.repositories.comment_repository import CommentRepository
from suggestion_box.domain.repositories.suggestion_repository import SuggestionRepository
from suggestion_box.domain.repositories.user_repository import UserRepository
from suggestion_box.domain.schemas.comment import CommentCreate, CommentRead
from suggestion_box.interfaces.api.deps import get_current_user, require_admin
from suggestion_box.interfaces.deps import (
    get_comment_repository,
    get_suggestion_repository,
    get_user_repository,
)

router = APIRouter(prefix="/api/suggestions/{suggestion_id}/comments", tags=["Comments"])


@router.get("")
def thread(
    suggestion_id: int,
    repo: CommentRepository = Depends(get_comment_repository),
    user: User = Depends(get_current_user),
):
    comments = list_comments(repo, suggestion_id, caller_is_admin=user.is_admin)
    return {"comments": [CommentRead.model_validate(c) for c in comments]}


@router.post("", status_code=status.HTTP_201_CREATED)
def create(
    suggestion_id: int,
    body: CommentCreate,
    repo: CommentRepository = Depends(get_comment_repository),
    suggestion_repo: SuggestionRepository = Depends(get_suggestion_repository),
    user_repo: UserRepository = Depends(get_user_repository),
    admin: User = Depends(require_admin),
):
    comment = add_comment(repo, suggestion_repo, user_repo, suggestion_id, admin.id, body)
    return {"message": "Comment created successfully", "comment": CommentRead.model_validate(comment)}


@router.delete("")
def delete(
    suggestion_id: int,
    comment_id: Optional[int] = Query(None, alias="commentId"),
    repo: CommentRepository = Depends(get_comment_repository),
    user_repo: UserRepository = Depends(get_user_repository),
    user: User = Depends(get_current_user),
):
    if comment_id is None:
        raise ValidationException("Comment ID is required")

    remove_comment(repo, user_repo, comment_id, caller_id=user.id, caller_is_admin=user.is_admin)
    return {"message": "Comment deleted successfully"}
