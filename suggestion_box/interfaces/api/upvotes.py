"""Upvote API routes — status, toggle on, toggle off."""

from fastapi import APIRouter, Depends

from suggestion_box.application.services.suggestion_service import get_existing_suggestion
from suggestion_box.application.services.upvote_service import remove_upvote, upvote, upvote_status
from suggestion_box.domain.models.user import User
from suggestion_box.domain.repositories.suggestion_repository import SuggestionRepository
from suggestion_box.domain.repositories.upvote_repository import UpvoteRepository
from suggestion_box.domain.schemas.upvote import UpvoteResult, UpvoteStatus
from suggestion_box.interfaces.api.deps import get_current_user
from suggestion_box.interfaces.deps import get_suggestion_repository, get_upvote_repository

router = APIRouter(prefix="/api/suggestions/{suggestion_id}/upvote", tags=["Upvotes"])


@router.get("", response_model=UpvoteStatus)
def get_status(
    suggestion_id: int,
    repo: UpvoteRepository = Depends(get_upvote_repository),
    user: User = Depends(get_current_user),
):
    return upvote_status(repo, suggestion_id, user.id)


@router.post("", response_model=UpvoteResult, response_model_exclude_none=True)
def add(
    suggestion_id: int,
    repo: UpvoteRepository = Depends(get_upvote_repository),
    suggestion_repo: SuggestionRepository = Depends(get_suggestion_repository),
    user: User = Depends(get_current_user),
):
    get_existing_suggestion(suggestion_repo, suggestion_id)
    return upvote(repo, suggestion_id, user.id)


@router.delete("", response_model=UpvoteResult, response_model_exclude_none=True)
def remove(
    suggestion_id: int,
    repo: UpvoteRepository = Depends(get_upvote_repository),
    user: User = Depends(get_current_user),
):
    return remove_upvote(repo, suggestion_id, user.id)
