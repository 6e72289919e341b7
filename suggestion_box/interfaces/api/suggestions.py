"""Suggestions API routes — submit, list, triage, delete, stats and change polling."""

from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Query, status

from suggestion_box.application.services.notification_service import send_suggestion_notification
from suggestion_box.application.services.stats_service import changes_since, status_counts
from suggestion_box.application.services.suggestion_service import (
    create_suggestion,
    delete_suggestion,
    get_suggestion,
    list_suggestions,
    update_suggestion,
)
from suggestion_box.domain.models.user import User
from suggestion_box.domain.repositories.category_repository import CategoryRepository
from suggestion_box.domain.repositories.comment_repository import CommentRepository
from suggestion_box.domain.repositories.suggestion_repository import SuggestionRepository
from suggestion_box.domain.repositories.upvote_repository import UpvoteRepository
from suggestion_box.domain.repositories.user_repository import UserRepository
from suggestion_box.domain.schemas.suggestion import (
    ChangesSummary,
    StatusCounts,
    SuggestionCreate,
    SuggestionFilter,
    SuggestionUpdate,
)
from suggestion_box.interfaces.api.deps import get_current_user, require_admin
from suggestion_box.interfaces.deps import (
    get_category_repository,
    get_comment_repository,
    get_suggestion_repository,
    get_upvote_repository,
    get_user_repository,
)

router = APIRouter(prefix="/api/suggestions", tags=["Suggestions"])


@router.get("")
def list_all(
    status: Optional[str] = None,
    category: Optional[int] = None,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    repo: SuggestionRepository = Depends(get_suggestion_repository),
    upvote_repo: UpvoteRepository = Depends(get_upvote_repository),
    user: User = Depends(get_current_user),
):
    filters = SuggestionFilter(status=status, category=category, page=page, page_size=limit)
    result = list_suggestions(repo, upvote_repo, filters)
    return {
        "suggestions": result["items"],
        "pagination": {
            "page": result["page"],
            "limit": result["page_size"],
            "total": result["total"],
            "pages": result["total_pages"],
        },
    }


@router.post("", status_code=status.HTTP_201_CREATED)
def submit(
    body: SuggestionCreate,
    background_tasks: BackgroundTasks,
    repo: SuggestionRepository = Depends(get_suggestion_repository),
    category_repo: CategoryRepository = Depends(get_category_repository),
    user_repo: UserRepository = Depends(get_user_repository),
    user: User = Depends(get_current_user),
):
    suggestion, notification = create_suggestion(repo, category_repo, user_repo, body, author_id=user.id)
    # Runs after the response is sent; failures are logged inside
    background_tasks.add_task(send_suggestion_notification, notification)
    return {"message": "Suggestion created successfully", "suggestion": suggestion}


@router.get("/stats", response_model=StatusCounts)
def stats(
    repo: SuggestionRepository = Depends(get_suggestion_repository),
    user: User = Depends(get_current_user),
):
    return status_counts(repo)


@router.get("/check-changes", response_model=ChangesSummary)
def check_changes(
    repo: SuggestionRepository = Depends(get_suggestion_repository),
    user: User = Depends(get_current_user),
):
    """Cheap summary clients poll to decide whether to re-fetch the list."""
    return changes_since(repo)


@router.get("/{suggestion_id}")
def get_one(
    suggestion_id: int,
    repo: SuggestionRepository = Depends(get_suggestion_repository),
    upvote_repo: UpvoteRepository = Depends(get_upvote_repository),
    user: User = Depends(get_current_user),
):
    return {"suggestion": get_suggestion(repo, upvote_repo, suggestion_id)}


@router.put("/{suggestion_id}")
def update(
    suggestion_id: int,
    body: SuggestionUpdate,
    repo: SuggestionRepository = Depends(get_suggestion_repository),
    upvote_repo: UpvoteRepository = Depends(get_upvote_repository),
    admin: User = Depends(require_admin),
):
    suggestion = update_suggestion(repo, upvote_repo, suggestion_id, body)
    return {"message": "Suggestion updated successfully", "suggestion": suggestion}


@router.delete("/{suggestion_id}")
def delete(
    suggestion_id: int,
    repo: SuggestionRepository = Depends(get_suggestion_repository),
    upvote_repo: UpvoteRepository = Depends(get_upvote_repository),
    comment_repo: CommentRepository = Depends(get_comment_repository),
    admin: User = Depends(require_admin),
):
    delete_suggestion(repo, upvote_repo, comment_repo, suggestion_id)
    return {"message": "Suggestion deleted successfully"}
