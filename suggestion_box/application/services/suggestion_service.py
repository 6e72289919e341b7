"""Suggestion service — lifecycle of a suggestion from submission to deletion.

- Submission always starts in ``pending``; notification is best-effort
- Status and admin notes are admin-owned; any status may replace any other
- Update/delete distinguish "never existed" (404) from "deleted concurrently" (410)
- Deletion cascades to the suggestion's upvotes and comments
"""

from typing import Any, Dict, Tuple

import structlog

from suggestion_box.application.services.stats_service import upvote_counts
from suggestion_box.core.exceptions import (
    EntityNotFoundException,
    GoneException,
    ValidationException,
)
from suggestion_box.domain.models.suggestion import Suggestion, STATUS_PENDING
from suggestion_box.domain.repositories.category_repository import CategoryRepository
from suggestion_box.domain.repositories.comment_repository import CommentRepository
from suggestion_box.domain.repositories.suggestion_repository import SuggestionRepository
from suggestion_box.domain.repositories.upvote_repository import UpvoteRepository
from suggestion_box.domain.repositories.user_repository import UserRepository
from suggestion_box.domain.schemas.suggestion import (
    SuggestionCreate,
    SuggestionFilter,
    SuggestionNotification,
    SuggestionRead,
    SuggestionUpdate,
)

logger = structlog.get_logger(__name__)


def create_suggestion(
    repo: SuggestionRepository,
    category_repo: CategoryRepository,
    user_repo: UserRepository,
    data: SuggestionCreate,
    author_id: int,
) -> Tuple[SuggestionRead, SuggestionNotification]:
    """Store a new suggestion and build the notification to dispatch for it."""
    author = user_repo.get_by_id(author_id)
    if author is None:
        raise EntityNotFoundException("User not found")

    category = category_repo.get_by_id(data.category)
    if category is None:
        raise ValidationException(
            "Validation error",
            details=[{"field": "category", "message": "Category not found"}],
        )

    suggestion = repo.create({
        "title": data.title,
        "content": data.content,
        "category_id": category.id,
        "is_anonymous": data.is_anonymous,
        "submitted_by_id": author.id,
        "status": STATUS_PENDING,
    })
    logger.info(
        "Suggestion created",
        suggestion_id=suggestion.id,
        category_id=category.id,
        anonymous=suggestion.is_anonymous,
    )

    notification = SuggestionNotification(
        title=suggestion.title,
        content=suggestion.content,
        category=category.name,
        submitted_by=author.name or author.email or "Unknown User",
        is_anonymous=suggestion.is_anonymous,
    )
    return SuggestionRead.from_model(suggestion, upvote_count=0), notification


def get_suggestion(repo: SuggestionRepository, upvote_repo: UpvoteRepository, suggestion_id: int) -> SuggestionRead:
    suggestion = repo.get_by_id(suggestion_id)
    if suggestion is None:
        raise EntityNotFoundException("Suggestion not found")
    return SuggestionRead.from_model(suggestion, upvote_repo.count_for(suggestion_id))


def list_suggestions(
    repo: SuggestionRepository,
    upvote_repo: UpvoteRepository,
    filters: SuggestionFilter,
) -> Dict[str, Any]:
    """Get a page of suggestions with their upvote counts attached."""
    result = repo.get_with_filters(filters)
    counts = upvote_counts(upvote_repo, (s.id for s in result["items"]))
    result["items"] = [
        SuggestionRead.from_model(s, counts.get(s.id, 0)) for s in result["items"]
    ]
    return result


def update_suggestion(
    repo: SuggestionRepository,
    upvote_repo: UpvoteRepository,
    suggestion_id: int,
    changes: SuggestionUpdate,
) -> SuggestionRead:
    """Apply a status change and/or admin notes."""
    if repo.get_by_id(suggestion_id) is None:
        raise EntityNotFoundException("Suggestion not found or has been deleted")

    values = changes.model_dump(exclude_none=True)
    affected = repo.update_fields(suggestion_id, values)
    suggestion = repo.get_by_id(suggestion_id) if affected else None
    if suggestion is None:
        logger.warning("Suggestion deleted during update", suggestion_id=suggestion_id)
        raise GoneException("Suggestion was deleted during update")

    logger.info("Suggestion updated", suggestion_id=suggestion_id, changes=sorted(values))
    return SuggestionRead.from_model(suggestion, upvote_repo.count_for(suggestion_id))


def delete_suggestion(
    repo: SuggestionRepository,
    upvote_repo: UpvoteRepository,
    comment_repo: CommentRepository,
    suggestion_id: int,
) -> None:
    """Delete a suggestion, then its upvotes and comments (not atomic)."""
    if repo.get_by_id(suggestion_id) is None:
        raise EntityNotFoundException("Suggestion not found or already deleted")

    if not repo.delete_by_id(suggestion_id):
        logger.warning("Suggestion already deleted by another request", suggestion_id=suggestion_id)
        raise GoneException("Suggestion was already deleted by another user")

    upvotes_removed = upvote_repo.delete_for_suggestion(suggestion_id)
    comments_removed = comment_repo.delete_for_suggestion(suggestion_id)
    logger.info(
        "Suggestion deleted",
        suggestion_id=suggestion_id,
        upvotes_removed=upvotes_removed,
        comments_removed=comments_removed,
    )


def get_existing_suggestion(repo: SuggestionRepository, suggestion_id: int) -> Suggestion:
    suggestion = repo.get_by_id(suggestion_id)
    if suggestion is None:
        raise EntityNotFoundException("Suggestion not found")
    return suggestion
