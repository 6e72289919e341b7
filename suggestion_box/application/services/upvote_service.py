"""Upvote service — at most one upvote per user per suggestion.

A duplicate found by the pre-check is rejected, while a duplicate that
slips past it and hits the unique constraint is reported as success.
"""

import structlog

from suggestion_box.core.exceptions import DuplicateUpvoteException
from suggestion_box.domain.repositories.upvote_repository import UpvoteRepository
from suggestion_box.domain.schemas.upvote import UpvoteResult, UpvoteStatus

logger = structlog.get_logger(__name__)


def upvote(repo: UpvoteRepository, suggestion_id: int, user_id: int) -> UpvoteResult:
    if repo.get_for_user(suggestion_id, user_id) is not None:
        raise DuplicateUpvoteException("Already upvoted")

    if not repo.create_if_absent(suggestion_id, user_id):
        logger.info("Concurrent duplicate upvote absorbed", suggestion_id=suggestion_id, user_id=user_id)
        return UpvoteResult(upvote_count=repo.count_for(suggestion_id), message="Already upvoted")

    return UpvoteResult(upvote_count=repo.count_for(suggestion_id))


def remove_upvote(repo: UpvoteRepository, suggestion_id: int, user_id: int) -> UpvoteResult:
    removed = repo.remove(suggestion_id, user_id) > 0
    return UpvoteResult(
        upvote_count=repo.count_for(suggestion_id),
        removed=removed,
        message="Upvote removed" if removed else "Upvote was already removed",
    )


def upvote_status(repo: UpvoteRepository, suggestion_id: int, user_id: int) -> UpvoteStatus:
    return UpvoteStatus(
        upvote_count=repo.count_for(suggestion_id),
        has_upvoted=repo.get_for_user(suggestion_id, user_id) is not None,
    )
