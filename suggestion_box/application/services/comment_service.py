"""Comment service — admin comments on a suggestion, public or internal."""

from typing import List

import structlog

from suggestion_box.core.exceptions import EntityNotFoundException, ForbiddenException
from suggestion_box.domain.models.comment import Comment
from suggestion_box.domain.repositories.comment_repository import CommentRepository
from suggestion_box.domain.repositories.suggestion_repository import SuggestionRepository
from suggestion_box.domain.repositories.user_repository import UserRepository
from suggestion_box.domain.schemas.comment import CommentCreate

logger = structlog.get_logger(__name__)


def add_comment(
    repo: CommentRepository,
    suggestion_repo: SuggestionRepository,
    user_repo: UserRepository,
    suggestion_id: int,
    author_id: int,
    data: CommentCreate,
) -> Comment:
    """Append a comment. Callers must already have checked the author is an admin."""
    if suggestion_repo.get_by_id(suggestion_id) is None:
        raise EntityNotFoundException("Suggestion not found")
    if user_repo.get_by_id(author_id) is None:
        raise EntityNotFoundException("User not found")

    comment = repo.create({
        "suggestion_id": suggestion_id,
        "author_id": author_id,
        "content": data.content,
        "is_internal": data.is_internal,
    })
    logger.info("Comment added", suggestion_id=suggestion_id, comment_id=comment.id, internal=comment.is_internal)
    return comment


def list_comments(repo: CommentRepository, suggestion_id: int, caller_is_admin: bool) -> List[Comment]:
    """Thread of a suggestion, oldest first; internal comments only for admins."""
    return repo.list_for_suggestion(suggestion_id, include_internal=caller_is_admin)


def remove_comment(
    repo: CommentRepository,
    user_repo: UserRepository,
    comment_id: int,
    caller_id: int,
    caller_is_admin: bool,
) -> None:
    comment = repo.get_by_id(comment_id)
    if comment is None:
        raise EntityNotFoundException("Comment not found")
    if user_repo.get_by_id(caller_id) is None:
        raise EntityNotFoundException("User not found")

    if not caller_is_admin and comment.author_id != caller_id:
        raise ForbiddenException("You can only delete your own comments")

    repo.delete(comment_id)
    logger.info("Comment deleted", comment_id=comment_id, suggestion_id=comment.suggestion_id)
