"""
SQLAlchemy Implementation of Comment Repository.
"""

from typing import List

from sqlalchemy import delete

from suggestion_box.domain.models.comment import Comment
from suggestion_box.domain.repositories.comment_repository import CommentRepository
from suggestion_box.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyCommentRepository(SQLAlchemyRepository[Comment], CommentRepository):
    """Comment repository implementation using SQLAlchemy."""

    def list_for_suggestion(self, suggestion_id: int, include_internal: bool) -> List[Comment]:
        query = self.db.query(Comment).filter(Comment.suggestion_id == suggestion_id)
        if not include_internal:
            query = query.filter(Comment.is_internal.is_(False))
        return query.order_by(Comment.created_at.asc(), Comment.id.asc()).all()

    def delete_for_suggestion(self, suggestion_id: int) -> int:
        result = self.db.execute(delete(Comment).where(Comment.suggestion_id == suggestion_id))
        self.db.commit()
        return result.rowcount
