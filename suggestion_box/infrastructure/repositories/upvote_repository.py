"""
SQLAlchemy Implementation of Upvote Repository.
"""

from typing import Dict, Iterable, Optional

from sqlalchemy import delete, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from suggestion_box.domain.models.upvote import Upvote
from suggestion_box.domain.repositories.upvote_repository import UpvoteRepository


class SQLAlchemyUpvoteRepository(UpvoteRepository):
    """Upvote ledger backed by the 'upvotes' table and its unique constraint."""

    def __init__(self, db: Session):
        self.db = db

    def get_for_user(self, suggestion_id: int, user_id: int) -> Optional[Upvote]:
        return (
            self.db.query(Upvote)
            .filter(Upvote.suggestion_id == suggestion_id, Upvote.user_id == user_id)
            .first()
        )

    def create_if_absent(self, suggestion_id: int, user_id: int) -> bool:
        self.db.add(Upvote(suggestion_id=suggestion_id, user_id=user_id))
        try:
            self.db.commit()
        except IntegrityError:
            # uq_upvote_suggestion_user: a concurrent request inserted first
            self.db.rollback()
            return False
        return True

    def remove(self, suggestion_id: int, user_id: int) -> int:
        result = self.db.execute(
            delete(Upvote).where(Upvote.suggestion_id == suggestion_id, Upvote.user_id == user_id)
        )
        self.db.commit()
        return result.rowcount

    def count_for(self, suggestion_id: int) -> int:
        return (
            self.db.query(func.count(Upvote.id))
            .filter(Upvote.suggestion_id == suggestion_id)
            .scalar()
            or 0
        )

    def counts_for(self, suggestion_ids: Iterable[int]) -> Dict[int, int]:
        ids = set(suggestion_ids)
        if not ids:
            return {}
        results = (
            self.db.query(Upvote.suggestion_id, func.count(Upvote.id).label("count"))
            .filter(Upvote.suggestion_id.in_(ids))
            .group_by(Upvote.suggestion_id)
            .all()
        )
        counts = {suggestion_id: 0 for suggestion_id in ids}
        counts.update({r.suggestion_id: r.count for r in results})
        return counts

    def delete_for_suggestion(self, suggestion_id: int) -> int:
        result = self.db.execute(delete(Upvote).where(Upvote.suggestion_id == suggestion_id))
        self.db.commit()
        return result.rowcount
