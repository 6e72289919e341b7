"""
SQLAlchemy Implementation of Suggestion Repository.
"""

from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import delete, func, update

from suggestion_box.domain.models.suggestion import Suggestion
from suggestion_box.domain.repositories.suggestion_repository import SuggestionRepository
from suggestion_box.domain.schemas.suggestion import SuggestionFilter
from suggestion_box.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemySuggestionRepository(SQLAlchemyRepository[Suggestion], SuggestionRepository):
    """Suggestion repository implementation using SQLAlchemy."""

    def get_with_filters(self, filters: SuggestionFilter) -> Dict[str, Any]:
        """Get suggestions with filtering and pagination."""
        query = self.db.query(Suggestion)

        if filters.status:
            query = query.filter(Suggestion.status == filters.status)
        if filters.category:
            query = query.filter(Suggestion.category_id == filters.category)

        total = query.count()
        offset = (filters.page - 1) * filters.page_size
        suggestions = (
            query.order_by(Suggestion.created_at.desc(), Suggestion.id.desc())
            .offset(offset)
            .limit(filters.page_size)
            .all()
        )

        return {
            "items": suggestions,
            "total": total,
            "page": filters.page,
            "page_size": filters.page_size,
            "total_pages": (total + filters.page_size - 1) // filters.page_size,
        }

    def update_fields(self, id: int, changes: Dict[str, Any]) -> int:
        result = self.db.execute(
            update(Suggestion)
            .where(Suggestion.id == id)
            .values(updated_at=func.now(), **changes)
            .execution_options(synchronize_session=False)
        )
        self.db.commit()
        return result.rowcount

    def delete_by_id(self, id: int) -> int:
        result = self.db.execute(
            delete(Suggestion)
            .where(Suggestion.id == id)
            .execution_options(synchronize_session=False)
        )
        self.db.commit()
        return result.rowcount

    def count_by_status(self) -> List[Tuple[str, int]]:
        results = (
            self.db.query(Suggestion.status, func.count(Suggestion.id).label("count"))
            .group_by(Suggestion.status)
            .all()
        )
        return [(r.status, r.count) for r in results]

    def count(self) -> int:
        return self.db.query(func.count(Suggestion.id)).scalar() or 0

    def get_most_recent(self) -> Optional[Suggestion]:
        return (
            self.db.query(Suggestion)
            .order_by(Suggestion.created_at.desc(), Suggestion.id.desc())
            .first()
        )

    def clear_category(self, category_id: int) -> int:
        result = self.db.execute(
            update(Suggestion)
            .where(Suggestion.category_id == category_id)
            .values(category_id=None)
            .execution_options(synchronize_session=False)
        )
        self.db.commit()
        return result.rowcount
