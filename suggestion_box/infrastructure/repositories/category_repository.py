"""
SQLAlchemy Implementation of Category Repository.
"""

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from suggestion_box.domain.models.category import Category
from suggestion_box.domain.repositories.category_repository import CategoryRepository
from suggestion_box.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyCategoryRepository(SQLAlchemyRepository[Category], CategoryRepository):
    """Category repository implementation using SQLAlchemy."""

    def get_by_name(self, name: str) -> Optional[Category]:
        return self.db.query(Category).filter(Category.name == name).first()

    def list_by_name(self) -> List[Category]:
        return self.db.query(Category).order_by(Category.name.asc()).all()

    def count(self) -> int:
        return self.db.query(func.count(Category.id)).scalar() or 0

    def save_unique(self, category: Category) -> Optional[Category]:
        self.db.add(category)
        try:
            self.db.commit()
        except IntegrityError:
            # categories.name is unique: a concurrent request took the name first
            self.db.rollback()
            return None
        self.db.refresh(category)
        return category
