"""
SQLAlchemy Implementation of User Repository.
"""

from typing import Optional

from suggestion_box.domain.models.user import User
from suggestion_box.domain.repositories.user_repository import UserRepository
from suggestion_box.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email.strip().lower()).first()
