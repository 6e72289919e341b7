"""
User Repository Interface.
"""

from typing import Optional

from suggestion_box.domain.models.user import User
from suggestion_box.domain.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by e-mail (case-insensitive)."""
        ...
