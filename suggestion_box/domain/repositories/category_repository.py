"""
Category Repository Interface.
"""

from typing import List, Optional

from suggestion_box.domain.models.category import Category
from suggestion_box.domain.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """Interface for Category-specific operations."""

    def get_by_name(self, name: str) -> Optional[Category]:
        """Get a category by its exact name."""
        ...

    def list_by_name(self) -> List[Category]:
        """All categories sorted by name."""
        ...

    def count(self) -> int:
        """Count all categories."""
        ...

    def save_unique(self, category: Category) -> Optional[Category]:
        """Persist a new or changed category; None when its name is already taken."""
        ...
