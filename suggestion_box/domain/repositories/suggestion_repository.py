"""
Suggestion Repository Interface.
Defines specific data access operations for Suggestions.
"""

from typing import Any, Dict, List, Optional, Tuple

from suggestion_box.domain.models.suggestion import Suggestion
from suggestion_box.domain.repositories.base import BaseRepository
from suggestion_box.domain.schemas.suggestion import SuggestionFilter


class SuggestionRepository(BaseRepository[Suggestion]):
    """Interface for Suggestion-specific operations."""

    def get_with_filters(self, filters: SuggestionFilter) -> Dict[str, Any]:
        """Get suggestions with filtering and pagination, newest first."""
        ...

    def update_fields(self, id: int, changes: Dict[str, Any]) -> int:
        """Apply a single-row update; returns the number of rows affected."""
        ...

    def delete_by_id(self, id: int) -> int:
        """Delete a single row; returns the number of rows affected."""
        ...

    def count_by_status(self) -> List[Tuple[str, int]]:
        """Count suggestions grouped by stored status value."""
        ...

    def count(self) -> int:
        """Count all suggestions."""
        ...

    def get_most_recent(self) -> Optional[Suggestion]:
        """Get the newest suggestion."""
        ...

    def clear_category(self, category_id: int) -> int:
        """Detach suggestions from a category; returns the number of rows affected."""
        ...
