"""
Comment Repository Interface.
"""

from typing import List

from suggestion_box.domain.models.comment import Comment
from suggestion_box.domain.repositories.base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    """Interface for Comment-specific operations."""

    def list_for_suggestion(self, suggestion_id: int, include_internal: bool) -> List[Comment]:
        """Comments of a suggestion, oldest first."""
        ...

    def delete_for_suggestion(self, suggestion_id: int) -> int:
        """Delete every comment of a suggestion."""
        ...
