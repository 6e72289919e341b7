"""
Upvote Repository Interface.
"""

from typing import Dict, Iterable, Optional, Protocol

from suggestion_box.domain.models.upvote import Upvote


class UpvoteRepository(Protocol):
    """Interface for the upvote ledger storage."""

    def get_for_user(self, suggestion_id: int, user_id: int) -> Optional[Upvote]:
        """Get the upvote a user gave a suggestion, if any."""
        ...

    def create_if_absent(self, suggestion_id: int, user_id: int) -> bool:
        """Insert an upvote; False when the unique constraint rejected a duplicate."""
        ...

    def remove(self, suggestion_id: int, user_id: int) -> int:
        """Delete a user's upvote; returns the number of rows removed."""
        ...

    def count_for(self, suggestion_id: int) -> int:
        """Count upvotes for one suggestion."""
        ...

    def counts_for(self, suggestion_ids: Iterable[int]) -> Dict[int, int]:
        """Count upvotes for many suggestions in a single grouped query."""
        ...

    def delete_for_suggestion(self, suggestion_id: int) -> int:
        """Delete every upvote of a suggestion."""
        ...
