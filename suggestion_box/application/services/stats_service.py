"""Stats service — status histogram, batched upvote counts and the change poll."""

from typing import Dict, Iterable

from suggestion_box.domain.models.suggestion import STATUSES
from suggestion_box.domain.repositories.suggestion_repository import SuggestionRepository
from suggestion_box.domain.repositories.upvote_repository import UpvoteRepository
from suggestion_box.domain.schemas.suggestion import ChangesSummary, StatusCounts


def status_counts(repo: SuggestionRepository) -> StatusCounts:
    """Count suggestions per status; unknown statuses only add to the total."""
    buckets = {status: 0 for status in STATUSES}
    total = 0
    for status, count in repo.count_by_status():
        total += count
        if status in buckets:
            buckets[status] += count

    return StatusCounts.model_validate({"total": total, **buckets})


def upvote_counts(repo: UpvoteRepository, suggestion_ids: Iterable[int]) -> Dict[int, int]:
    return repo.counts_for(suggestion_ids)


def changes_since(repo: SuggestionRepository) -> ChangesSummary:
    most_recent = repo.get_most_recent()
    return ChangesSummary(
        count=repo.count(),
        most_recent_id=most_recent.id if most_recent else None,
        most_recent_created_at=most_recent.created_at if most_recent else None,
    )
