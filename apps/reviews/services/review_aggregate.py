"""Review aggregate accessor - the denormalized like/dislike counters."""

from django.db.models import QuerySet
from uuid import UUID
from typing import Optional

from apps.reviews.models import Review


def find_by_id(review_id: UUID) -> Optional[Review]:
    return Review.objects.select_related('author').filter(id=review_id).first()


def lock_for_update(review_id: UUID) -> Optional[Review]:
    """
    Load a review and lock its row until the current transaction ends.

    Must be called inside ``transaction.atomic``.
    """
    return Review.objects.select_for_update().filter(id=review_id).first()


def save_counters(*, review_id: UUID, likes_count: int, dislikes_count: int) -> None:
    """
    Overwrite a review's vote counters.

    Runs as a plain UPDATE so it joins whatever transaction is open and
    leaves ``updated_at`` (the author's last edit) untouched.
    """
    Review.objects.filter(id=review_id).update(
        likes_count=likes_count,
        dislikes_count=dislikes_count,
    )


def iter_reviews() -> QuerySet[Review]:
    """All reviews in a stable order, for batch passes."""
    return Review.objects.only(
        'id', 'book_id', 'likes_count', 'dislikes_count'
    ).order_by('created_at', 'id')
