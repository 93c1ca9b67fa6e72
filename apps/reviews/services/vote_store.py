"""Vote store - durable record of individual (voter, review) votes."""

from django.db import transaction, IntegrityError
from django.db.models import Count, Q
from uuid import UUID
from typing import Optional

from apps.reviews.models import Vote
from .exceptions import VoteConflictError


def find_vote(*, voter_id: UUID, review_id: UUID) -> Optional[Vote]:
    """Return the voter's vote on a review, or None."""
    return Vote.objects.filter(voter_id=voter_id, review_id=review_id).first()


def create_vote(*, voter_id: UUID, review_id: UUID, like: bool) -> Vote:
    """
    Store a new vote.

    The insert runs in its own savepoint so a uniqueness violation leaves
    the surrounding transaction usable for the caller's rollback.

    Raises:
        VoteConflictError: If a vote for this (voter, review) already exists
    """
    try:
        with transaction.atomic():
            return Vote.objects.create(
                voter_id=voter_id,
                review_id=review_id,
                like=like,
            )
    except IntegrityError:
        raise VoteConflictError("A vote for this review was already recorded")


def update_vote_polarity(*, vote_id: UUID, like: bool) -> None:
    """Flip a stored vote to the given polarity."""
    vote = Vote.objects.get(id=vote_id)
    vote.like = like
    vote.save(update_fields=['like', 'updated_at'])


def delete_vote(*, vote_id: UUID) -> None:
    Vote.objects.filter(id=vote_id).delete()


def count_votes(*, review_id: UUID, like: Optional[bool] = None) -> int:
    """
    Count votes on a review.

    Args:
        review_id: Review UUID
        like: True for likes only, False for dislikes only, None for all

    Returns:
        Number of matching vote rows
    """
    queryset = Vote.objects.filter(review_id=review_id)
    if like is not None:
        queryset = queryset.filter(like=like)
    return queryset.count()


def tally_votes(*, review_id: UUID) -> tuple[int, int]:
    """Return (likes, dislikes) for a review in a single query."""
    totals = Vote.objects.filter(review_id=review_id).aggregate(
        likes=Count('id', filter=Q(like=True)),
        dislikes=Count('id', filter=Q(like=False)),
    )
    return totals['likes'], totals['dislikes']
