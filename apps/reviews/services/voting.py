"""
Vote coordinator - the only writer of votes and review vote counters.

A cast moves a (voter, review) pair between three states:

    NoVote   --like-->    Liked       (+1 like)
    NoVote   --dislike--> Disliked    (+1 dislike)
    Liked    --like-->    NoVote      (-1 like, toggle off)
    Liked    --dislike--> Disliked    (-1 like, +1 dislike, flip)
    Disliked --dislike--> NoVote      (-1 dislike, toggle off)
    Disliked --like-->    Liked       (-1 dislike, +1 like, flip)

The vote row and the review counters are written in one transaction with
the review row locked, so concurrent casts on the same review serialize
and either both stores change or neither does.
"""

from dataclasses import dataclass
from django.conf import settings
from django.db import models, transaction, DatabaseError
from uuid import UUID
from typing import Any, Optional

from config.logging import get_logger
from apps.accounts.models import User
from apps.reviews.models import Review
from . import review_aggregate, vote_store
from .exceptions import (
    InvalidVoteError,
    InvalidReviewIdError,
    ReviewNotFoundError,
    SelfVoteError,
    VoteConflictError,
    VoteStoreError,
)

logger = get_logger(__name__)


class VoteAction(models.TextChoices):
    CREATED = 'created', 'Vote recorded'
    REMOVED = 'removed', 'Vote removed'
    FLIPPED = 'flipped', 'Vote changed'


@dataclass(frozen=True)
class VoteTransition:
    """Outcome of applying one cast to a pair's current vote."""

    action: VoteAction
    likes_count: int
    dislikes_count: int
    like: Optional[bool]  # polarity after the cast, None once removed


@dataclass(frozen=True)
class VoteResult:
    """
    What a cast returns to the caller.

    ``review`` and ``total_votes`` are read after commit; ``user_vote`` is
    the voter's vote as this cast left it: 'like', 'dislike' or None.
    """

    review: Review
    total_votes: int
    action: VoteAction
    user_vote: Optional[str]


def apply_vote(
    *,
    current: Optional[bool],
    like: bool,
    likes_count: int,
    dislikes_count: int
) -> VoteTransition:
    """
    Compute the new vote state and counters for a cast.

    Args:
        current: Polarity of the existing vote, or None if there is none
        like: Polarity being cast
        likes_count: Stored likes counter
        dislikes_count: Stored dislikes counter

    Returns:
        VoteTransition with both counters floored at zero
    """
    likes_delta = 0
    dislikes_delta = 0

    if current is None:
        action = VoteAction.CREATED
        new_like = like
        if like:
            likes_delta = 1
        else:
            dislikes_delta = 1
    elif current == like:
        action = VoteAction.REMOVED
        new_like = None
        if like:
            likes_delta = -1
        else:
            dislikes_delta = -1
    else:
        action = VoteAction.FLIPPED
        new_like = like
        if like:
            likes_delta, dislikes_delta = 1, -1
        else:
            likes_delta, dislikes_delta = -1, 1

    return VoteTransition(
        action=action,
        likes_count=max(0, likes_count + likes_delta),
        dislikes_count=max(0, dislikes_count + dislikes_delta),
        like=new_like,
    )


def parse_review_id(review_id: Any) -> UUID:
    """
    Validate a client-supplied review identifier.

    Raises:
        InvalidVoteError: If the identifier is missing
        InvalidReviewIdError: If it is not a UUID
    """
    if review_id is None or review_id == '':
        raise InvalidVoteError("Invalid input")
    if isinstance(review_id, UUID):
        return review_id
    try:
        return UUID(str(review_id))
    except ValueError:
        raise InvalidReviewIdError("Invalid review ID")


def _polarity(like: Optional[bool]) -> Optional[str]:
    if like is None:
        return None
    return 'like' if like else 'dislike'


def _apply_cast(*, review_id: UUID, voter: User, like: bool) -> VoteTransition:
    """Run one cast attempt as a single transaction."""
    try:
        with transaction.atomic():
            review = review_aggregate.lock_for_update(review_id)
            if review is None:
                raise ReviewNotFoundError("Review not found")

            if review.author_id == voter.pk:
                raise SelfVoteError("You cannot vote your own review")

            existing = vote_store.find_vote(voter_id=voter.pk, review_id=review_id)
            transition = apply_vote(
                current=existing.like if existing else None,
                like=like,
                likes_count=review.likes_count,
                dislikes_count=review.dislikes_count,
            )

            if transition.action == VoteAction.CREATED:
                vote_store.create_vote(voter_id=voter.pk, review_id=review_id, like=like)
            elif transition.action == VoteAction.REMOVED:
                vote_store.delete_vote(vote_id=existing.id)
            else:
                vote_store.update_vote_polarity(vote_id=existing.id, like=like)

            review_aggregate.save_counters(
                review_id=review_id,
                likes_count=transition.likes_count,
                dislikes_count=transition.dislikes_count,
            )
    except DatabaseError as exc:
        logger.exception(
            "vote_cast_failed",
            review_id=str(review_id),
            voter_id=str(voter.pk),
        )
        raise VoteStoreError("Error recording vote") from exc

    return transition


def cast_vote(*, review_id: Any, voter: User, like: Any) -> VoteResult:
    """
    Cast, flip or withdraw a vote on a review.

    Casting the same polarity twice withdraws the vote; casting the opposite
    polarity flips it. A cast that loses a race to create the pair's first
    vote is retried ``VOTE_CONFLICT_RETRIES`` times.

    The returned review and vote total are re-read after commit and may
    already include other users' concurrent casts.

    Args:
        review_id: Review UUID (or its string form)
        voter: Authenticated user casting the vote
        like: True for like, False for dislike (must be a real bool)

    Returns:
        VoteResult with the refreshed review, total vote count, the action
        taken and the voter's resulting vote

    Raises:
        InvalidVoteError: Missing review id or non-boolean polarity
        InvalidReviewIdError: Review id is not a UUID
        ReviewNotFoundError: Review doesn't exist
        SelfVoteError: Voter is the review's author
        VoteStoreError: Storage failure or unresolved conflict; safe to retry
    """
    if review_id is None or not isinstance(like, bool):
        raise InvalidVoteError("Invalid input")
    review_uuid = parse_review_id(review_id)

    retries = settings.VOTE_CONFLICT_RETRIES
    attempt = 0
    while True:
        try:
            transition = _apply_cast(review_id=review_uuid, voter=voter, like=like)
            break
        except VoteConflictError as exc:
            if attempt >= retries:
                logger.error(
                    "vote_conflict_unresolved",
                    review_id=str(review_uuid),
                    voter_id=str(voter.pk),
                    attempts=attempt + 1,
                )
                raise VoteStoreError("Error recording vote") from exc
            attempt += 1
            logger.warning(
                "vote_conflict_retry",
                review_id=str(review_uuid),
                voter_id=str(voter.pk),
                attempt=attempt,
            )

    logger.info(
        "vote_cast",
        review_id=str(review_uuid),
        voter_id=str(voter.pk),
        action=transition.action.value,
        likes_count=transition.likes_count,
        dislikes_count=transition.dislikes_count,
    )

    review = review_aggregate.find_by_id(review_uuid)
    if review is None:
        raise ReviewNotFoundError("Review not found")

    return VoteResult(
        review=review,
        total_votes=vote_store.count_votes(review_id=review_uuid),
        action=transition.action,
        user_vote=_polarity(transition.like),
    )


def get_user_vote(*, review_id: Any, voter: User) -> Optional[str]:
    """
    Return the voter's current vote on a review.

    Reads the vote store directly, never the review counters.

    Returns:
        'like', 'dislike' or None

    Raises:
        InvalidVoteError: Missing review id
        InvalidReviewIdError: Review id is not a UUID
        ReviewNotFoundError: Review doesn't exist
    """
    review_uuid = parse_review_id(review_id)

    if review_aggregate.find_by_id(review_uuid) is None:
        raise ReviewNotFoundError("Review not found")

    vote = vote_store.find_vote(voter_id=voter.pk, review_id=review_uuid)
    return _polarity(vote.like if vote else None)
