"""
Vote counter reconciliation.

The vote rows are the source of truth; review counters are a cache of
them. The audit only reads. Repairs lock each review row while they recount
it, the same lock a cast takes, so a correction never overwrites a cast that
committed in between.
"""

from dataclasses import dataclass, field
from django.db import transaction, DatabaseError
from uuid import UUID

from config.logging import get_logger
from apps.reviews.models import Review
from . import review_aggregate, vote_store
from .exceptions import ReviewNotFoundError

logger = get_logger(__name__)


@dataclass(frozen=True)
class CounterDrift:
    review_id: UUID
    book_id: str
    stored_likes: int
    stored_dislikes: int
    actual_likes: int
    actual_dislikes: int


@dataclass
class AuditReport:
    total_reviews: int = 0
    details: list[CounterDrift] = field(default_factory=list)

    @property
    def inconsistent_reviews(self) -> int:
        return len(self.details)


@dataclass
class ReconcileSummary:
    total_reviews: int = 0
    updated_reviews: int = 0
    errors: int = 0


def audit_vote_counts() -> AuditReport:
    """
    Compare every review's counters with its vote rows. Read only.

    Returns:
        AuditReport listing each review whose counters differ
    """
    report = AuditReport()

    for review in review_aggregate.iter_reviews():
        report.total_reviews += 1
        actual_likes, actual_dislikes = vote_store.tally_votes(review_id=review.id)

        if (review.likes_count, review.dislikes_count) != (actual_likes, actual_dislikes):
            report.details.append(CounterDrift(
                review_id=review.id,
                book_id=review.book_id,
                stored_likes=review.likes_count,
                stored_dislikes=review.dislikes_count,
                actual_likes=actual_likes,
                actual_dislikes=actual_dislikes,
            ))

    logger.info(
        "vote_audit_completed",
        total_reviews=report.total_reviews,
        inconsistent_reviews=report.inconsistent_reviews,
    )
    return report


def _reconcile(review: Review) -> bool:
    """
    Recount one review under its row lock. Call inside ``transaction.atomic``.

    ``review`` may be a stale snapshot; the stored counters are re-read.
    """
    review = review_aggregate.lock_for_update(review.id)
    if review is None:
        return False

    likes, dislikes = vote_store.tally_votes(review_id=review.id)
    if (review.likes_count, review.dislikes_count) == (likes, dislikes):
        return False

    review_aggregate.save_counters(
        review_id=review.id,
        likes_count=likes,
        dislikes_count=dislikes,
    )
    logger.info(
        "vote_counters_corrected",
        review_id=str(review.id),
        likes=f"{review.likes_count}->{likes}",
        dislikes=f"{review.dislikes_count}->{dislikes}",
    )
    return True


@transaction.atomic
def reconcile_review(*, review_id: UUID) -> bool:
    """
    Recompute one review's counters from its votes.

    Returns:
        True if the stored counters were wrong and have been overwritten

    Raises:
        ReviewNotFoundError: If review doesn't exist
    """
    review = review_aggregate.find_by_id(review_id)
    if review is None:
        raise ReviewNotFoundError("Review not found")
    return _reconcile(review)


def reconcile_vote_counts() -> ReconcileSummary:
    """
    Recompute counters for every review and overwrite those that drifted.

    Each review is corrected in its own transaction; a database error on
    one review is logged and counted and the pass moves on.

    Returns:
        ReconcileSummary with totals, corrections and error count
    """
    summary = ReconcileSummary()
    logger.info("vote_reconcile_started")

    for review in review_aggregate.iter_reviews():
        summary.total_reviews += 1
        try:
            with transaction.atomic():
                if _reconcile(review):
                    summary.updated_reviews += 1
        except DatabaseError:
            summary.errors += 1
            logger.exception("vote_reconcile_review_failed", review_id=str(review.id))

    logger.info(
        "vote_reconcile_completed",
        total_reviews=summary.total_reviews,
        updated_reviews=summary.updated_reviews,
        errors=summary.errors,
    )
    return summary
