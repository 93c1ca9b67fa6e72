"""
Reviews services - Business logic layer.

This package contains all business operations for the reviews app:
- Review CRUD operations
- Vote casting (the only writer of review vote counters)
- Vote counter audit and reconciliation
"""

from .review_management import (
    create_review,
    get_review_by_id,
    update_review,
    delete_review,
    get_user_reviews,
    get_book_reviews,
)

from .voting import (
    VoteAction,
    VoteResult,
    apply_vote,
    cast_vote,
    get_user_vote,
)

from .reconciliation import (
    AuditReport,
    CounterDrift,
    ReconcileSummary,
    audit_vote_counts,
    reconcile_review,
    reconcile_vote_counts,
)

# Domain Exceptions
from .exceptions import (
    ReviewsServiceError,
    ReviewNotFoundError,
    DuplicateReviewError,
    InvalidRatingError,
    InvalidCommentError,
    UnauthorizedReviewActionError,
    VotingError,
    InvalidVoteError,
    InvalidReviewIdError,
    SelfVoteError,
    VoteConflictError,
    VoteStoreError,
)

__all__ = [
    # Review Management Services
    'create_review',
    'get_review_by_id',
    'update_review',
    'delete_review',
    'get_user_reviews',
    'get_book_reviews',
    # Voting Services
    'VoteAction',
    'VoteResult',
    'apply_vote',
    'cast_vote',
    'get_user_vote',
    # Reconciliation Services
    'AuditReport',
    'CounterDrift',
    'ReconcileSummary',
    'audit_vote_counts',
    'reconcile_review',
    'reconcile_vote_counts',
    # Exceptions
    'ReviewsServiceError',
    'ReviewNotFoundError',
    'DuplicateReviewError',
    'InvalidRatingError',
    'InvalidCommentError',
    'UnauthorizedReviewActionError',
    'VotingError',
    'InvalidVoteError',
    'InvalidReviewIdError',
    'SelfVoteError',
    'VoteConflictError',
    'VoteStoreError',
]
