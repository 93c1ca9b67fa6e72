"""Domain exceptions for reviews app."""


class ReviewsServiceError(Exception):
    """Base exception for all reviews service errors."""
    pass


class ReviewNotFoundError(ReviewsServiceError):
    """Review does not exist."""
    pass


class DuplicateReviewError(ReviewsServiceError):
    """User already reviewed this book."""
    pass


class InvalidRatingError(ReviewsServiceError):
    """Rating must be between 1 and 5."""
    pass


class InvalidCommentError(ReviewsServiceError):
    """Comment is empty, too short or too long."""
    pass


class UnauthorizedReviewActionError(ReviewsServiceError):
    """User cannot modify this review."""
    pass


# Voting

class VotingError(ReviewsServiceError):
    """Base exception for vote casting and vote queries."""
    pass


class InvalidVoteError(VotingError):
    """Vote request is missing fields or carries a non-boolean polarity."""
    pass


class InvalidReviewIdError(VotingError):
    """Review identifier is not a valid UUID."""
    pass


class SelfVoteError(VotingError):
    """Authors cannot vote on their own reviews."""
    pass


class VoteConflictError(VotingError):
    """Another vote for the same (voter, review) pair was stored concurrently."""
    pass


class VoteStoreError(VotingError):
    """Vote or counter storage failed; nothing was committed."""
    pass
