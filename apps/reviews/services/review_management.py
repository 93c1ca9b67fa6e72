"""Review management service - CRUD operations for reviews."""

from django.db import transaction, IntegrityError
from django.db.models import QuerySet
from uuid import UUID
from typing import Optional

from apps.accounts.models import User
from apps.reviews.models import Review, COMMENT_MIN_LENGTH, COMMENT_MAX_LENGTH
from .exceptions import (
    ReviewNotFoundError,
    DuplicateReviewError,
    InvalidRatingError,
    InvalidCommentError,
    UnauthorizedReviewActionError,
)


REVIEW_SORT_ORDERS = {
    'recent': ('-created_at',),
    'oldest': ('created_at',),
    'rating': ('-rating', '-created_at'),
}


def _validate_rating(rating: int) -> None:
    if not (1 <= rating <= 5):
        raise InvalidRatingError("Rating must be between 1 and 5")


def _clean_comment(comment: str) -> str:
    comment = (comment or '').strip()
    if not (COMMENT_MIN_LENGTH <= len(comment) <= COMMENT_MAX_LENGTH):
        raise InvalidCommentError(
            f"Comment must be between {COMMENT_MIN_LENGTH} and {COMMENT_MAX_LENGTH} characters"
        )
    return comment


@transaction.atomic
def create_review(
    *,
    author: User,
    book_id: str,
    rating: int,
    comment: str
) -> Review:
    """
    Create a new review for a book.

    Vote counters always start at zero.

    Args:
        author: User creating the review
        book_id: External identifier of the reviewed book
        rating: Overall rating (1-5)
        comment: Review text (5-1000 characters after trimming)

    Returns:
        Created Review instance

    Raises:
        InvalidRatingError: If rating not in 1-5 range
        InvalidCommentError: If comment length is out of range
        DuplicateReviewError: If user already reviewed this book
    """
    _validate_rating(rating)
    comment = _clean_comment(comment)

    if Review.objects.filter(author=author, book_id=book_id).exists():
        raise DuplicateReviewError(
            "You have already reviewed this book. Please update your existing review instead."
        )

    try:
        review = Review.objects.create(
            book_id=book_id,
            author=author,
            rating=rating,
            comment=comment,
        )
    except IntegrityError:
        # Database unique constraint caught duplicate
        raise DuplicateReviewError("You have already reviewed this book")

    return review


def get_review_by_id(*, review_id: UUID) -> Review:
    """
    Retrieve a review by ID.

    Raises:
        ReviewNotFoundError: If review doesn't exist
    """
    try:
        review = Review.objects.select_related('author').get(id=review_id)
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")

    return review


@transaction.atomic
def update_review(
    *,
    review_id: UUID,
    user: User,
    rating: Optional[int] = None,
    comment: Optional[str] = None
) -> Review:
    """
    Update an existing review.

    Only the review author can update their review. Book, author and vote
    counters cannot be changed here.

    Args:
        review_id: UUID of review to update
        user: User making the update (must be author)
        rating: New overall rating (1-5)
        comment: New review text

    Returns:
        Updated Review instance

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user is not the author
        InvalidRatingError: If rating not in 1-5 range
        InvalidCommentError: If comment length is out of range
    """
    try:
        review = (
            Review.objects
            .select_for_update()
            .get(id=review_id)
        )
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")

    if review.author_id != user.pk:
        raise UnauthorizedReviewActionError(
            "Only the author can update the review"
        )

    update_fields = ['updated_at']
    if rating is not None:
        _validate_rating(rating)
        review.rating = rating
        update_fields.append('rating')
    if comment is not None:
        review.comment = _clean_comment(comment)
        update_fields.append('comment')

    # Counters may have moved since the row was read by another request;
    # only the author's fields are written back.
    review.save(update_fields=update_fields)

    return review


@transaction.atomic
def delete_review(*, review_id: UUID, user: User) -> None:
    """
    Delete a review together with its votes.

    Raises:
        ReviewNotFoundError: If review doesn't exist
        UnauthorizedReviewActionError: If user is not the author
    """
    try:
        review = (
            Review.objects
            .select_for_update()
            .get(id=review_id)
        )
    except Review.DoesNotExist:
        raise ReviewNotFoundError("Review not found")

    if review.author_id != user.pk:
        raise UnauthorizedReviewActionError(
            "Only the author can delete the review"
        )

    # CASCADE removes the review's votes
    review.delete()


def get_user_reviews(*, user: User, sort_by: str = 'recent') -> QuerySet[Review]:
    """
    Get all reviews written by a user.

    Args:
        user: Review author
        sort_by: 'recent', 'oldest' or 'rating'; unknown values fall back to 'recent'
    """
    ordering = REVIEW_SORT_ORDERS.get(sort_by, REVIEW_SORT_ORDERS['recent'])
    return Review.objects.filter(author=user).select_related('author').order_by(*ordering)


def get_book_reviews(*, book_id: str) -> QuerySet[Review]:
    """Get all reviews of a book, newest first."""
    return (
        Review.objects
        .filter(book_id=book_id)
        .select_related('author')
        .order_by('-created_at')
    )
