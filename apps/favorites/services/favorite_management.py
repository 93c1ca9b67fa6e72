"""Favorite management service - a user's list of favorite books."""

from django.db import transaction, IntegrityError
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.favorites.models import Favorite
from .exceptions import (
    DuplicateFavoriteError,
    FavoriteNotFoundError,
    InvalidFavoriteError,
)


FAVORITE_SORT_ORDERS = {
    'recent': '-created_at',
    'oldest': 'created_at',
}

NOTES_MAX_LENGTH = 500


@transaction.atomic
def add_favorite(*, user: User, book_id: str, notes: str = '') -> Favorite:
    """
    Add a book to user's favorites.

    Args:
        user: User adding the book
        book_id: External identifier of the book
        notes: Optional personal note (max 500 characters)

    Returns:
        Created Favorite

    Raises:
        InvalidFavoriteError: If book_id is empty or notes are too long
        DuplicateFavoriteError: If the book is already a favorite
    """
    book_id = (book_id or '').strip()
    if not book_id:
        raise InvalidFavoriteError("book_id is required")

    notes = (notes or '').strip()
    if len(notes) > NOTES_MAX_LENGTH:
        raise InvalidFavoriteError(f"Notes must not exceed {NOTES_MAX_LENGTH} characters")

    if Favorite.objects.filter(user=user, book_id=book_id).exists():
        raise DuplicateFavoriteError("Book is already in favorites")

    try:
        favorite = Favorite.objects.create(user=user, book_id=book_id, notes=notes)
    except IntegrityError:
        # Rare race condition: same book added by a concurrent request
        raise DuplicateFavoriteError("Book is already in favorites")

    return favorite


@transaction.atomic
def remove_favorite(*, user: User, book_id: str) -> None:
    """
    Remove a book from user's favorites.

    Raises:
        FavoriteNotFoundError: If the book is not in the user's favorites
    """
    deleted, _ = Favorite.objects.filter(user=user, book_id=book_id).delete()
    if not deleted:
        raise FavoriteNotFoundError("Favorite not found")


def get_user_favorites(*, user: User, sort_by: str = 'recent') -> QuerySet[Favorite]:
    """
    Get user's favorite books.

    Args:
        user: Owner of the favorites list
        sort_by: 'recent' or 'oldest'; unknown values fall back to 'recent'
    """
    ordering = FAVORITE_SORT_ORDERS.get(sort_by, FAVORITE_SORT_ORDERS['recent'])
    return Favorite.objects.filter(user=user).order_by(ordering)
