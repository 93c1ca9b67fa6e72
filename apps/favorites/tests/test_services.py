"""Service layer tests for favorites app."""

import pytest

from apps.favorites.models import Favorite
from apps.favorites.services import (
    add_favorite,
    remove_favorite,
    get_user_favorites,
)
from apps.favorites.services.exceptions import (
    DuplicateFavoriteError,
    FavoriteNotFoundError,
    InvalidFavoriteError,
)


@pytest.mark.django_db
class TestFavoriteManagement:
    """Test favorites operations."""

    def test_add_favorite_success(self, reader):
        favorite = add_favorite(user=reader, book_id='abc123', notes='  gift idea ')

        assert favorite.id is not None
        assert favorite.user == reader
        assert favorite.book_id == 'abc123'
        assert favorite.notes == 'gift idea'

    def test_add_favorite_duplicate_rejected(self, reader, favorite):
        with pytest.raises(DuplicateFavoriteError) as exc:
            add_favorite(user=reader, book_id=favorite.book_id)

        assert "already in favorites" in str(exc.value)

    def test_same_book_for_different_users(self, reader, other_reader, favorite):
        other = add_favorite(user=other_reader, book_id=favorite.book_id)

        assert other.id != favorite.id
        assert Favorite.objects.filter(book_id=favorite.book_id).count() == 2

    def test_add_favorite_requires_book_id(self, reader):
        with pytest.raises(InvalidFavoriteError):
            add_favorite(user=reader, book_id='   ')

    def test_add_favorite_notes_too_long(self, reader):
        with pytest.raises(InvalidFavoriteError):
            add_favorite(user=reader, book_id='abc123', notes='x' * 501)

    def test_remove_favorite(self, reader, favorite):
        remove_favorite(user=reader, book_id=favorite.book_id)

        assert not Favorite.objects.filter(id=favorite.id).exists()

    def test_remove_other_users_favorite(self, other_reader, favorite):
        with pytest.raises(FavoriteNotFoundError):
            remove_favorite(user=other_reader, book_id=favorite.book_id)

        assert Favorite.objects.filter(id=favorite.id).exists()

    def test_get_user_favorites_sorting(self, reader):
        first = add_favorite(user=reader, book_id='first')
        second = add_favorite(user=reader, book_id='second')

        recent = list(get_user_favorites(user=reader))
        oldest = list(get_user_favorites(user=reader, sort_by='oldest'))

        assert recent == [second, first]
        assert oldest == [first, second]

    def test_get_user_favorites_only_own(self, reader, other_reader, favorite):
        add_favorite(user=other_reader, book_id='someone-else')

        assert list(get_user_favorites(user=reader)) == [favorite]
