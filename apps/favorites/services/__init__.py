"""Favorites services - Business logic layer."""

from .favorite_management import (
    add_favorite,
    remove_favorite,
    get_user_favorites,
)

from .exceptions import (
    FavoritesServiceError,
    DuplicateFavoriteError,
    FavoriteNotFoundError,
    InvalidFavoriteError,
)

__all__ = [
    'add_favorite',
    'remove_favorite',
    'get_user_favorites',
    'FavoritesServiceError',
    'DuplicateFavoriteError',
    'FavoriteNotFoundError',
    'InvalidFavoriteError',
]
