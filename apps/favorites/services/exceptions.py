"""Domain exceptions for favorites app."""


class FavoritesServiceError(Exception):
    """Base exception for all favorites service errors."""
    pass


class DuplicateFavoriteError(FavoritesServiceError):
    """Book is already in the user's favorites."""
    pass


class FavoriteNotFoundError(FavoritesServiceError):
    """Book is not in the user's favorites."""
    pass


class InvalidFavoriteError(FavoritesServiceError):
    """Missing book id or notes too long."""
    pass
