"""Errors raised by the accounts services; views turn them into responses."""


class AccountsServiceError(Exception):
    """Root of the accounts error tree."""


class UserRegistrationError(AccountsServiceError):
    """Sign-up rejected: taken email or invalid username."""


class InvalidCredentialsError(AccountsServiceError):
    """Unknown email or wrong password."""


class InactiveAccountError(AccountsServiceError):
    """Correct credentials for a deactivated reader."""


class InvalidTokenError(AccountsServiceError):
    """Refresh token is malformed, expired or already revoked."""
