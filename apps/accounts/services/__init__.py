"""Accounts services: sign-up, login and logout."""

from .user_registration import register_user
from .sessions import issue_tokens, authenticate_user, logout_user
from .exceptions import (
    AccountsServiceError,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    InvalidTokenError,
)

__all__ = [
    'register_user',
    'issue_tokens',
    'authenticate_user',
    'logout_user',
    'AccountsServiceError',
    'UserRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'InvalidTokenError',
]
