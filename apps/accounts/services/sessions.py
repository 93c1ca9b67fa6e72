"""Login and logout for reader accounts."""

from django.contrib.auth import get_user_model
from django.contrib.auth.models import update_last_login
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from config.logging import get_logger
from .exceptions import InvalidCredentialsError, InactiveAccountError, InvalidTokenError

User = get_user_model()
logger = get_logger(__name__)


def issue_tokens(user: User) -> dict[str, str]:
    """Return a fresh refresh/access JWT pair for the user."""
    refresh = RefreshToken.for_user(user)
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


def authenticate_user(*, email: str, password: str) -> User:
    """
    Check a reader's credentials and stamp ``last_login``.

    Unknown emails and wrong passwords get the same error so the response
    does not reveal which accounts exist.

    Raises:
        InvalidCredentialsError: If the credentials do not match
        InactiveAccountError: If the account is deactivated
    """
    email = User.objects.normalize_email(email.strip()).lower()
    user = User.objects.filter(email=email).first()

    if user is None or not user.check_password(password):
        logger.info("login_failed")
        raise InvalidCredentialsError("Invalid email or password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    update_last_login(None, user)
    logger.info("user_logged_in", user_id=str(user.id))
    return user


def logout_user(*, user: User, refresh_token: str) -> None:
    """
    Revoke a refresh token so it can no longer mint access tokens.

    Access tokens already issued stay valid until they expire.

    Raises:
        InvalidTokenError: If the token is invalid, revoked or belongs to
            another user
    """
    if not refresh_token or not isinstance(refresh_token, str):
        raise InvalidTokenError("Invalid token")

    try:
        token = RefreshToken(refresh_token)
    except TokenError as exc:
        raise InvalidTokenError("Invalid token") from exc

    if str(token.get('user_id')) != str(user.pk):
        raise InvalidTokenError("Invalid token")

    token.blacklist()

    logger.info("user_logged_out", user_id=str(user.pk))
