"""Reader sign-up."""

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from config.logging import get_logger
from apps.accounts.models import USERNAME_MIN_LENGTH, USERNAME_MAX_LENGTH
from .exceptions import UserRegistrationError

User = get_user_model()
logger = get_logger(__name__)


def _clean_username(username: str) -> str:
    username = (username or '').strip()
    if not (USERNAME_MIN_LENGTH <= len(username) <= USERNAME_MAX_LENGTH):
        raise UserRegistrationError(
            f"Username must be between {USERNAME_MIN_LENGTH} and {USERNAME_MAX_LENGTH} characters"
        )
    return username


@transaction.atomic
def register_user(*, email: str, password: str, username: str) -> User:
    """
    Create a reader account.

    Args:
        email: Login email, stored lowercased and unique regardless of case
        password: Raw password, hashed before storage
        username: Public name shown on reviews (2-50 characters after trimming)

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: If the email is taken or the username is invalid
    """
    username = _clean_username(username)
    email = User.objects.normalize_email(email.strip()).lower()

    if User.objects.filter(email=email).exists():
        raise UserRegistrationError("A user with this email already exists")

    try:
        user = User.objects.create_user(email=email, username=username, password=password)
    except IntegrityError:
        raise UserRegistrationError("A user with this email already exists")

    logger.info("user_registered", user_id=str(user.id))
    return user
