"""Service layer tests for accounts app."""

import pytest
from django.core.exceptions import ValidationError

from apps.accounts.models import User
from apps.accounts.services import (
    register_user,
    authenticate_user,
    logout_user,
    issue_tokens,
)
from apps.accounts.services.exceptions import (
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    InvalidTokenError,
)

PASSWORD = 'Sh3lf-Reader!'


@pytest.mark.django_db
class TestRegistration:

    def test_username_is_trimmed(self):
        user = register_user(email='Nuevo@Example.com', password=PASSWORD, username='  Ana  ')

        assert user.username == 'Ana'
        assert user.email == 'nuevo@example.com'
        assert user.check_password(PASSWORD)

    @pytest.mark.parametrize('username', ['', ' ', 'A', ' B ', 'x' * 51])
    def test_username_length_enforced(self, username):
        with pytest.raises(UserRegistrationError):
            register_user(email='nuevo@example.com', password=PASSWORD, username=username)

        assert not User.objects.filter(email='nuevo@example.com').exists()

    def test_username_need_not_be_unique(self, reader):
        other = register_user(email='other@example.com', password=PASSWORD, username=reader.username)

        assert other.username == reader.username

    def test_email_taken_in_any_case(self, reader):
        with pytest.raises(UserRegistrationError):
            register_user(email='MARTA@example.com', password=PASSWORD, username='Impostor')

    def test_manager_requires_username(self, db):
        with pytest.raises(ValueError):
            User.objects.create_user(email='x@example.com', username='   ', password=PASSWORD)

    def test_manager_validates_username_length(self, db):
        with pytest.raises(ValidationError):
            User.objects.create_user(email='x@example.com', username='Z', password=PASSWORD)


@pytest.mark.django_db
class TestLogin:

    def test_login_stamps_last_login(self, reader):
        assert reader.last_login is None

        user = authenticate_user(email=' Marta@Example.com ', password=PASSWORD)

        assert user == reader
        reader.refresh_from_db()
        assert reader.last_login is not None

    def test_wrong_password_and_unknown_email_look_the_same(self, reader):
        with pytest.raises(InvalidCredentialsError) as wrong_password:
            authenticate_user(email=reader.email, password='nope')
        with pytest.raises(InvalidCredentialsError) as unknown_email:
            authenticate_user(email='nobody@example.com', password=PASSWORD)

        assert str(wrong_password.value) == str(unknown_email.value)

    def test_deactivated_account(self, deactivated_reader):
        with pytest.raises(InactiveAccountError):
            authenticate_user(email=deactivated_reader.email, password=PASSWORD)


@pytest.mark.django_db
class TestLogout:

    def test_logout_revokes_refresh_token(self, reader, reader_tokens):
        logout_user(user=reader, refresh_token=reader_tokens['refresh'])

        with pytest.raises(InvalidTokenError):
            logout_user(user=reader, refresh_token=reader_tokens['refresh'])

    def test_cannot_revoke_someone_elses_token(self, reader, deactivated_reader):
        tokens = issue_tokens(deactivated_reader)

        with pytest.raises(InvalidTokenError):
            logout_user(user=reader, refresh_token=tokens['refresh'])

    @pytest.mark.parametrize('token', ['', 'not.a.jwt'])
    def test_garbage_token(self, reader, token):
        with pytest.raises(InvalidTokenError):
            logout_user(user=reader, refresh_token=token)

    def test_access_token_is_not_a_refresh_token(self, reader, reader_tokens):
        with pytest.raises(InvalidTokenError):
            logout_user(user=reader, refresh_token=reader_tokens['access'])
