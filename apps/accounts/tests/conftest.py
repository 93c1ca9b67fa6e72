import pytest
from rest_framework.test import APIClient
from apps.accounts.models import User
from apps.accounts.services import issue_tokens

PASSWORD = 'Sh3lf-Reader!'


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def reader(db):
    """An active reader with a known password."""
    return User.objects.create_user(
        email='marta@example.com',
        username='Marta',
        password=PASSWORD,
    )


@pytest.fixture
def deactivated_reader(db):
    return User.objects.create_user(
        email='gone@example.com',
        username='Gone Reader',
        password=PASSWORD,
        is_active=False,
    )


@pytest.fixture
def reader_tokens(reader):
    """A refresh/access pair issued to ``reader``."""
    return issue_tokens(reader)


@pytest.fixture
def reader_client(reader_tokens):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {reader_tokens['access']}")
    return client
