import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.favorites.models import Favorite


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def reader(db):
    """Create and return a test user for favorites."""
    return User.objects.create_user(
        email='reader@example.com',
        password='TestPass123!',
        username='Book Reader',
    )


@pytest.fixture
def other_reader(db):
    """Create and return another test user for favorites."""
    return User.objects.create_user(
        email='other_reader@example.com',
        password='TestPass123!',
        username='Other Reader',
    )


@pytest.fixture
def reader_client(api_client, reader):
    """Return API client authenticated as reader."""
    refresh = RefreshToken.for_user(reader)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def favorite(db, reader):
    """Create a favorite book for reader."""
    return Favorite.objects.create(
        user=reader,
        book_id='zyTCAlFPjgYC',
        notes='Read every winter',
    )
