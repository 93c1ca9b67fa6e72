import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.reviews.models import Review, Vote


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def review_author(db):
    """Create and return the author of the test review."""
    return User.objects.create_user(
        email='author@example.com',
        password='TestPass123!',
        username='Review Author',
    )


@pytest.fixture
def voter_a(db):
    """Create and return the first voter."""
    return User.objects.create_user(
        email='voter_a@example.com',
        password='TestPass123!',
        username='Voter A',
    )


@pytest.fixture
def voter_b(db):
    """Create and return the second voter."""
    return User.objects.create_user(
        email='voter_b@example.com',
        password='TestPass123!',
        username='Voter B',
    )


@pytest.fixture
def staff_user(db):
    """Create and return a staff user."""
    return User.objects.create_user(
        email='staff@example.com',
        password='TestPass123!',
        username='Staff',
        is_staff=True,
    )


@pytest.fixture
def author_client(review_author):
    """Return API client authenticated as the review author."""
    return _client_for(review_author)


@pytest.fixture
def voter_a_client(voter_a):
    """Return API client authenticated as voter A."""
    return _client_for(voter_a)


@pytest.fixture
def voter_b_client(voter_b):
    """Return API client authenticated as voter B."""
    return _client_for(voter_b)


@pytest.fixture
def staff_client(staff_user):
    """Return API client authenticated as staff."""
    return _client_for(staff_user)


@pytest.fixture
def review(db, review_author):
    """Create and return a review with no votes."""
    return Review.objects.create(
        book_id='zyTCAlFPjgYC',
        author=review_author,
        rating=4,
        comment='A slow start but worth it.',
    )


@pytest.fixture
def another_review(db, review_author):
    """Create and return a second review by the same author."""
    return Review.objects.create(
        book_id='8U2oAAAAQBAJ',
        author=review_author,
        rating=2,
        comment='Did not finish it.',
    )


@pytest.fixture
def drifted_review(db, review, voter_a, voter_b):
    """
    A review with one like and one dislike stored as votes, but counters
    that say otherwise.
    """
    Vote.objects.create(voter=voter_a, review=review, like=True)
    Vote.objects.create(voter=voter_b, review=review, like=False)
    Review.objects.filter(id=review.id).update(likes_count=5, dislikes_count=0)
    review.refresh_from_db()
    return review
