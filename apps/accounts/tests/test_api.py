import pytest
from django.urls import reverse
from rest_framework import status

from apps.accounts.models import User
from apps.reviews.models import Review

PASSWORD = 'Sh3lf-Reader!'


@pytest.mark.django_db
class TestRegisterEndpoint:
    """POST /api/auth/register/"""

    def payload(self, **overrides):
        data = {
            'email': 'lucia@example.com',
            'username': 'Lucia',
            'password': PASSWORD,
            'password_confirm': PASSWORD,
        }
        data.update(overrides)
        return data

    def test_returns_user_and_token_pair(self, api_client):
        response = api_client.post(reverse('users:register'), self.payload(), format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['user']['username'] == 'Lucia'
        assert set(response.data['tokens']) == {'refresh', 'access'}
        assert 'password' not in response.data['user']

    def test_username_required(self, api_client):
        data = self.payload()
        del data['username']
        response = api_client.post(reverse('users:register'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'username' in response.data

    def test_short_username_after_trimming(self, api_client):
        response = api_client.post(reverse('users:register'), self.payload(username='  L  '), format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert not User.objects.exists()

    def test_password_mismatch(self, api_client):
        response = api_client.post(
            reverse('users:register'),
            self.payload(password_confirm='Different-Pass1!'),
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'password_confirm' in response.data

    def test_duplicate_email(self, api_client, reader):
        response = api_client.post(
            reverse('users:register'),
            self.payload(email=reader.email.upper()),
            format='json',
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'A user with this email already exists'


@pytest.mark.django_db
class TestLoginEndpoint:
    """POST /api/auth/login/"""

    def test_login(self, api_client, reader):
        response = api_client.post(
            reverse('users:login'),
            {'email': reader.email, 'password': PASSWORD},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['user']['id'] == str(reader.id)
        assert 'access' in response.data['tokens']

    def test_bad_credentials(self, api_client, reader):
        response = api_client.post(
            reverse('users:login'),
            {'email': reader.email, 'password': 'wrong-password'},
            format='json',
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.data == {'error': 'Invalid email or password'}

    def test_deactivated(self, api_client, deactivated_reader):
        response = api_client.post(
            reverse('users:login'),
            {'email': deactivated_reader.email, 'password': PASSWORD},
            format='json',
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN


@pytest.mark.django_db
class TestLogoutEndpoint:
    """POST /api/auth/logout/"""

    def test_logout_blocks_refresh(self, reader_client, reader_tokens):
        response = reader_client.post(
            reverse('users:logout'),
            {'refresh': reader_tokens['refresh']},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'message': 'Logout successful'}

        refresh = reader_client.post(
            reverse('token_refresh'),
            {'refresh': reader_tokens['refresh']},
            format='json',
        )
        assert refresh.status_code == status.HTTP_401_UNAUTHORIZED

    def test_logout_twice(self, reader_client, reader_tokens):
        url = reverse('users:logout')
        reader_client.post(url, {'refresh': reader_tokens['refresh']}, format='json')
        response = reader_client.post(url, {'refresh': reader_tokens['refresh']}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'error': 'Invalid token'}

    def test_refresh_required(self, reader_client):
        response = reader_client.post(reverse('users:logout'), {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'refresh' in response.data

    def test_requires_authentication(self, api_client, reader_tokens):
        response = api_client.post(
            reverse('users:logout'),
            {'refresh': reader_tokens['refresh']},
            format='json',
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestCurrentUserEndpoint:
    """GET /api/auth/user/"""

    def test_profile(self, reader_client, reader):
        response = reader_client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == reader.email
        assert response.data['username'] == 'Marta'

    def test_anonymous(self, api_client):
        response = api_client.get(reverse('users:current-user'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert 'error' in response.data


@pytest.mark.django_db
class TestUsernameOnReviews:

    def test_review_shows_author_username(self, api_client, reader):
        review = Review.objects.create(
            book_id='zyTCAlFPjgYC',
            author=reader,
            rating=5,
            comment='Reread it twice.',
        )

        response = api_client.get(reverse('reviews:review-detail', kwargs={'pk': review.id}))

        assert response.data['username'] == 'Marta'
        assert response.data['author'] == {'id': str(reader.id), 'username': 'Marta'}
