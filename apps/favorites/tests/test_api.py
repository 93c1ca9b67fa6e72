import pytest
from django.urls import reverse
from rest_framework import status
from apps.favorites.models import Favorite


@pytest.mark.django_db
class TestFavoritesList:
    """Tests for GET /api/favorites/"""

    def test_list_favorites(self, reader_client, favorite):
        url = reverse('favorites:favorites')
        response = reader_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['count'] == 1
        assert response.data['sortBy'] == 'recent'
        assert response.data['favorites'][0]['book_id'] == favorite.book_id

    def test_list_favorites_unauthenticated(self, api_client):
        url = reverse('favorites:favorites')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert 'error' in response.data


@pytest.mark.django_db
class TestFavoritesAdd:
    """Tests for POST /api/favorites/"""

    def test_add_favorite(self, reader_client, reader):
        url = reverse('favorites:favorites')
        response = reader_client.post(url, {'book_id': 'abc123'}, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['book_id'] == 'abc123'
        assert Favorite.objects.filter(user=reader, book_id='abc123').exists()

    def test_add_favorite_duplicate(self, reader_client, favorite):
        url = reverse('favorites:favorites')
        response = reader_client.post(url, {'book_id': favorite.book_id}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_add_favorite_missing_book_id(self, reader_client):
        url = reverse('favorites:favorites')
        response = reader_client.post(url, {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data['error'] == 'book_id is required'


@pytest.mark.django_db
class TestFavoritesRemove:
    """Tests for DELETE /api/favorites/"""

    def test_remove_favorite(self, reader_client, favorite):
        url = reverse('favorites:favorites')
        response = reader_client.delete(url, {'book_id': favorite.book_id}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert not Favorite.objects.filter(id=favorite.id).exists()

    def test_remove_missing_favorite(self, reader_client):
        url = reverse('favorites:favorites')
        response = reader_client.delete(url, {'book_id': 'not-there'}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
