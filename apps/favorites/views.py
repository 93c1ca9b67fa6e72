from rest_framework import status, serializers as drf_serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .serializers import FavoriteSerializer, FavoriteRequestSerializer, FavoriteListSerializer
from .services import (
    add_favorite,
    remove_favorite,
    get_user_favorites,
    DuplicateFavoriteError,
    FavoriteNotFoundError,
    InvalidFavoriteError,
)


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class MessageResponseSerializer(drf_serializers.Serializer):
    message = drf_serializers.CharField()


@extend_schema(
    methods=['GET'],
    parameters=[
        OpenApiParameter('sort_by', OpenApiTypes.STR, enum=['recent', 'oldest'], default='recent'),
    ],
    responses={200: FavoriteListSerializer},
    description="List the current user's favorite books.",
    tags=['favorites'],
)
@extend_schema(
    methods=['POST'],
    request=FavoriteRequestSerializer,
    responses={201: FavoriteSerializer, 400: ErrorResponseSerializer},
    description="Add a book to the current user's favorites.",
    tags=['favorites'],
)
@extend_schema(
    methods=['DELETE'],
    request=FavoriteRequestSerializer,
    responses={200: MessageResponseSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    description="Remove a book from the current user's favorites.",
    tags=['favorites'],
)
@api_view(['GET', 'POST', 'DELETE'])
@permission_classes([IsAuthenticated])
def favorites(request):
    """List, add or remove favorite books using service layer."""
    if request.method == 'GET':
        sort_by = request.query_params.get('sort_by', 'recent')
        entries = get_user_favorites(user=request.user, sort_by=sort_by)
        return Response({
            'favorites': FavoriteSerializer(entries, many=True).data,
            'count': len(entries),
            'sortBy': sort_by,
        })

    book_id = request.data.get('book_id') or request.query_params.get('book_id')
    if not book_id:
        return Response(
            {'error': 'book_id is required'},
            status=status.HTTP_400_BAD_REQUEST
        )

    if request.method == 'DELETE':
        try:
            remove_favorite(user=request.user, book_id=book_id)
        except FavoriteNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response({'message': 'Book removed from favorites'})

    try:
        favorite = add_favorite(
            user=request.user,
            book_id=book_id,
            notes=request.data.get('notes', ''),
        )
    except (DuplicateFavoriteError, InvalidFavoriteError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(FavoriteSerializer(favorite).data, status=status.HTTP_201_CREATED)
