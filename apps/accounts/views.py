from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    UserSerializer,
    UserRegistrationSerializer,
    UserLoginSerializer,
    LogoutSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    logout_user,
    issue_tokens,
    UserRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    InvalidTokenError,
)


class TokenPairSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class SessionResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokenPairSerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


def _session_response(message, user, status_code=status.HTTP_200_OK):
    return Response({
        'message': message,
        'user': UserSerializer(user).data,
        'tokens': issue_tokens(user),
    }, status=status_code)


@extend_schema(
    request=UserRegistrationSerializer,
    responses={201: SessionResponseSerializer, 400: ErrorResponseSerializer},
    description="Create a reader account and start a session.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def register(request):
    serializer = UserRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = register_user(**serializer.validated_data)
    except UserRegistrationError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return _session_response('Registration successful', user, status.HTTP_201_CREATED)


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: SessionResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Exchange email and password for a JWT pair.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = authenticate_user(**serializer.validated_data)
    except InvalidCredentialsError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return _session_response('Login successful', user)


@extend_schema(
    request=LogoutSerializer,
    responses={200: MessageResponseSerializer, 400: ErrorResponseSerializer},
    description="End the session by revoking its refresh token.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def logout(request):
    """Revoke the caller's refresh token."""
    serializer = LogoutSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        logout_user(user=request.user, refresh_token=serializer.validated_data['refresh'])
    except InvalidTokenError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({'message': 'Logout successful'})


@extend_schema(
    responses={200: UserSerializer},
    description="Profile of the signed-in reader.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def current_user(request):
    return Response(UserSerializer(request.user).data)
