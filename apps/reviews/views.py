from uuid import UUID

from rest_framework import status, viewsets, serializers as drf_serializers
from rest_framework.decorators import api_view, action, permission_classes
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly, IsAdminUser
from rest_framework.response import Response
from rest_framework.pagination import PageNumberPagination
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .models import Review
from .permissions import IsReviewAuthorOrReadOnly
from .serializers import (
    ReviewSerializer,
    ReviewCreateSerializer,
    ReviewUpdateSerializer,
    VoteReviewSerializer,
    CastVoteRequestSerializer,
    CastVoteResponseSerializer,
    UserVoteResponseSerializer,
    AuditReportSerializer,
    ReconcileSummarySerializer,
)
from .services import (
    create_review,
    update_review,
    delete_review,
    get_user_reviews,
    cast_vote,
    get_user_vote,
    audit_vote_counts,
    reconcile_vote_counts,
)
from .services.exceptions import (
    ReviewNotFoundError,
    DuplicateReviewError,
    InvalidRatingError,
    InvalidCommentError,
    UnauthorizedReviewActionError,
    VotingError,
    InvalidVoteError,
    InvalidReviewIdError,
    SelfVoteError,
)


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class ReviewPagination(PageNumberPagination):
    """Custom pagination for reviews."""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


def _voting_error_status(exc: VotingError) -> int:
    """HTTP status for a voting service error."""
    if isinstance(exc, (InvalidVoteError, InvalidReviewIdError)):
        return status.HTTP_400_BAD_REQUEST
    if isinstance(exc, SelfVoteError):
        return status.HTTP_403_FORBIDDEN
    return status.HTTP_500_INTERNAL_SERVER_ERROR


class ReviewViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Review CRUD operations.

    list: Get all reviews (filter by book_id or author)
    create: Create a new review
    retrieve: Get a specific review
    update: Update a review (author only)
    partial_update: Partially update a review (author only)
    destroy: Delete a review and its votes (author only)
    """

    queryset = Review.objects.select_related('author')
    serializer_class = ReviewSerializer
    permission_classes = [IsAuthenticatedOrReadOnly, IsReviewAuthorOrReadOnly]
    pagination_class = ReviewPagination

    def get_queryset(self):
        """
        Filter reviews based on query parameters.

        Filters:
        - book_id: External book identifier
        - author: UUID of author
        """
        queryset = super().get_queryset()

        book_id = self.request.query_params.get('book_id')
        if book_id:
            queryset = queryset.filter(book_id=book_id)

        author_id = self.request.query_params.get('author')
        if author_id:
            try:
                queryset = queryset.filter(author_id=UUID(author_id))
            except ValueError:
                return queryset.none()

        return queryset.order_by('-created_at')

    def get_serializer_class(self):
        if self.action == 'create':
            return ReviewCreateSerializer
        if self.action in ('update', 'partial_update'):
            return ReviewUpdateSerializer
        return ReviewSerializer

    @extend_schema(request=ReviewCreateSerializer, responses={201: ReviewSerializer, 400: ErrorResponseSerializer})
    def create(self, request, *args, **kwargs):
        """Create review using service layer."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            review = create_review(
                author=request.user,
                book_id=serializer.validated_data['book_id'],
                rating=serializer.validated_data['rating'],
                comment=serializer.validated_data['comment'],
            )
        except (DuplicateReviewError, InvalidRatingError, InvalidCommentError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=ReviewUpdateSerializer, responses={200: ReviewSerializer, 400: ErrorResponseSerializer})
    def update(self, request, *args, **kwargs):
        """Update review using service layer."""
        partial = kwargs.pop('partial', False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)

        try:
            review = update_review(
                review_id=instance.id,
                user=request.user,
                rating=serializer.validated_data.get('rating'),
                comment=serializer.validated_data.get('comment'),
            )
        except ReviewNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except UnauthorizedReviewActionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)
        except (InvalidRatingError, InvalidCommentError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(ReviewSerializer(review).data)

    def destroy(self, request, *args, **kwargs):
        """Delete review using service layer."""
        instance = self.get_object()

        try:
            delete_review(review_id=instance.id, user=request.user)
        except ReviewNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except UnauthorizedReviewActionError as e:
            return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        parameters=[
            OpenApiParameter('sort_by', OpenApiTypes.STR, enum=['recent', 'oldest', 'rating'], default='recent'),
        ],
    )
    @action(detail=False, methods=['get'], permission_classes=[IsAuthenticated])
    def my_reviews(self, request):
        """Get current user's reviews using service layer."""
        sort_by = request.query_params.get('sort_by', 'recent')
        reviews = get_user_reviews(user=request.user, sort_by=sort_by)
        page = self.paginate_queryset(reviews)

        if page is not None:
            serializer = ReviewSerializer(page, many=True)
            return self.get_paginated_response(serializer.data)

        serializer = ReviewSerializer(reviews, many=True)
        return Response(serializer.data)


# =============================================================================
# Voting
# =============================================================================

@extend_schema(
    methods=['POST'],
    request=CastVoteRequestSerializer,
    responses={
        200: CastVoteResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
    description=(
        "Like or dislike a review. Casting the same vote again removes it; "
        "casting the opposite vote changes it. Authors cannot vote on their own reviews."
    ),
    tags=['votes'],
)
@extend_schema(
    methods=['GET'],
    parameters=[
        OpenApiParameter('reviewId', OpenApiTypes.UUID, required=True, description='Review to look up'),
    ],
    responses={
        200: UserVoteResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Get the current user's vote on a review: 'like', 'dislike' or null.",
    tags=['votes'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def votes(request):
    """Cast a vote (POST) or read the current user's vote (GET)."""
    if request.method == 'GET':
        try:
            user_vote = get_user_vote(
                review_id=request.query_params.get('reviewId'),
                voter=request.user,
            )
        except ReviewNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except VotingError as e:
            return Response({'error': str(e)}, status=_voting_error_status(e))

        return Response({'userVote': user_vote})

    data = request.data if isinstance(request.data, dict) else {}
    try:
        result = cast_vote(
            review_id=data.get('reviewId'),
            voter=request.user,
            like=data.get('like'),
        )
    except ReviewNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except VotingError as e:
        return Response({'error': str(e)}, status=_voting_error_status(e))

    return Response({
        'message': 'Vote recorded successfully',
        'review': VoteReviewSerializer(result.review).data,
        'totalVotes': result.total_votes,
    })


@extend_schema(
    responses={200: AuditReportSerializer, 403: ErrorResponseSerializer},
    description="Report reviews whose like/dislike counters disagree with their votes. Read only. Staff only.",
    tags=['votes'],
)
@api_view(['GET'])
@permission_classes([IsAdminUser])
def vote_audit(request):
    """Report vote counter drift using service layer."""
    report = audit_vote_counts()
    return Response(AuditReportSerializer(report).data)


@extend_schema(
    request=None,
    responses={200: ReconcileSummarySerializer, 403: ErrorResponseSerializer},
    description="Recompute every review's like/dislike counters from its votes. Staff only.",
    tags=['votes'],
)
@api_view(['POST'])
@permission_classes([IsAdminUser])
def vote_reconcile(request):
    """Correct vote counter drift using service layer."""
    summary = reconcile_vote_counts()
    data = ReconcileSummarySerializer(summary).data
    return Response({'message': 'Vote counters recalculated', **data})
