from rest_framework import serializers
from .models import Review
from apps.accounts.serializers import UserPublicSerializer


class ReviewSerializer(serializers.ModelSerializer):
    """Main review serializer."""

    author = UserPublicSerializer(read_only=True)
    username = serializers.CharField(source='author.username', read_only=True)
    total_votes = serializers.IntegerField(read_only=True)

    class Meta:
        model = Review
        fields = [
            'id',
            'book_id',
            'author',
            'username',
            'rating',
            'comment',
            'likes_count',
            'dislikes_count',
            'total_votes',
            'created_at',
            'updated_at',
        ]
        read_only_fields = [
            'id',
            'author',
            'likes_count',
            'dislikes_count',
            'created_at',
            'updated_at',
        ]


class ReviewCreateSerializer(serializers.ModelSerializer):
    """Input for review creation."""

    class Meta:
        model = Review
        fields = ['book_id', 'rating', 'comment']
        # Duplicate (author, book) is reported by the service layer
        validators = []


class ReviewUpdateSerializer(serializers.ModelSerializer):
    """Input for review updates; the book cannot change."""

    class Meta:
        model = Review
        fields = ['rating', 'comment']
        extra_kwargs = {
            'rating': {'required': False},
            'comment': {'required': False},
        }


# =============================================================================
# Voting
# =============================================================================

class VoteReviewSerializer(serializers.ModelSerializer):
    """Review as returned after a vote, with camelCase counter names."""

    bookId = serializers.CharField(source='book_id', read_only=True)
    username = serializers.CharField(source='author.username', read_only=True)
    likesCount = serializers.IntegerField(source='likes_count', read_only=True)
    dislikesCount = serializers.IntegerField(source='dislikes_count', read_only=True)

    class Meta:
        model = Review
        fields = ['id', 'bookId', 'username', 'rating', 'comment', 'likesCount', 'dislikesCount']
        read_only_fields = fields


class CastVoteRequestSerializer(serializers.Serializer):
    reviewId = serializers.UUIDField()
    like = serializers.BooleanField(help_text="true = like, false = dislike")


class CastVoteResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    review = VoteReviewSerializer()
    totalVotes = serializers.IntegerField()


class UserVoteResponseSerializer(serializers.Serializer):
    userVote = serializers.ChoiceField(choices=['like', 'dislike'], allow_null=True)


class CounterDriftSerializer(serializers.Serializer):
    """One review whose stored counters disagree with its votes."""

    reviewId = serializers.UUIDField(source='review_id')
    bookId = serializers.CharField(source='book_id')
    current = serializers.SerializerMethodField()
    actual = serializers.SerializerMethodField()

    def get_current(self, obj):
        return {'likes': obj.stored_likes, 'dislikes': obj.stored_dislikes}

    def get_actual(self, obj):
        return {'likes': obj.actual_likes, 'dislikes': obj.actual_dislikes}


class AuditReportSerializer(serializers.Serializer):
    totalReviews = serializers.IntegerField(source='total_reviews')
    inconsistentReviews = serializers.IntegerField(source='inconsistent_reviews')
    inconsistencies = CounterDriftSerializer(source='details', many=True)


class ReconcileSummarySerializer(serializers.Serializer):
    totalReviews = serializers.IntegerField(source='total_reviews')
    updatedReviews = serializers.IntegerField(source='updated_reviews')
    errors = serializers.IntegerField()
