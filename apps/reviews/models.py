from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator, MinLengthValidator
from django.db import models
import uuid


COMMENT_MIN_LENGTH = 5
COMMENT_MAX_LENGTH = 1000


class Review(models.Model):
    """A user's review of a book, with denormalized vote counters."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    book_id = models.CharField(max_length=64, db_index=True)
    author = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='reviews')
    rating = models.PositiveSmallIntegerField(validators=[MinValueValidator(1), MaxValueValidator(5)])
    comment = models.TextField(
        max_length=COMMENT_MAX_LENGTH,
        validators=[MinLengthValidator(COMMENT_MIN_LENGTH)],
    )

    # Written only by the voting and reconciliation services.
    likes_count = models.PositiveIntegerField(default=0)
    dislikes_count = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'reviews'
        ordering = ['-created_at']
        constraints = [
            models.UniqueConstraint(fields=['author', 'book_id'], name='unique_review_per_book'),
            models.CheckConstraint(
                condition=models.Q(likes_count__gte=0) & models.Q(dislikes_count__gte=0),
                name='review_vote_counters_non_negative',
            ),
        ]
        indexes = [
            models.Index(fields=['book_id', 'created_at'], name='reviews_book_created_idx'),
            models.Index(fields=['author', 'created_at'], name='reviews_author_created_idx'),
        ]

    def __str__(self):
        return f"{self.author.username} - {self.book_id} ({self.rating}★)"

    @property
    def total_votes(self):
        return self.likes_count + self.dislikes_count


class Vote(models.Model):
    """One user's like or dislike on a review."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    voter = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='votes')
    review = models.ForeignKey(Review, on_delete=models.CASCADE, related_name='votes')
    like = models.BooleanField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'review_votes'
        constraints = [
            models.UniqueConstraint(fields=['voter', 'review'], name='unique_vote_per_review'),
        ]
        indexes = [
            models.Index(fields=['review', 'like'], name='votes_review_like_idx'),
            models.Index(fields=['voter', 'created_at'], name='votes_voter_created_idx'),
        ]

    def __str__(self):
        return f"{self.voter} {self.polarity} {self.review_id}"

    @property
    def polarity(self):
        return 'like' if self.like else 'dislike'
