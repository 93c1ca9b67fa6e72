from django.conf import settings
from django.db import models
import uuid


class Favorite(models.Model):
    """A book on a user's favorites list."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='favorites')
    book_id = models.CharField(max_length=64, db_index=True)
    notes = models.CharField(max_length=500, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'favorites'
        constraints = [
            models.UniqueConstraint(fields=['user', 'book_id'], name='unique_favorite_per_book'),
        ]
        indexes = [
            models.Index(fields=['user', 'created_at'], name='favorites_user_created_idx'),
            models.Index(fields=['book_id', 'created_at'], name='favorites_book_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.user} - {self.book_id}"
