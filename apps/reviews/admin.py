from django.contrib import admin
from .models import Review, Vote
from .services import reconcile_review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    """Admin interface for Reviews."""

    list_display = [
        'book_id',
        'author',
        'rating',
        'likes_count',
        'dislikes_count',
        'created_at'
    ]
    list_filter = [
        'rating',
        'created_at',
    ]
    search_fields = [
        'book_id',
        'author__email',
        'comment'
    ]
    # Counters are maintained by the voting service
    readonly_fields = ['likes_count', 'dislikes_count', 'created_at', 'updated_at']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('book_id', 'author', 'rating')
        }),
        ('Review Content', {
            'fields': ('comment',)
        }),
        ('Votes', {
            'fields': ('likes_count', 'dislikes_count'),
        }),
        ('Metadata', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_queryset(self, request):
        """Optimize query with select_related."""
        qs = super().get_queryset(request)
        return qs.select_related('author')

    actions = ['reconcile_vote_counters']

    @admin.action(description='Reconcile vote counters')
    def reconcile_vote_counters(self, request, queryset):
        """Recompute like/dislike counters from stored votes."""
        corrected = sum(1 for review in queryset if reconcile_review(review_id=review.id))
        self.message_user(
            request,
            f"Checked {queryset.count()} review(s), corrected {corrected}"
        )


@admin.register(Vote)
class VoteAdmin(admin.ModelAdmin):
    """Read-only view of individual votes."""

    list_display = ['review', 'voter', 'like', 'created_at']
    list_filter = ['like', 'created_at']
    search_fields = ['voter__email', 'review__book_id']
    date_hierarchy = 'created_at'
    ordering = ['-created_at']

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.select_related('voter', 'review')

    # Votes change only through the voting service so counters stay in step.
    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
