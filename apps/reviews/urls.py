from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'reviews'

router = DefaultRouter()
router.register(r'', views.ReviewViewSet, basename='review')

urlpatterns = [
    # Voting endpoints (must precede the router's /{id}/ route)
    # GET    /api/reviews/votes/?reviewId=   - Current user's vote
    # POST   /api/reviews/votes/             - Cast / flip / withdraw a vote
    # GET    /api/reviews/votes/audit/       - Counter drift report (staff)
    # POST   /api/reviews/votes/reconcile/   - Recompute counters (staff)
    path('votes/', views.votes, name='votes'),
    path('votes/audit/', views.vote_audit, name='vote-audit'),
    path('votes/reconcile/', views.vote_reconcile, name='vote-reconcile'),

    # Review ViewSet routes
    # GET    /api/reviews/              - List reviews
    # POST   /api/reviews/              - Create review
    # GET    /api/reviews/{id}/         - Get review
    # PUT    /api/reviews/{id}/         - Update review
    # PATCH  /api/reviews/{id}/         - Partial update
    # DELETE /api/reviews/{id}/         - Delete review
    # GET    /api/reviews/my_reviews/   - Current user's reviews
    path('', include(router.urls)),
]
