from django.urls import path
from . import views

app_name = 'favorites'

urlpatterns = [
    # GET    /api/favorites/   - List favorites (?sort_by=recent|oldest)
    # POST   /api/favorites/   - Add a book
    # DELETE /api/favorites/   - Remove a book
    path('', views.favorites, name='favorites'),
]
