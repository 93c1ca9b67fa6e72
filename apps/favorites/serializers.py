from rest_framework import serializers
from .models import Favorite


class FavoriteSerializer(serializers.ModelSerializer):
    """Serializer for favorite books."""

    class Meta:
        model = Favorite
        fields = ['id', 'book_id', 'notes', 'created_at']
        read_only_fields = fields


class FavoriteRequestSerializer(serializers.Serializer):
    book_id = serializers.CharField(help_text="External identifier of the book")
    notes = serializers.CharField(required=False, allow_blank=True)


class FavoriteListSerializer(serializers.Serializer):
    favorites = FavoriteSerializer(many=True)
    count = serializers.IntegerField()
    sortBy = serializers.CharField()
