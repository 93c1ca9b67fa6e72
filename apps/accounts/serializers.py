from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User, USERNAME_MIN_LENGTH, USERNAME_MAX_LENGTH


class UserSerializer(serializers.ModelSerializer):
    """The signed-in reader's own account."""

    class Meta:
        model = User
        fields = ['id', 'email', 'username', 'created_at', 'last_login']
        read_only_fields = fields


class UserPublicSerializer(serializers.ModelSerializer):
    """What other readers see of a review's author."""

    class Meta:
        model = User
        fields = ['id', 'username']
        read_only_fields = fields


class UserRegistrationSerializer(serializers.Serializer):
    email = serializers.EmailField()
    username = serializers.CharField(
        min_length=USERNAME_MIN_LENGTH,
        max_length=USERNAME_MAX_LENGTH,
    )
    password = serializers.CharField(
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'},
    )
    password_confirm = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'},
    )

    def validate(self, attrs):
        if attrs['password'] != attrs.pop('password_confirm'):
            raise serializers.ValidationError({'password_confirm': 'Passwords do not match'})
        return attrs


class UserLoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={'input_type': 'password'})


class LogoutSerializer(serializers.Serializer):
    refresh = serializers.CharField(help_text="Refresh token to revoke")
