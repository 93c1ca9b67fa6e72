from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.core.validators import MinLengthValidator
from django.db import models
import uuid


USERNAME_MIN_LENGTH = 2
USERNAME_MAX_LENGTH = 50


class UserManager(BaseUserManager):
    """Creates readers keyed by a lowercased email."""

    def create_user(self, email, username, password=None, **extra_fields):
        email = self.normalize_email((email or '').strip()).lower()
        if not email:
            raise ValueError('Email is required')

        username = (username or '').strip()
        if not username:
            raise ValueError('Username is required')

        user = self.model(email=email, username=username, **extra_fields)
        user.set_password(password)
        user.full_clean(exclude=['password'], validate_unique=False)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, username, password=None, **extra_fields):
        extra_fields['is_staff'] = True
        extra_fields['is_superuser'] = True
        return self.create_user(email, username, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """
    Reader account.

    Logs in with ``email``; ``username`` is the public name shown on the
    reader's reviews and does not have to be unique.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True, max_length=255)
    username = models.CharField(
        max_length=USERNAME_MAX_LENGTH,
        validators=[MinLengthValidator(USERNAME_MIN_LENGTH)],
    )

    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    last_login = models.DateTimeField(null=True, blank=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = ['username']

    class Meta:
        db_table = 'users'
        indexes = [
            models.Index(fields=['created_at'], name='users_created_at_idx'),
        ]

    def __str__(self):
        return f"{self.username} <{self.email}>"
