"""Django ORM models (persistence layer).

Domain logic lives in accounts/domain/.
"""

import uuid

from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models

from accounts.domain.value_objects import Role


class UserManager(BaseUserManager):
    """Manager for a user model keyed by email instead of username."""

    use_in_migrations = True

    def _create_user(self, email: str, password: str | None, **extra_fields):
        if not email:
            raise ValueError("Email is required")
        user = self.model(email=self.normalize_email(email), **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email: str, password: str | None = None, **extra_fields):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", Role.ADMIN.value)
        return self._create_user(email, password, **extra_fields)


class User(AbstractUser):
    """Persistence model for accounts."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    username = None
    email = models.EmailField(unique=True)
    role = models.CharField(max_length=16, choices=Role.choices(), default=Role.FAN.value)
    profile_image = models.URLField(max_length=500, blank=True, null=True)
    phone = models.CharField(max_length=32, blank=True, null=True)
    bio = models.TextField(blank=True, null=True)
    is_verified = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS: list[str] = []

    objects = UserManager()

    class Meta:
        indexes = [
            models.Index(fields=["role"], name="accounts_user_role_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.email} ({self.role})"
