"""Serializers for account requests and responses."""

from django.contrib.auth import password_validation
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from accounts.domain import SELF_REGISTERED_ROLES, Role


class AccountSerializer(serializers.Serializer):
    """Serializer for Account domain model."""

    id = serializers.CharField(source="id.value")
    email = serializers.EmailField()
    firstName = serializers.CharField(source="first_name")
    lastName = serializers.CharField(source="last_name")
    role = serializers.CharField(source="role.value")
    isVerified = serializers.BooleanField(source="is_verified")
    profileImage = serializers.CharField(source="profile_image", allow_null=True)
    lastLogin = serializers.DateTimeField(source="last_login", allow_null=True)


class RegisterSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)
    firstName = serializers.CharField(max_length=150)
    lastName = serializers.CharField(max_length=150)
    role = serializers.ChoiceField(
        choices=sorted(role.value for role in SELF_REGISTERED_ROLES),
        default=Role.FAN.value,
    )

    def validate_password(self, value: str) -> str:
        try:
            password_validation.validate_password(value)
        except DjangoValidationError as exc:
            raise serializers.ValidationError(exc.messages) from exc
        return value


class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True)
