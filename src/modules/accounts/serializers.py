"""Account DRF serializers for API input/output.

Field names follow the camelCase contract of the mobile and dashboard
clients.  Business validation lives in the Pydantic DTOs.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.accounts.models import Account


class RegisterAccountSerializer(serializers.Serializer):
    """Validates presence of the registration fields."""

    name = serializers.CharField()
    email = serializers.CharField()
    password = serializers.CharField(write_only=True)
    phone = serializers.CharField()
    location = serializers.CharField()
    role = serializers.CharField()


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField()
    password = serializers.CharField(write_only=True)


class ResetPasswordSerializer(serializers.Serializer):
    email = serializers.CharField()
    newPassword = serializers.CharField(write_only=True)


class AssignRoleSerializer(serializers.Serializer):
    userId = serializers.IntegerField(min_value=1)
    role = serializers.CharField()


class AccountSearchSerializer(serializers.ModelSerializer):
    """Search result with role flags derived from the side tables."""

    isDriver = serializers.BooleanField(source="is_driver", read_only=True)
    isAdmin = serializers.BooleanField(source="is_admin", read_only=True)

    class Meta:
        model = Account
        fields = ["id", "name", "email", "phone", "location", "role", "isDriver", "isAdmin"]
        read_only_fields = fields


class AccountProfileSerializer(serializers.ModelSerializer):
    """Public profile returned after a successful login."""

    class Meta:
        model = Account
        fields = ["id", "name", "email", "phone", "location", "role"]
        read_only_fields = fields
