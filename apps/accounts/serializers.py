from django.conf import settings
from rest_framework import serializers


class AdminLoginSerializer(serializers.Serializer):
    """Serializer for administrator login."""

    # Malformed addresses fall through to the same 401 as unknown ones
    email = serializers.CharField(required=True, max_length=255)
    password = serializers.CharField(
        required=True,
        write_only=True,
        trim_whitespace=False,
        style={'input_type': 'password'}
    )


class ChangePasswordSerializer(serializers.Serializer):
    """Serializer for the administrator's new password."""

    password = serializers.CharField(
        required=True,
        write_only=True,
        trim_whitespace=False,
        min_length=settings.ADMIN_PASSWORD_MIN_LENGTH,
        style={'input_type': 'password'},
        error_messages={
            'min_length': 'Password too short',
        }
    )


class OkResponseSerializer(serializers.Serializer):
    ok = serializers.BooleanField()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
