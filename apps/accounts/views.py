from django.conf import settings
from django.contrib.auth import login as auth_login, logout as auth_logout, update_session_auth_hash
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .permissions import IsAdministrator
from .serializers import (
    AdminLoginSerializer,
    ChangePasswordSerializer,
    OkResponseSerializer,
    MessageResponseSerializer,
)
from .services import (
    authenticate_admin,
    change_admin_password,
    InvalidCredentialsError,
    AdministratorNotFoundError,
    PasswordTooShortError,
)


@extend_schema(
    request=AdminLoginSerializer,
    responses={
        200: OkResponseSerializer,
        400: MessageResponseSerializer,
        401: MessageResponseSerializer,
    },
    description="Log in as administrator. The session id is set as a cookie.",
    tags=['admin'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Start an administrator session."""
    serializer = AdminLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        admin = authenticate_admin(**serializer.validated_data)
    except InvalidCredentialsError as e:
        return Response(
            {'message': str(e)},
            status=status.HTTP_401_UNAUTHORIZED
        )

    # Binds admin id to a fresh session key and stamps last_login
    auth_login(request, admin)
    request.session['admin_email'] = admin.email
    request.session.set_expiry(settings.ADMIN_SESSION_TTL)

    return Response({'ok': True})


@extend_schema(
    request=None,
    responses={200: OkResponseSerializer},
    description="Destroy the current session. Succeeds even without one.",
    tags=['admin'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def logout(request):
    """End the administrator session."""
    auth_logout(request)
    return Response({'ok': True})


@extend_schema(
    request=ChangePasswordSerializer,
    responses={
        200: OkResponseSerializer,
        400: MessageResponseSerializer,
        401: MessageResponseSerializer,
    },
    description="Change the administrator password. The current session stays valid.",
    tags=['admin'],
)
@api_view(['POST'])
@permission_classes([IsAdministrator])
def change_password(request):
    """Change the administrator password."""
    serializer = ChangePasswordSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        admin = change_admin_password(
            admin_id=request.user.pk,
            new_password=serializer.validated_data['password'],
        )
    except PasswordTooShortError as e:
        return Response({'message': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except AdministratorNotFoundError:
        auth_logout(request)
        return Response({'message': 'Unauthorized'}, status=status.HTTP_401_UNAUTHORIZED)

    # Password change rotates the session auth hash; keep this session alive
    update_session_auth_hash(request, admin)

    return Response({'ok': True})
