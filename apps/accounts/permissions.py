"""
Custom permission classes for administrator endpoints.

Usage:
    @api_view(['GET'])
    @permission_classes([IsAdministrator])
    def list_submissions(request):
        # Request carries an authenticated administrator session
        ...
"""
from rest_framework.permissions import BasePermission

from .models import Administrator


class IsAdministrator(BasePermission):
    """
    Gate for mutation and review endpoints.

    Allows access only when the session is bound to an administrator id.
    Denied requests never reach the view, so no side effects happen.
    """

    message = 'Unauthorized'

    def has_permission(self, request, view):
        user = getattr(request, 'user', None)
        return (
            isinstance(user, Administrator)
            and user.is_authenticated
            and user.pk is not None
        )
