"""Administrator password change service."""

import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction

from .exceptions import AdministratorNotFoundError, PasswordTooShortError

logger = logging.getLogger(__name__)

Administrator = get_user_model()


@transaction.atomic
def change_admin_password(*, admin_id: int, new_password: str) -> Administrator:
    """
    Re-hash and store a new password for the administrator.

    Args:
        admin_id: Administrator id bound to the current session
        new_password: New plain-text password

    Returns:
        Updated Administrator instance

    Raises:
        PasswordTooShortError: If the password is below the minimum length
        AdministratorNotFoundError: If the administrator row is gone
    """
    min_length = settings.ADMIN_PASSWORD_MIN_LENGTH
    if not new_password or len(new_password) < min_length:
        raise PasswordTooShortError(
            f"Password must be at least {min_length} characters"
        )

    try:
        admin = (
            Administrator.objects
            .select_for_update()
            .get(id=admin_id)
        )
    except Administrator.DoesNotExist:
        raise AdministratorNotFoundError(f"Administrator {admin_id} not found")

    admin.set_password(new_password)
    admin.save(update_fields=['password'])

    logger.info("Password changed for administrator %s", admin.email)
    return admin
