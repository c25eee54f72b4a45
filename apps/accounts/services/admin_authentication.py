"""Administrator authentication service."""

import logging

from django.contrib.auth import get_user_model

from .exceptions import InvalidCredentialsError

logger = logging.getLogger(__name__)

Administrator = get_user_model()


def authenticate_admin(*, email: str, password: str) -> Administrator:
    """
    Verify administrator credentials.

    Unknown emails and wrong passwords raise the same error with the same
    message. For an unknown email the password hasher still runs once, so
    response timing does not reveal which case occurred.

    Args:
        email: Administrator email
        password: Plain-text password

    Returns:
        The matching Administrator

    Raises:
        InvalidCredentialsError: If credentials are invalid
    """
    email = Administrator.objects.normalize_email(email)

    try:
        admin = Administrator.objects.get(email=email)
    except Administrator.DoesNotExist:
        Administrator().set_password(password)
        logger.info("Login failed for unknown email %s", email)
        raise InvalidCredentialsError("Invalid credentials")

    if not admin.check_password(password):
        logger.info("Login failed for %s: wrong password", email)
        raise InvalidCredentialsError("Invalid credentials")

    return admin
