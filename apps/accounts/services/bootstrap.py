"""
Storage bootstrap service.

Brings an empty or existing database to a servable state:

    1. ensure_schema()    - apply migrations (no-op when already applied)
    2. ensure_seed_data() - one administrator and one account-details row

Both steps are safe to run on every process start. Seeding is guarded by
``count == 0`` checks; the administrator insert is additionally protected
by the unique email constraint, so two instances booting against the same
empty database cannot create two administrators.
"""

import logging
from dataclasses import dataclass

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.management import call_command
from django.db import DatabaseError, IntegrityError, transaction

from apps.payouts.services import ensure_default_account_details

from .exceptions import BootstrapError

logger = logging.getLogger(__name__)

Administrator = get_user_model()


@dataclass
class SeedResult:
    admin_created: bool
    account_details_created: bool


def ensure_schema(*, verbosity: int = 0) -> None:
    """
    Create the administrators, account_details and submissions tables.

    Raises:
        BootstrapError: If migrations cannot be applied. The caller must not
            start serving requests.
    """
    try:
        call_command('migrate', interactive=False, verbosity=verbosity)
    except DatabaseError as e:
        logger.exception("Schema creation failed")
        raise BootstrapError(f"Could not create schema: {e}") from e


def ensure_default_admin(*, email: str, password: str) -> bool:
    """
    Create the administrator if none exists.

    Returns:
        True if a row was inserted, False if one already existed
    """
    if Administrator.objects.count() > 0:
        logger.info("Administrator exists; seeding skipped.")
        return False

    if not email or not password:
        raise BootstrapError("ADMIN_EMAIL and ADMIN_PASSWORD must be configured")

    try:
        with transaction.atomic():
            Administrator.objects.create_user(email=email, password=password)
    except IntegrityError:
        # Another instance seeded the same email between count and insert
        logger.info("Administrator %s already seeded by another process", email)
        return False

    logger.info("Created default administrator: %s", email)
    return True


def ensure_seed_data() -> SeedResult:
    """Seed the administrator and the demo account details when missing."""
    try:
        admin_created = ensure_default_admin(
            email=settings.ADMIN_EMAIL,
            password=settings.ADMIN_PASSWORD,
        )
        account_details_created = ensure_default_account_details()
    except DatabaseError as e:
        logger.exception("Seeding failed")
        raise BootstrapError(f"Could not seed data: {e}") from e

    return SeedResult(
        admin_created=admin_created,
        account_details_created=account_details_created,
    )
