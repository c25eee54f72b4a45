import pytest
from rest_framework.test import APIClient
from apps.accounts.models import Administrator
from apps.payouts.models import AccountDetails
from apps.payouts.services import DEFAULT_BANK, DEFAULT_CRYPTO


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def admin(db):
    return Administrator.objects.create_user(
        email='admin@example.com',
        password='password123',
    )


@pytest.fixture
def admin_client(api_client, admin):
    """Return an API client holding an administrator session."""
    api_client.force_login(admin)
    return api_client


@pytest.fixture
def seeded_details(db):
    """The demo payout instructions inserted at bootstrap."""
    return AccountDetails.objects.create(
        bank=dict(DEFAULT_BANK),
        crypto=dict(DEFAULT_CRYPTO),
    )
