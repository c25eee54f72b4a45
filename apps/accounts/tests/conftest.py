import pytest
from rest_framework.test import APIClient
from apps.accounts.models import Administrator


ADMIN_EMAIL = 'admin@example.com'
ADMIN_PASSWORD = 'password123'


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def admin(db):
    """Create and return the administrator."""
    return Administrator.objects.create_user(
        email=ADMIN_EMAIL,
        password=ADMIN_PASSWORD,
    )


@pytest.fixture
def admin_client(api_client, admin):
    """Return an API client holding an administrator session."""
    api_client.force_login(admin)
    return api_client
