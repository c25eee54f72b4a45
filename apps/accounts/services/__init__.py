"""Services for administrator authentication and storage bootstrap."""

from .exceptions import (
    AccountsServiceError,
    InvalidCredentialsError,
    AdministratorNotFoundError,
    PasswordTooShortError,
    BootstrapError,
)
from .admin_authentication import authenticate_admin
from .password_change import change_admin_password
from .bootstrap import ensure_schema, ensure_default_admin, ensure_seed_data, SeedResult

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'InvalidCredentialsError',
    'AdministratorNotFoundError',
    'PasswordTooShortError',
    'BootstrapError',
    # Services
    'authenticate_admin',
    'change_admin_password',
    'ensure_schema',
    'ensure_default_admin',
    'ensure_seed_data',
    'SeedResult',
]
