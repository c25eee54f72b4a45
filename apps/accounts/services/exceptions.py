"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when the email is unknown or the password does not match."""
    pass


class AdministratorNotFoundError(AccountsServiceError):
    """Raised when the session refers to an administrator that no longer exists."""
    pass


class PasswordTooShortError(AccountsServiceError):
    """Raised when a new password is below the minimum length."""
    pass


class BootstrapError(AccountsServiceError):
    """Raised when the schema or seed data cannot be put in place."""
    pass
