"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class MissingCredentialsError(AccountsServiceError):
    """Raised when email or password is empty."""
    pass


class ManagerNotFoundError(AccountsServiceError):
    """Raised when no manager matches the lookup."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when the password does not match the stored hash."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when the manager account is deactivated."""
    pass


class ManagerRegistrationError(AccountsServiceError):
    """Raised when a manager cannot be registered."""
    pass
