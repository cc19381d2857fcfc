"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    MissingCredentialsError,
    ManagerNotFoundError,
    InvalidCredentialsError,
    InactiveAccountError,
    ManagerRegistrationError,
)
from .passwords import hash_password, compare_passwords
from .authentication import validate_credentials, issue_token, get_manager_profile
from .registration import register_manager

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'MissingCredentialsError',
    'ManagerNotFoundError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'ManagerRegistrationError',
    # Services
    'hash_password',
    'compare_passwords',
    'validate_credentials',
    'issue_token',
    'get_manager_profile',
    'register_manager',
]
