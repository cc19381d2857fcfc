"""Password hashing helpers for manager credentials."""

from django.contrib.auth.hashers import make_password, check_password

from .exceptions import MissingCredentialsError


def hash_password(plain: str) -> str:
    """
    Hash a plain-text password with the configured hasher.

    In production this is bcrypt with cost factor 10
    (see ``apps.accounts.hashers.BCryptCost10PasswordHasher``).

    Raises:
        MissingCredentialsError: If password is empty
    """
    if not plain:
        raise MissingCredentialsError("Password is required")

    return make_password(plain)


def compare_passwords(plain: str, hashed: str) -> bool:
    """
    Check a plain-text password against a stored hash.

    Raises:
        MissingCredentialsError: If either value is empty
    """
    if not plain or not hashed:
        raise MissingCredentialsError("Both passwords are required for comparison")

    return check_password(plain, hashed)
