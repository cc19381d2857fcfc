"""Manager authentication service."""

import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.utils import timezone
from rest_framework_simplejwt.tokens import RefreshToken

from .exceptions import (
    MissingCredentialsError,
    ManagerNotFoundError,
    InvalidCredentialsError,
    InactiveAccountError,
)
from .passwords import compare_passwords

Manager = get_user_model()

logger = logging.getLogger(__name__)


def validate_credentials(*, email: str, password: str) -> Manager:
    """
    Validate manager credentials.

    Args:
        email: Manager's email
        password: Plain-text password

    Returns:
        The matching Manager instance

    Raises:
        MissingCredentialsError: If email or password is empty
        ManagerNotFoundError: If no manager has this email
        InvalidCredentialsError: If the password is wrong
        InactiveAccountError: If the account is deactivated
    """
    if not email or not password:
        raise MissingCredentialsError("Email and password are required")

    try:
        manager = Manager.objects.get(email__iexact=email)
    except Manager.DoesNotExist:
        logger.info("Login attempt for unknown email %s", email)
        raise ManagerNotFoundError("No account found with this email")

    if not compare_passwords(password, manager.password):
        logger.warning("Wrong password for manager %s", manager.id)
        raise InvalidCredentialsError("Incorrect password")

    if not manager.is_active:
        raise InactiveAccountError("Account is deactivated")

    return manager


@transaction.atomic
def issue_token(*, email: str, password: str) -> dict:
    """
    Validate credentials and issue a signed JWT pair.

    The access token carries the manager ``id`` and ``email`` claims.

    Returns:
        dict with ``token`` (access), ``refresh`` and ``is_admin``
    """
    manager = validate_credentials(email=email, password=password)

    refresh = RefreshToken.for_user(manager)
    refresh['id'] = str(manager.id)
    refresh['email'] = manager.email

    manager.last_login = timezone.now()
    manager.save(update_fields=['last_login'])

    return {
        'token': str(refresh.access_token),
        'refresh': str(refresh),
        'is_admin': manager.is_admin,
    }


def get_manager_profile(*, manager_id) -> Manager:
    """
    Fetch a manager by id.

    Raises:
        ManagerNotFoundError: If the manager does not exist
    """
    try:
        return Manager.objects.get(id=manager_id)
    except Manager.DoesNotExist:
        raise ManagerNotFoundError("Manager not found")
