"""Manager registration service."""

import logging

from django.contrib.auth import get_user_model
from django.db import transaction

from .exceptions import ManagerRegistrationError

Manager = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def register_manager(
    *,
    email: str,
    password: str,
    first_name: str = "",
    last_name: str = "",
    is_admin: bool = False
) -> Manager:
    """
    Register a new manager account.

    Raises:
        ManagerRegistrationError: If email/password is missing or the email is taken
    """
    if not email or not password:
        raise ManagerRegistrationError("Email and password are required")

    if Manager.objects.filter(email__iexact=email).exists():
        raise ManagerRegistrationError("A manager with this email already exists")

    manager = Manager.objects.create_user(
        email=email,
        password=password,
        first_name=first_name,
        last_name=last_name,
        is_admin=is_admin,
    )
    logger.info("Registered manager %s (admin=%s)", manager.id, is_admin)
    return manager
