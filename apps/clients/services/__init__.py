"""Clients services - Business logic layer."""

from .client_management import (
    create_client,
    get_client_by_id,
    list_clients,
    update_client,
    delete_client,
)

from .exceptions import (
    ClientsServiceError,
    ClientNotFoundError,
    InvalidClientDataError,
    ClientInUseError,
)

__all__ = [
    'create_client',
    'get_client_by_id',
    'list_clients',
    'update_client',
    'delete_client',
    'ClientsServiceError',
    'ClientNotFoundError',
    'InvalidClientDataError',
    'ClientInUseError',
]
