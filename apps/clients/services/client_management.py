"""Client management service - CRUD operations for buyers."""

from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import ProtectedError, Q, QuerySet

from apps.clients.models import Client
from .exceptions import ClientNotFoundError, InvalidClientDataError, ClientInUseError

UPDATABLE_FIELDS = ('name', 'email', 'phone', 'address')


def create_client(*, name: str, email: str, phone: str = '', address: str = '') -> Client:
    """
    Create a client.

    Raises:
        InvalidClientDataError: If name or email is empty
    """
    if not name or not email:
        raise InvalidClientDataError("Client name and email are required")

    return Client.objects.create(name=name, email=email, phone=phone, address=address)


def get_client_by_id(*, client_id: UUID) -> Client:
    """
    Retrieve a client by ID.

    Raises:
        ClientNotFoundError: If client doesn't exist
    """
    try:
        return Client.objects.get(id=client_id)
    except Client.DoesNotExist:
        raise ClientNotFoundError("Client not found")


def list_clients(*, search: Optional[str] = None) -> QuerySet[Client]:
    queryset = Client.objects.all()

    if search:
        queryset = queryset.filter(Q(name__icontains=search) | Q(email__icontains=search))

    return queryset.order_by('name')


@transaction.atomic
def update_client(*, client_id: UUID, **fields) -> Client:
    """
    Apply a partial update. Fields not passed are left unchanged.

    Raises:
        ClientNotFoundError: If client doesn't exist
        InvalidClientDataError: If name or email would become empty
    """
    try:
        client = Client.objects.select_for_update().get(id=client_id)
    except Client.DoesNotExist:
        raise ClientNotFoundError("Client not found")

    changed = []
    for field in UPDATABLE_FIELDS:
        if field in fields and fields[field] is not None:
            if field in ('name', 'email') and not fields[field]:
                raise InvalidClientDataError(f"Client {field} cannot be empty")
            setattr(client, field, fields[field])
            changed.append(field)

    if changed:
        client.save(update_fields=changed + ['updated_at'])

    return client


@transaction.atomic
def delete_client(*, client_id: UUID) -> None:
    """
    Delete a client.

    Raises:
        ClientNotFoundError: If client doesn't exist
        ClientInUseError: If transactions reference the client
    """
    try:
        deleted, _ = Client.objects.filter(id=client_id).delete()
    except ProtectedError:
        raise ClientInUseError("Client has transactions and cannot be deleted")
    if not deleted:
        raise ClientNotFoundError("Client not found")
