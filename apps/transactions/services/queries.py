"""Transaction reads, corrections and deletion."""

from datetime import datetime
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.clients.services import get_client_by_id
from apps.transactions.models import Transaction
from .exceptions import TransactionNotFoundError, FrozenSaleFieldError


def _with_relations() -> QuerySet[Transaction]:
    return Transaction.objects.select_related(
        'label__game_description',
        'session',
        'seller',
        'client',
        'manager',
    )


def list_transactions() -> QuerySet[Transaction]:
    return _with_relations().order_by('-transaction_date')


def get_transaction(*, transaction_id: UUID) -> Transaction:
    """
    Raises:
        TransactionNotFoundError: If transaction doesn't exist
    """
    try:
        return _with_relations().get(id=transaction_id)
    except Transaction.DoesNotExist:
        raise TransactionNotFoundError("Transaction not found")


def list_transactions_by_session(*, session_id: UUID) -> QuerySet[Transaction]:
    """Sales of a session; empty when nothing was sold."""
    return list_transactions().filter(session_id=session_id)


def list_transactions_by_client(*, client_id: UUID) -> QuerySet[Transaction]:
    """
    Raises:
        TransactionNotFoundError: If the client bought nothing
    """
    sales = list_transactions().filter(client_id=client_id)
    if not sales.exists():
        raise TransactionNotFoundError(f"No transactions found for client {client_id}")
    return sales


def list_transactions_by_seller(*, seller_id: UUID) -> QuerySet[Transaction]:
    """
    Raises:
        TransactionNotFoundError: If nothing of the seller was sold
    """
    sales = list_transactions().filter(seller_id=seller_id)
    if not sales.exists():
        raise TransactionNotFoundError(f"No transactions found for seller {seller_id}")
    return sales


@transaction.atomic
def update_transaction(
    *,
    transaction_id: UUID,
    client_id: UUID = None,
    seller_id: UUID = None,
    session_id: UUID = None,
    transaction_date: datetime = None
) -> Transaction:
    """
    Correct a recorded sale. Fields not passed are left unchanged.

    Only the client and the date can be corrected. The seller was credited
    at the session's rate when the sale was made, so seller and session
    may be passed only with their current values.

    Raises:
        TransactionNotFoundError: If transaction doesn't exist
        FrozenSaleFieldError: If seller or session would change
        ClientNotFoundError: If the new client is unresolved
    """
    try:
        sale = Transaction.objects.select_for_update().get(id=transaction_id)
    except Transaction.DoesNotExist:
        raise TransactionNotFoundError("Transaction not found")

    if seller_id is not None and str(seller_id) != str(sale.seller_id):
        raise FrozenSaleFieldError("The seller of a recorded sale cannot change")
    if session_id is not None and str(session_id) != str(sale.session_id):
        raise FrozenSaleFieldError("The session of a recorded sale cannot change")

    changed = []
    if client_id is not None:
        sale.client = get_client_by_id(client_id=client_id)
        changed.append('client')
    if transaction_date is not None:
        sale.transaction_date = transaction_date
        changed.append('transaction_date')

    if changed:
        sale.save(update_fields=changed)

    return sale


def delete_transaction(*, transaction_id: UUID) -> None:
    """
    Delete the record only; the game stays sold and the balance is kept.

    Raises:
        TransactionNotFoundError: If transaction doesn't exist
    """
    deleted, _ = Transaction.objects.filter(id=transaction_id).delete()
    if not deleted:
        raise TransactionNotFoundError("Transaction not found")
