"""Seller management service - CRUD and balance accrual."""

import logging
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import F, ProtectedError, Q, QuerySet

from apps.sellers.models import Seller
from .exceptions import SellerNotFoundError, InvalidSellerDataError, SellerInUseError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ('name', 'email', 'phone')


def create_seller(*, name: str, email: str, phone: str = '') -> Seller:
    """
    Create a seller with a zero balance.

    Raises:
        InvalidSellerDataError: If name or email is empty
    """
    if not name or not email:
        raise InvalidSellerDataError("Seller name and email are required")

    return Seller.objects.create(name=name, email=email, phone=phone)


def get_seller_by_id(*, seller_id: UUID) -> Seller:
    """
    Retrieve a seller by ID.

    Raises:
        SellerNotFoundError: If seller doesn't exist
    """
    try:
        return Seller.objects.get(id=seller_id)
    except Seller.DoesNotExist:
        raise SellerNotFoundError("Seller not found")


def list_sellers(*, search: Optional[str] = None) -> QuerySet[Seller]:
    """All sellers, optionally filtered by name/email substring."""
    queryset = Seller.objects.all()

    if search:
        queryset = queryset.filter(Q(name__icontains=search) | Q(email__icontains=search))

    return queryset.order_by('name')


@transaction.atomic
def update_seller(*, seller_id: UUID, **fields) -> Seller:
    """
    Apply a partial update. Fields not passed are left unchanged.

    ``amount_owed`` is not updatable here; it only moves through sales.

    Raises:
        SellerNotFoundError: If seller doesn't exist
        InvalidSellerDataError: If name or email would become empty
    """
    try:
        seller = Seller.objects.select_for_update().get(id=seller_id)
    except Seller.DoesNotExist:
        raise SellerNotFoundError("Seller not found")

    changed = []
    for field in UPDATABLE_FIELDS:
        if field in fields and fields[field] is not None:
            if field in ('name', 'email') and not fields[field]:
                raise InvalidSellerDataError(f"Seller {field} cannot be empty")
            setattr(seller, field, fields[field])
            changed.append(field)

    if changed:
        seller.save(update_fields=changed + ['updated_at'])

    return seller


@transaction.atomic
def delete_seller(*, seller_id: UUID) -> None:
    """
    Delete a seller.

    Raises:
        SellerNotFoundError: If seller doesn't exist
        SellerInUseError: If games or transactions still reference the seller
    """
    try:
        deleted, _ = Seller.objects.filter(id=seller_id).delete()
    except ProtectedError:
        raise SellerInUseError("Seller has deposited games or transactions and cannot be deleted")
    if not deleted:
        raise SellerNotFoundError("Seller not found")


def credit_seller(*, seller: Seller, amount: Decimal) -> Seller:
    """
    Add ``amount`` to the seller's balance.

    Uses an F() expression so concurrent credits are not lost.
    Must be called inside the caller's transaction.
    """
    Seller.objects.filter(id=seller.id).update(amount_owed=F('amount_owed') + amount)
    seller.refresh_from_db(fields=['amount_owed'])

    logger.info("Credited seller %s with %s (owed now %s)", seller.id, amount, seller.amount_owed)
    return seller
