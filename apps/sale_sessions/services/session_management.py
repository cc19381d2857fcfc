"""Sale session service - CRUD and open-window queries."""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import ProtectedError, QuerySet
from django.utils import timezone

from apps.sale_sessions.models import Session
from .commission import max_commission, get_commission_unit
from .exceptions import (
    SessionNotFoundError,
    InvalidSessionDataError,
    InvalidSessionDatesError,
    InvalidCommissionError,
    NoOpenSessionError,
    AmbiguousOpenSessionError,
    SessionInUseError,
)

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ('name', 'location', 'start_date', 'end_date', 'sale_commission', 'deposit_fee')


def _validate_window(start_date: datetime, end_date: datetime) -> None:
    if start_date > end_date:
        raise InvalidSessionDatesError("Session end date must be after its start date")


def _validate_commission(sale_commission: Decimal) -> None:
    upper = max_commission()
    if not (Decimal('0') <= sale_commission <= upper):
        raise InvalidCommissionError(
            f"Sale commission must be between 0 and {upper} ({get_commission_unit()})"
        )


def create_session(
    *,
    name: str,
    start_date: datetime,
    end_date: datetime,
    sale_commission: Decimal = Decimal('0'),
    deposit_fee: Decimal = Decimal('0.00'),
    location: str = ''
) -> Session:
    """
    Create a sale session.

    Raises:
        InvalidSessionDataError: If name or dates are missing
        InvalidSessionDatesError: If end_date is before start_date
        InvalidCommissionError: If commission is out of range for the configured unit
    """
    if not name or start_date is None or end_date is None:
        raise InvalidSessionDataError("Session name, start date and end date are required")

    _validate_window(start_date, end_date)
    _validate_commission(sale_commission)

    session = Session.objects.create(
        name=name,
        location=location,
        start_date=start_date,
        end_date=end_date,
        sale_commission=sale_commission,
        deposit_fee=deposit_fee,
    )
    logger.info("Created session %s (%s - %s)", session.id, start_date, end_date)
    return session


def get_session_by_id(*, session_id: UUID) -> Session:
    """
    Retrieve a session by ID.

    Raises:
        SessionNotFoundError: If session doesn't exist
    """
    try:
        return Session.objects.get(id=session_id)
    except Session.DoesNotExist:
        raise SessionNotFoundError("Session not found")


def list_sessions() -> QuerySet[Session]:
    return Session.objects.order_by('-start_date')


@transaction.atomic
def update_session(*, session_id: UUID, **fields) -> Session:
    """
    Apply a partial update. Fields not passed are left unchanged.

    The merged window and commission are re-validated.

    Raises:
        SessionNotFoundError: If session doesn't exist
        InvalidSessionDatesError: If the merged window is inverted
        InvalidCommissionError: If the commission is out of range
    """
    try:
        session = Session.objects.select_for_update().get(id=session_id)
    except Session.DoesNotExist:
        raise SessionNotFoundError("Session not found")

    changed = []
    for field in UPDATABLE_FIELDS:
        if field in fields and fields[field] is not None:
            setattr(session, field, fields[field])
            changed.append(field)

    if not session.name:
        raise InvalidSessionDataError("Session name cannot be empty")
    _validate_window(session.start_date, session.end_date)
    _validate_commission(session.sale_commission)

    if changed:
        session.save(update_fields=changed + ['updated_at'])

    return session


@transaction.atomic
def delete_session(*, session_id: UUID) -> None:
    """
    Delete a session.

    Raises:
        SessionNotFoundError: If session doesn't exist
        SessionInUseError: If deposited games or transactions reference it
    """
    try:
        deleted, _ = Session.objects.filter(id=session_id).delete()
    except ProtectedError:
        raise SessionInUseError("Session has deposited games or transactions and cannot be deleted")
    if not deleted:
        raise SessionNotFoundError("Session not found")


def is_session_open(*, session_id: UUID, at: Optional[datetime] = None) -> bool:
    """
    Whether the session window contains ``at`` (default: now).

    Raises:
        SessionNotFoundError: If session doesn't exist
    """
    session = get_session_by_id(session_id=session_id)
    return session.is_open(at)


def list_open_sessions(*, at: Optional[datetime] = None) -> QuerySet[Session]:
    at = at or timezone.now()
    return Session.objects.filter(start_date__lte=at, end_date__gte=at).order_by('start_date')


def get_open_session(*, at: Optional[datetime] = None) -> Session:
    """
    Return the single session open at ``at`` (default: now).

    Raises:
        NoOpenSessionError: If no session is open
        AmbiguousOpenSessionError: If several sessions overlap at that time
    """
    open_sessions = list(list_open_sessions(at=at)[:2])

    if not open_sessions:
        raise NoOpenSessionError("No session is currently open")
    if len(open_sessions) > 1:
        raise AmbiguousOpenSessionError(
            "Several sessions are currently open; specify the session explicitly"
        )

    return open_sessions[0]
