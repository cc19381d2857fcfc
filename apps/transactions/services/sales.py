"""
Sale recording - single and bulk.

Each sale marks the deposited game as sold, credits the seller with the
sale price minus the session commission, and records a Transaction.
All writes of a sale (or of a whole bulk batch) happen in one database
transaction, with the game and seller rows locked.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List, Mapping
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.clients.services import get_client_by_id
from apps.games.models import DepositedGame
from apps.games.services import DepositedGameNotFoundError
from apps.sale_sessions.models import Session
from apps.sale_sessions.services import commission_rate, get_session_by_id
from apps.sellers.models import Seller
from apps.sellers.services import SellerNotFoundError, credit_seller
from apps.transactions.models import Transaction
from .exceptions import (
    GameNotAvailableError,
    SessionNotOpenError,
    InvalidTransactionDataError,
    LabelMismatchError,
)

logger = logging.getLogger(__name__)

CENT = Decimal('0.01')


def compute_seller_payout(sale_price, sale_commission) -> Decimal:
    """
    Amount owed to the seller for a sale.

    ``sale_commission`` is read in the unit set by SALE_COMMISSION_UNIT.
    The result is rounded half-up to the cent.
    """
    price = Decimal(str(sale_price))
    payout = price - price * commission_rate(sale_commission)
    return payout.quantize(CENT, rounding=ROUND_HALF_UP)


def _lock_game(label_id: UUID) -> DepositedGame:
    try:
        return DepositedGame.objects.select_for_update().get(id=label_id)
    except DepositedGame.DoesNotExist:
        raise DepositedGameNotFoundError(f"Deposited game {label_id} not found")


def _lock_seller(seller_id: UUID) -> Seller:
    try:
        return Seller.objects.select_for_update().get(id=seller_id)
    except Seller.DoesNotExist:
        raise SellerNotFoundError(f"Seller {seller_id} not found")


def _ensure_available(game: DepositedGame) -> None:
    if not game.is_available:
        raise GameNotAvailableError(
            f"Deposited game {game.id} is either not for sale or has been picked up"
        )


def _ensure_matches(game: DepositedGame, session: Session, seller: Seller) -> None:
    """The sale must credit the game's own seller at its own session's rate."""
    if game.seller_id != seller.id:
        raise LabelMismatchError(f"Deposited game {game.id} does not belong to seller {seller.id}")
    if game.session_id != session.id:
        raise LabelMismatchError(f"Deposited game {game.id} was not deposited in session {session.id}")


def _record_sale(*, game, session: Session, seller: Seller, client, manager) -> Transaction:
    game.for_sale = False
    game.sold = True
    game.save(update_fields=['for_sale', 'sold', 'updated_at'])

    payout = compute_seller_payout(game.sale_price, session.sale_commission)
    credit_seller(seller=seller, amount=payout)

    sale = Transaction.objects.create(
        label=game,
        session=session,
        seller=seller,
        client=client,
        manager=manager,
        transaction_date=timezone.now(),
    )
    logger.info(
        "Manager %s sold game %s for %s (seller %s credited %s)",
        manager.id, game.id, game.sale_price, seller.id, payout
    )
    return sale


@transaction.atomic
def create_transaction(
    *,
    label_id: UUID,
    session_id: UUID,
    seller_id: UUID,
    client_id: UUID,
    manager
) -> Transaction:
    """
    Sell a deposited game to a client.

    Raises:
        DepositedGameNotFoundError: If the label doesn't exist
        GameNotAvailableError: If the game is not for sale or was picked up
        SessionNotFoundError: If the session doesn't exist
        SessionNotOpenError: If the session is not open right now
        ClientNotFoundError: If the client doesn't exist
        SellerNotFoundError: If the seller doesn't exist
        LabelMismatchError: If the game belongs to another seller or session
    """
    game = _lock_game(label_id)
    _ensure_available(game)

    session = get_session_by_id(session_id=session_id)
    if not session.is_open():
        raise SessionNotOpenError("The associated session is not currently open")

    client = get_client_by_id(client_id=client_id)
    seller = _lock_seller(seller_id)
    _ensure_matches(game, session, seller)

    return _record_sale(game=game, session=session, seller=seller, client=client, manager=manager)


@transaction.atomic
def create_multiple_transactions(*, items: Iterable[Mapping], manager) -> List[Transaction]:
    """
    Record a batch of sales, all or nothing.

    Each item holds ``label_id``, ``session_id``, ``seller_id`` and
    ``client_id``. The session window is not checked here; the batch is
    meant for back-office entry of sales already made at the counter.

    Raises:
        InvalidTransactionDataError: If the batch is empty
        DepositedGameNotFoundError, SessionNotFoundError, SellerNotFoundError,
        ClientNotFoundError: If any reference is unresolved
        GameNotAvailableError: If any game is not for sale
        LabelMismatchError: If any game belongs to another seller or session
    """
    items = list(items)
    if not items:
        raise InvalidTransactionDataError("At least one transaction is required")

    created = []
    for item in items:
        game = _lock_game(item['label_id'])
        _ensure_available(game)

        session = get_session_by_id(session_id=item['session_id'])
        seller = _lock_seller(item['seller_id'])
        client = get_client_by_id(client_id=item['client_id'])
        _ensure_matches(game, session, seller)

        created.append(
            _record_sale(game=game, session=session, seller=seller, client=client, manager=manager)
        )

    logger.info("Manager %s recorded %d sales in bulk", manager.id, len(created))
    return created
