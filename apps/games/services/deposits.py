"""
Deposited game service - deposit, listing and lifecycle transitions.

A deposited game ("label") moves through:

    deposited --set_for_sale--> for sale --(sale)--> sold
        ^                          |
        +-----remove_from_sale-----+
    any unsold state --mark_as_picked_up--> picked up (terminal)
"""

import logging
from decimal import Decimal
from uuid import UUID

from django.db import transaction
from django.db.models import ProtectedError, QuerySet

from apps.games.models import DepositedGame
from apps.sale_sessions.services import get_session_by_id, get_open_session
from apps.sellers.services import get_seller_by_id
from .catalog import get_game_description_by_id
from .exceptions import (
    DepositedGameNotFoundError,
    InvalidDepositedGameError,
    SessionClosedError,
    GamePickedUpError,
    GameAlreadySoldError,
    DepositedGameInUseError,
)

logger = logging.getLogger(__name__)


def _with_relations() -> QuerySet[DepositedGame]:
    return DepositedGame.objects.select_related('session', 'seller', 'game_description')


def _validate_price(sale_price: Decimal) -> None:
    if sale_price is None or sale_price < 0:
        raise InvalidDepositedGameError("Sale price must be zero or positive")


def _lock(deposited_game_id: UUID) -> DepositedGame:
    try:
        return DepositedGame.objects.select_for_update().get(id=deposited_game_id)
    except DepositedGame.DoesNotExist:
        raise DepositedGameNotFoundError("Deposited game not found")


# ============================================================================
# DEPOSIT
# ============================================================================

@transaction.atomic
def create_deposited_game(
    *,
    session_id: UUID,
    seller_id: UUID,
    game_description_id: UUID,
    sale_price: Decimal,
    for_sale: bool = False
) -> DepositedGame:
    """
    Deposit a game for a seller in an open session.

    The game starts neither sold nor picked up, and is listed for sale
    only if ``for_sale`` is requested.

    Raises:
        SessionNotFoundError, SellerNotFoundError, GameDescriptionNotFoundError:
            If a referenced record doesn't exist
        SessionClosedError: If the session is not open right now
        InvalidDepositedGameError: If the price is negative
    """
    session = get_session_by_id(session_id=session_id)
    seller = get_seller_by_id(seller_id=seller_id)
    game_description = get_game_description_by_id(game_description_id=game_description_id)

    if not session.is_open():
        raise SessionClosedError("Cannot deposit a game in a closed session")
    _validate_price(sale_price)

    game = DepositedGame.objects.create(
        session=session,
        seller=seller,
        game_description=game_description,
        sale_price=sale_price,
        for_sale=bool(for_sale),
        picked_up=False,
        sold=False,
    )
    logger.info("Seller %s deposited game %s in session %s", seller.id, game.id, session.id)
    return game


@transaction.atomic
def create_deposited_game_in_open_session(
    *,
    seller_id: UUID,
    game_description_id: UUID,
    sale_price: Decimal
) -> DepositedGame:
    """
    Deposit a game in whichever session is open right now.

    The game is not listed for sale.

    Raises:
        NoOpenSessionError: If no session is open
        AmbiguousOpenSessionError: If more than one session is open
        SellerNotFoundError, GameDescriptionNotFoundError: If a reference is unresolved
    """
    session = get_open_session()
    seller = get_seller_by_id(seller_id=seller_id)
    game_description = get_game_description_by_id(game_description_id=game_description_id)
    _validate_price(sale_price)

    game = DepositedGame.objects.create(
        session=session,
        seller=seller,
        game_description=game_description,
        sale_price=sale_price,
    )
    logger.info("Seller %s deposited game %s in open session %s", seller.id, game.id, session.id)
    return game


# ============================================================================
# READS
# ============================================================================

def list_deposited_games() -> QuerySet[DepositedGame]:
    return _with_relations().order_by('-created_at')


def get_deposited_game(*, deposited_game_id: UUID) -> DepositedGame:
    """
    Raises:
        DepositedGameNotFoundError: If deposited game doesn't exist
    """
    try:
        return _with_relations().get(id=deposited_game_id)
    except DepositedGame.DoesNotExist:
        raise DepositedGameNotFoundError("Deposited game not found")


def list_deposited_games_by_seller(*, seller_id: UUID) -> QuerySet[DepositedGame]:
    """
    Raises:
        DepositedGameNotFoundError: If the seller has no deposited games
    """
    games = list_deposited_games().filter(seller_id=seller_id)
    if not games.exists():
        raise DepositedGameNotFoundError(f"No deposited games found for seller {seller_id}")
    return games


def list_deposited_games_by_session(*, session_id: UUID) -> QuerySet[DepositedGame]:
    """
    Raises:
        DepositedGameNotFoundError: If the session has no deposited games
    """
    games = list_deposited_games().filter(session_id=session_id)
    if not games.exists():
        raise DepositedGameNotFoundError(f"No deposited games found for session {session_id}")
    return games


def list_deposited_games_by_seller_and_session(
    *,
    seller_id: UUID,
    session_id: UUID
) -> QuerySet[DepositedGame]:
    """
    Raises:
        DepositedGameNotFoundError: If the seller deposited nothing in the session
    """
    games = list_deposited_games().filter(seller_id=seller_id, session_id=session_id)
    if not games.exists():
        raise DepositedGameNotFoundError(
            f"No deposited games found for seller {seller_id} in session {session_id}"
        )
    return games


# ============================================================================
# UPDATE / DELETE
# ============================================================================

@transaction.atomic
def update_deposited_game(*, deposited_game_id: UUID, **fields) -> DepositedGame:
    """
    Apply a partial update to price and references.

    Sale state flags only change through the lifecycle operations below.
    Sold and picked up games are frozen. Changed references are resolved
    again, and a new session must be open.

    Raises:
        DepositedGameNotFoundError: If deposited game doesn't exist
        GameAlreadySoldError: If the game was sold
        GamePickedUpError: If the game was picked up
        SessionNotFoundError, SellerNotFoundError, GameDescriptionNotFoundError:
            If a new reference is unresolved
        SessionClosedError: If the new session is not open right now
        InvalidDepositedGameError: If the price is negative
    """
    game = _lock(deposited_game_id)

    if game.sold:
        raise GameAlreadySoldError("A sold game cannot be modified")
    if game.picked_up:
        raise GamePickedUpError("A picked up game cannot be modified")

    changed = []

    if fields.get('session_id') is not None:
        session = get_session_by_id(session_id=fields['session_id'])
        if session.id != game.session_id and not session.is_open():
            raise SessionClosedError("Cannot move a game into a closed session")
        game.session = session
        changed.append('session')
    if fields.get('seller_id') is not None:
        game.seller = get_seller_by_id(seller_id=fields['seller_id'])
        changed.append('seller')
    if fields.get('game_description_id') is not None:
        game.game_description = get_game_description_by_id(
            game_description_id=fields['game_description_id']
        )
        changed.append('game_description')
    if fields.get('sale_price') is not None:
        _validate_price(fields['sale_price'])
        game.sale_price = fields['sale_price']
        changed.append('sale_price')

    if changed:
        game.save(update_fields=changed + ['updated_at'])

    return game


@transaction.atomic
def delete_deposited_game(*, deposited_game_id: UUID) -> None:
    """
    Raises:
        DepositedGameNotFoundError: If deposited game doesn't exist
        DepositedGameInUseError: If a transaction references it
    """
    try:
        deleted, _ = DepositedGame.objects.filter(id=deposited_game_id).delete()
    except ProtectedError:
        raise DepositedGameInUseError("Deposited game has a transaction and cannot be deleted")
    if not deleted:
        raise DepositedGameNotFoundError("Deposited game not found")


# ============================================================================
# LIFECYCLE
# ============================================================================

@transaction.atomic
def set_for_sale(*, deposited_game_id: UUID) -> DepositedGame:
    """
    List a game for sale.

    Raises:
        DepositedGameNotFoundError: If deposited game doesn't exist
        GamePickedUpError: If the game was picked up
        GameAlreadySoldError: If the game was sold
    """
    game = _lock(deposited_game_id)

    if game.picked_up:
        raise GamePickedUpError("Cannot put a picked up game up for sale")
    if game.sold:
        raise GameAlreadySoldError("Cannot put a sold game up for sale")

    game.for_sale = True
    game.save(update_fields=['for_sale', 'updated_at'])

    logger.info("Game %s put up for sale", game.id)
    return game


@transaction.atomic
def remove_from_sale(*, deposited_game_id: UUID) -> DepositedGame:
    """
    Raises:
        DepositedGameNotFoundError: If deposited game doesn't exist
    """
    game = _lock(deposited_game_id)

    game.for_sale = False
    game.save(update_fields=['for_sale', 'updated_at'])

    logger.info("Game %s removed from sale", game.id)
    return game


@transaction.atomic
def mark_as_picked_up(*, deposited_game_id: UUID) -> DepositedGame:
    """
    Record that the seller took the game back.

    Raises:
        DepositedGameNotFoundError: If deposited game doesn't exist
        GameAlreadySoldError: If the game was sold
    """
    game = _lock(deposited_game_id)

    if game.sold:
        raise GameAlreadySoldError("A sold game cannot be picked up")

    game.for_sale = False
    game.picked_up = True
    game.save(update_fields=['for_sale', 'picked_up', 'updated_at'])

    logger.info("Game %s picked up by seller %s", game.id, game.seller_id)
    return game
