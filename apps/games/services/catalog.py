"""Game description catalog - CRUD."""

from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import ProtectedError, Q, QuerySet

from apps.games.models import GameDescription
from .exceptions import (
    GameDescriptionNotFoundError,
    InvalidGameDescriptionError,
    GameDescriptionInUseError,
)

UPDATABLE_FIELDS = (
    'name', 'publisher', 'photo_url', 'description',
    'min_players', 'max_players', 'age_range',
)


def _validate_players(min_players: Optional[int], max_players: Optional[int]) -> None:
    if min_players is not None and max_players is not None and min_players > max_players:
        raise InvalidGameDescriptionError("min_players cannot exceed max_players")


def create_game_description(
    *,
    name: str,
    publisher: str = '',
    photo_url: str = '',
    description: str = '',
    min_players: Optional[int] = None,
    max_players: Optional[int] = None,
    age_range: str = ''
) -> GameDescription:
    """
    Add a game to the catalog.

    Raises:
        InvalidGameDescriptionError: If name is empty or player counts are inverted
    """
    if not name:
        raise InvalidGameDescriptionError("Game name is required")
    _validate_players(min_players, max_players)

    return GameDescription.objects.create(
        name=name,
        publisher=publisher,
        photo_url=photo_url,
        description=description,
        min_players=min_players,
        max_players=max_players,
        age_range=age_range,
    )


def get_game_description_by_id(*, game_description_id: UUID) -> GameDescription:
    """
    Raises:
        GameDescriptionNotFoundError: If game description doesn't exist
    """
    try:
        return GameDescription.objects.get(id=game_description_id)
    except GameDescription.DoesNotExist:
        raise GameDescriptionNotFoundError("Game description not found")


def list_game_descriptions(*, search: Optional[str] = None) -> QuerySet[GameDescription]:
    queryset = GameDescription.objects.all()

    if search:
        queryset = queryset.filter(Q(name__icontains=search) | Q(publisher__icontains=search))

    return queryset.order_by('name')


@transaction.atomic
def update_game_description(*, game_description_id: UUID, **fields) -> GameDescription:
    """
    Apply a partial update. Fields not passed are left unchanged.

    Raises:
        GameDescriptionNotFoundError: If game description doesn't exist
        InvalidGameDescriptionError: If the merged record is invalid
    """
    try:
        game = GameDescription.objects.select_for_update().get(id=game_description_id)
    except GameDescription.DoesNotExist:
        raise GameDescriptionNotFoundError("Game description not found")

    changed = []
    for field in UPDATABLE_FIELDS:
        if field in fields:
            setattr(game, field, fields[field])
            changed.append(field)

    if not game.name:
        raise InvalidGameDescriptionError("Game name cannot be empty")
    _validate_players(game.min_players, game.max_players)

    if changed:
        game.save(update_fields=changed + ['updated_at'])

    return game


@transaction.atomic
def delete_game_description(*, game_description_id: UUID) -> None:
    """
    Raises:
        GameDescriptionNotFoundError: If game description doesn't exist
        GameDescriptionInUseError: If deposited games reference it
    """
    try:
        deleted, _ = GameDescription.objects.filter(id=game_description_id).delete()
    except ProtectedError:
        raise GameDescriptionInUseError("Game description has deposited games and cannot be deleted")
    if not deleted:
        raise GameDescriptionNotFoundError("Game description not found")
