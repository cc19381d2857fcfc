"""
Games services - Business logic layer.

- Game description catalog
- Deposited game creation, listing and lifecycle
"""

from .catalog import (
    create_game_description,
    get_game_description_by_id,
    list_game_descriptions,
    update_game_description,
    delete_game_description,
)

from .deposits import (
    create_deposited_game,
    create_deposited_game_in_open_session,
    list_deposited_games,
    get_deposited_game,
    list_deposited_games_by_seller,
    list_deposited_games_by_session,
    list_deposited_games_by_seller_and_session,
    update_deposited_game,
    delete_deposited_game,
    set_for_sale,
    remove_from_sale,
    mark_as_picked_up,
)

from .exceptions import (
    GamesServiceError,
    GameDescriptionNotFoundError,
    InvalidGameDescriptionError,
    GameDescriptionInUseError,
    DepositedGameNotFoundError,
    InvalidDepositedGameError,
    SessionClosedError,
    GamePickedUpError,
    GameAlreadySoldError,
    DepositedGameInUseError,
)

__all__ = [
    # Catalog
    'create_game_description',
    'get_game_description_by_id',
    'list_game_descriptions',
    'update_game_description',
    'delete_game_description',
    # Deposits
    'create_deposited_game',
    'create_deposited_game_in_open_session',
    'list_deposited_games',
    'get_deposited_game',
    'list_deposited_games_by_seller',
    'list_deposited_games_by_session',
    'list_deposited_games_by_seller_and_session',
    'update_deposited_game',
    'delete_deposited_game',
    'set_for_sale',
    'remove_from_sale',
    'mark_as_picked_up',
    # Exceptions
    'GamesServiceError',
    'GameDescriptionNotFoundError',
    'InvalidGameDescriptionError',
    'GameDescriptionInUseError',
    'DepositedGameNotFoundError',
    'InvalidDepositedGameError',
    'SessionClosedError',
    'GamePickedUpError',
    'GameAlreadySoldError',
    'DepositedGameInUseError',
]
