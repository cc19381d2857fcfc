"""Domain exceptions for games app."""


class GamesServiceError(Exception):
    """Base exception for all games service errors."""
    pass


class GameDescriptionNotFoundError(GamesServiceError):
    """Game description does not exist."""
    pass


class InvalidGameDescriptionError(GamesServiceError):
    """Required fields missing or player counts inconsistent."""
    pass


class GameDescriptionInUseError(GamesServiceError):
    """Game description is referenced by deposited games."""
    pass


class DepositedGameNotFoundError(GamesServiceError):
    """Deposited game does not exist, or a scoped listing matched nothing."""
    pass


class InvalidDepositedGameError(GamesServiceError):
    """Deposited game input is invalid."""
    pass


class SessionClosedError(GamesServiceError):
    """Games can only be deposited while the session is open."""
    pass


class GamePickedUpError(GamesServiceError):
    """Game was returned to its seller."""
    pass


class GameAlreadySoldError(GamesServiceError):
    """Game has already been sold."""
    pass


class DepositedGameInUseError(GamesServiceError):
    """Deposited game is referenced by a transaction."""
    pass
