"""Domain exceptions for transactions app."""


class TransactionsServiceError(Exception):
    """Base exception for all transactions service errors."""
    pass


class TransactionNotFoundError(TransactionsServiceError):
    """Transaction does not exist, or a scoped listing matched nothing."""
    pass


class InvalidTransactionDataError(TransactionsServiceError):
    """Transaction input is missing or malformed."""
    pass


class GameNotAvailableError(TransactionsServiceError):
    """Game is not for sale, or was picked up."""
    pass


class SessionNotOpenError(TransactionsServiceError):
    """Sales are only recorded while the session is open."""
    pass


class LabelMismatchError(TransactionsServiceError):
    """Seller or session given for a sale is not the game's own."""
    pass


class FrozenSaleFieldError(TransactionsServiceError):
    """Seller and session of a recorded sale cannot change."""
    pass
