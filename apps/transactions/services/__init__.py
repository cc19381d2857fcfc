"""
Transactions services - Business logic layer.

- Single and bulk sale recording
- Transaction queries and corrections
"""

from .sales import (
    compute_seller_payout,
    create_transaction,
    create_multiple_transactions,
)

from .queries import (
    list_transactions,
    get_transaction,
    list_transactions_by_session,
    list_transactions_by_client,
    list_transactions_by_seller,
    update_transaction,
    delete_transaction,
)

from .exceptions import (
    TransactionsServiceError,
    TransactionNotFoundError,
    InvalidTransactionDataError,
    GameNotAvailableError,
    SessionNotOpenError,
    LabelMismatchError,
    FrozenSaleFieldError,
)

__all__ = [
    # Sales
    'compute_seller_payout',
    'create_transaction',
    'create_multiple_transactions',
    # Queries
    'list_transactions',
    'get_transaction',
    'list_transactions_by_session',
    'list_transactions_by_client',
    'list_transactions_by_seller',
    'update_transaction',
    'delete_transaction',
    # Exceptions
    'TransactionsServiceError',
    'TransactionNotFoundError',
    'InvalidTransactionDataError',
    'GameNotAvailableError',
    'SessionNotOpenError',
    'LabelMismatchError',
    'FrozenSaleFieldError',
]
