"""
Sale sessions services - Business logic layer.

- Session CRUD operations
- Open-window queries
- Commission unit conversion
"""

from .session_management import (
    create_session,
    get_session_by_id,
    list_sessions,
    update_session,
    delete_session,
    is_session_open,
    list_open_sessions,
    get_open_session,
)

from .commission import commission_rate, get_commission_unit, max_commission

from .exceptions import (
    SessionsServiceError,
    SessionNotFoundError,
    InvalidSessionDataError,
    InvalidSessionDatesError,
    InvalidCommissionError,
    NoOpenSessionError,
    AmbiguousOpenSessionError,
    SessionInUseError,
)

__all__ = [
    # Session Management
    'create_session',
    'get_session_by_id',
    'list_sessions',
    'update_session',
    'delete_session',
    'is_session_open',
    'list_open_sessions',
    'get_open_session',
    # Commission
    'commission_rate',
    'get_commission_unit',
    'max_commission',
    # Exceptions
    'SessionsServiceError',
    'SessionNotFoundError',
    'InvalidSessionDataError',
    'InvalidSessionDatesError',
    'InvalidCommissionError',
    'NoOpenSessionError',
    'AmbiguousOpenSessionError',
    'SessionInUseError',
]
