"""Domain exceptions for sale sessions app."""


class SessionsServiceError(Exception):
    """Base exception for all sale session service errors."""
    pass


class SessionNotFoundError(SessionsServiceError):
    """Session does not exist."""
    pass


class InvalidSessionDataError(SessionsServiceError):
    """Required session fields are missing."""
    pass


class InvalidSessionDatesError(SessionsServiceError):
    """Session ends before it starts."""
    pass


class InvalidCommissionError(SessionsServiceError):
    """Commission is outside the range allowed by the configured unit."""
    pass


class NoOpenSessionError(SessionsServiceError):
    """No session is open right now."""
    pass


class AmbiguousOpenSessionError(SessionsServiceError):
    """More than one session is open right now."""
    pass


class SessionInUseError(SessionsServiceError):
    """Session still has deposited games or transactions."""
    pass
