"""Domain exceptions for clients app."""


class ClientsServiceError(Exception):
    """Base exception for all clients service errors."""
    pass


class ClientNotFoundError(ClientsServiceError):
    """Client does not exist."""
    pass


class InvalidClientDataError(ClientsServiceError):
    """Required client fields are missing."""
    pass


class ClientInUseError(ClientsServiceError):
    """Client is referenced by transactions."""
    pass
