"""Domain exceptions for sellers app."""


class SellersServiceError(Exception):
    """Base exception for all sellers service errors."""
    pass


class SellerNotFoundError(SellersServiceError):
    """Seller does not exist."""
    pass


class InvalidSellerDataError(SellersServiceError):
    """Required seller fields are missing or invalid."""
    pass


class SellerInUseError(SellersServiceError):
    """Seller still has deposited games or transactions."""
    pass
