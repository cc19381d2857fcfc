"""
Sellers services - Business logic layer.

- Seller CRUD operations
- Balance accrual used by sales
"""

from .seller_management import (
    create_seller,
    get_seller_by_id,
    list_sellers,
    update_seller,
    delete_seller,
    credit_seller,
)

from .exceptions import (
    SellersServiceError,
    SellerNotFoundError,
    InvalidSellerDataError,
    SellerInUseError,
)

__all__ = [
    'create_seller',
    'get_seller_by_id',
    'list_sellers',
    'update_seller',
    'delete_seller',
    'credit_seller',
    'SellersServiceError',
    'SellerNotFoundError',
    'InvalidSellerDataError',
    'SellerInUseError',
]
