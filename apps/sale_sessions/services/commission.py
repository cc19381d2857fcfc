"""
Commission unit handling.

``Session.sale_commission`` is interpreted according to the
``SALE_COMMISSION_UNIT`` setting:

- ``fraction``: 0.1 keeps 10 % of the sale price
- ``percent``:  10 keeps 10 % of the sale price
"""

from decimal import Decimal

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

FRACTION = 'fraction'
PERCENT = 'percent'

MAX_COMMISSION = {
    FRACTION: Decimal('1'),
    PERCENT: Decimal('100'),
}


def get_commission_unit() -> str:
    unit = getattr(settings, 'SALE_COMMISSION_UNIT', FRACTION)
    if unit not in MAX_COMMISSION:
        raise ImproperlyConfigured(
            f"SALE_COMMISSION_UNIT must be one of {sorted(MAX_COMMISSION)}, got {unit!r}"
        )
    return unit


def max_commission() -> Decimal:
    return MAX_COMMISSION[get_commission_unit()]


def commission_rate(sale_commission) -> Decimal:
    """Convert a stored commission into a fraction of the sale price."""
    rate = Decimal(str(sale_commission))
    if get_commission_unit() == PERCENT:
        rate = rate / Decimal('100')
    return rate
