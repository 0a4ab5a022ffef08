"""Money Conversion — decimal amounts to integer minor units and back.

Invariants:
    - Pure functions, no float arithmetic anywhere
    - to_minor_units rounds half-up to whole cents (12.34 -> 1234, 0.005 -> 1)
    - MAX_MINOR_UNITS is the largest value the invoices.amount INTEGER column holds
"""

from decimal import Decimal, ROUND_HALF_UP

from dashboard.core.domain_types import MinorUnits

_CENTS_PER_UNIT = Decimal(100)

MAX_MINOR_UNITS = 2_147_483_647
MAX_AMOUNT = Decimal(MAX_MINOR_UNITS) / _CENTS_PER_UNIT


def to_minor_units(amount: Decimal) -> MinorUnits:
    """Convert a decimal currency amount to integer cents."""
    cents = (amount * _CENTS_PER_UNIT).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return MinorUnits(int(cents))


def from_minor_units(cents: int) -> Decimal:
    """Convert stored cents back to a two-place decimal amount."""
    return (Decimal(cents) / _CENTS_PER_UNIT).quantize(Decimal("0.01"))
