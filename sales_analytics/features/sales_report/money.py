"""Currency helpers.

Amounts are accumulated as integer cents and converted back to ``Decimal``
only when a report row is emitted. Rounding is half away from zero
(``ROUND_HALF_UP`` in the decimal module).
"""

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")
ZERO = Decimal("0")

Number = Decimal | float | int


def to_decimal(value: object) -> Decimal | None:
    """Convert a numeric value to Decimal.

    Floats go through ``str`` so 0.1 becomes Decimal("0.1") rather than its
    binary expansion.

    Returns:
        The Decimal value, or None for missing, non-numeric or non-finite input.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value)) if math.isfinite(value) else None
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return result if result.is_finite() else None


def round_currency(value: object) -> Decimal:
    """Round an amount to cents. Non-finite or missing amounts become 0.00."""
    amount = to_decimal(value)
    if amount is None:
        return ZERO.quantize(CENT)
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def to_cents(value: object) -> int:
    """Round an amount to the cent and return it in integer minor units."""
    return int(round_currency(value) * 100)


def from_cents(cents: int) -> Decimal:
    """Convert integer minor units back to a Decimal amount with two places."""
    return (Decimal(cents) / 100).quantize(CENT)
