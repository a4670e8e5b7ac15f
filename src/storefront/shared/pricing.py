"""Per-item price and discount arithmetic.

Pure functions only: no repository access, no mutation.
"""

from protean.exceptions import ValidationError


def line_total(quantity: int, unit_price: float) -> float:
    """Pre-discount total for one order line."""
    return quantity * unit_price


def apply_discount(amount: float, discount_rate: float) -> float:
    """Return ``amount`` after applying a multiplicative discount rate.

    A rate of 1 leaves the amount untouched; 0.5 halves it. Rates outside
    (0, 1] are rejected.
    """
    if discount_rate is None or not 0 < discount_rate <= 1:
        raise ValidationError({"discount_rate": [f"Discount rate must be in (0, 1], got {discount_rate}"]})
    return amount * discount_rate


def truncate_to_whole_units(amount: float) -> int:
    """Format to two decimals, then drop the fractional part entirely.

    The balance check compares against this value. The fraction is discarded,
    not rounded: 40.99 becomes 40.
    """
    return int(float(f"{amount:.2f}"))
