"""Helpers for Decimal normalization and guarded arithmetic."""

from decimal import Decimal

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, JSON payloads, or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def safe_divide(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Divide two amounts, returning zero when the denominator is zero.

    Args:
        numerator: Dividend amount.
        denominator: Divisor amount.

    Returns:
        Decimal: The quotient, or zero for an empty denominator.
    """
    if denominator == 0:
        return _ZERO
    return coerce_decimal(numerator) / coerce_decimal(denominator)


def percentage_of(part: Decimal, whole: Decimal) -> Decimal:
    """Return part as a percentage of whole, guarded against zero totals."""
    return safe_divide(part, whole) * _HUNDRED


__all__ = ["coerce_decimal", "safe_divide", "percentage_of"]
