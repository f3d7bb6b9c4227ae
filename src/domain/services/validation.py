"""Boundary validation for raw transaction fields."""

from decimal import Decimal, InvalidOperation

from src.domain.constants import TRANSACTION_TYPES
from src.domain.services.normalization import (
    normalize_amount,
    normalize_category,
)


class TransactionValidationError(ValueError):
    """Raised when a raw transaction cannot be accepted."""

    def __init__(self, field: str, message: str, index: int | None = None):
        self.field = field
        self.index = index
        location = field
        if index is not None:
            location = f"transactions[{index}].{field}"
        super().__init__(f"{location}: {message}")


def validate_transaction_type(value, index: int | None = None) -> str:
    """Return the transaction type when it is income or expense."""
    if value not in TRANSACTION_TYPES:
        raise TransactionValidationError(
            "type",
            f"expected one of {', '.join(TRANSACTION_TYPES)}, got {value!r}",
            index,
        )
    return value


def validate_amount(value, index: int | None = None) -> Decimal:
    """Return a positive Decimal amount.

    Negative amounts are normalized to their absolute value first, so only
    zero, non-numeric, and non-finite values are rejected.

    Raises:
        TransactionValidationError: If the amount is unusable.
    """
    if isinstance(value, bool) or not isinstance(
        value, (int, float, str, Decimal)
    ):
        raise TransactionValidationError(
            "amount", f"expected a number, got {value!r}", index
        )
    try:
        amount = Decimal(str(value))
    except InvalidOperation as exc:
        raise TransactionValidationError(
            "amount", f"expected a number, got {value!r}", index
        ) from exc
    if not amount.is_finite():
        raise TransactionValidationError(
            "amount", "must be a finite number", index
        )
    amount = normalize_amount(amount)
    if amount <= 0:
        raise TransactionValidationError(
            "amount", "must be greater than zero", index
        )
    return amount


def validate_category(value, index: int | None = None) -> str:
    """Return the normalized category when it is a non-empty string."""
    if not isinstance(value, str) or not value.strip():
        raise TransactionValidationError(
            "category", "must be a non-empty string", index
        )
    return normalize_category(value)


__all__ = [
    "TransactionValidationError",
    "validate_transaction_type",
    "validate_amount",
    "validate_category",
]
