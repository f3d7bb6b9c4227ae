"""Domain models for user transactions."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal


@dataclass(frozen=True)
class Transaction:
    """A single income or expense record.

    Attributes:
        id: Caller-assigned identifier.
        type: Either ``income`` or ``expense``.
        amount: Positive amount; the sign is carried by ``type``.
        category: Free-form category name.
        description: Optional free-text description.
        date: Optional posting date, used only for upstream filtering.
    """

    id: int | str | None
    type: str
    amount: Decimal
    category: str
    description: str | None = None
    date: date | datetime | None = None


@dataclass(frozen=True)
class TransactionFilters:
    """Filters applied when reading transactions for a user."""

    type: str | None = None
    category: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    limit: int | None = None
    offset: int | None = None


__all__ = ["Transaction", "TransactionFilters"]
