"""Domain services package."""

from .aggregation import aggregate_transactions, rank_categories
from .categorization import suggest_category
from .formatting import format_currency, format_percent
from .insights import generate_insights
from .normalization import normalize_amount, normalize_category
from .savings_bands import assess_savings_rate, classify_spending_pattern
from .validation import (
    TransactionValidationError,
    validate_amount,
    validate_category,
    validate_transaction_type,
)

__all__ = [
    "aggregate_transactions",
    "rank_categories",
    "suggest_category",
    "format_currency",
    "format_percent",
    "generate_insights",
    "normalize_amount",
    "normalize_category",
    "assess_savings_rate",
    "classify_spending_pattern",
    "TransactionValidationError",
    "validate_amount",
    "validate_category",
    "validate_transaction_type",
]
