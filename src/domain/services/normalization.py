"""Domain normalization helpers."""

from decimal import Decimal


def normalize_category(category: str) -> str:
    """Normalize a category name to a capitalized, trimmed form.

    Args:
        category: Raw category name.

    Returns:
        str: Category with the first letter upper-cased and the rest lower.
    """
    cleaned = category.strip()
    return cleaned[:1].upper() + cleaned[1:].lower()


def normalize_amount(amount: Decimal) -> Decimal:
    """Return the absolute amount; the transaction type carries the sign."""
    return abs(amount)


__all__ = ["normalize_category", "normalize_amount"]
