"""Formatting helpers for insight messages."""

from decimal import Decimal

from src.domain.constants import DEFAULT_CURRENCY_SYMBOL


def format_currency(
    value: Decimal,
    symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> str:
    """Format an amount with two decimals and a currency symbol."""
    return f"{symbol} {value:.2f}"


def format_percent(value: Decimal) -> str:
    """Format a percentage with one decimal place."""
    return f"{value:.1f}%"


__all__ = ["format_currency", "format_percent"]
