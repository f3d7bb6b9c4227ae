"""Parsing helpers shared by the command-line adapters."""

from datetime import date


def parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def parse_user_id(value: str | None) -> int | str | None:
    """Return numeric user ids as int and any other id unchanged."""
    if value is None or not value.strip():
        return None
    cleaned = value.strip()
    return int(cleaned) if cleaned.isdigit() else cleaned


__all__ = ["parse_date", "parse_user_id"]
