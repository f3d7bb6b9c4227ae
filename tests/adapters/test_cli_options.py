"""Tests for the shared CLI parsing helpers."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from src.adapters.cli_options import parse_date, parse_user_id


def test_parse_date_accepts_iso_dates() -> None:
    """ISO dates are parsed without warnings."""
    logger = MagicMock()

    assert parse_date(" 2024-02-29 ", logger) == date(2024, 2, 29)
    assert parse_date(None, logger) is None
    logger.warning.assert_not_called()


def test_parse_date_warns_on_invalid_value() -> None:
    """Invalid dates return None and warn."""
    logger = MagicMock()

    assert parse_date("2024-02-30", logger) is None
    logger.warning.assert_called_once()


@pytest.mark.parametrize(
    "raw, expected",
    [("42", 42), (" 7 ", 7), ("user-a", "user-a"), ("", None), (None, None)],
)
def test_parse_user_id(raw, expected) -> None:
    """Numeric ids become ints and other ids stay strings."""
    assert parse_user_id(raw) == expected
