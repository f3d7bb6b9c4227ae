"""Tests for the GetMonthlyStatsUseCase."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_monthly_stats import GetMonthlyStatsUseCase
from src.domain.models import Transaction, TransactionFilters


def test_execute_returns_twelve_months_with_totals() -> None:
    """Every month should be present, with zeros for empty months."""
    repository = MagicMock()
    repository.fetch_transactions.return_value = [
        Transaction(
            id=1,
            type="income",
            amount=Decimal("1000"),
            category="Salary",
            date=date(2024, 1, 5),
        ),
        Transaction(
            id=2,
            type="expense",
            amount=Decimal("250"),
            category="Rent",
            date=datetime(2024, 1, 10, 12, 30),
        ),
        Transaction(
            id=3,
            type="expense",
            amount=Decimal("80"),
            category="Food",
            date=date(2024, 3, 2),
        ),
    ]
    logger = MagicMock()

    stats = GetMonthlyStatsUseCase(repository, logger=logger).execute(
        user_id=1, year=2024
    )

    assert [item.month for item in stats] == list(range(1, 13))
    assert stats[0].month_name == "January"
    assert stats[0].income == Decimal("1000")
    assert stats[0].expense == Decimal("250")
    assert stats[0].balance == Decimal("750")
    assert stats[0].transaction_count == 2
    assert stats[1].transaction_count == 0
    assert stats[1].balance == Decimal("0")
    assert stats[2].expense == Decimal("80")
    logger.warning.assert_not_called()
    repository.fetch_transactions.assert_called_once_with(
        1,
        TransactionFilters(
            start_date=date(2024, 1, 1),
            end_date=date(2024, 12, 31),
        ),
    )


def test_execute_skips_undated_and_other_years() -> None:
    """Transactions without a date or from another year are skipped."""
    repository = MagicMock()
    repository.fetch_transactions.return_value = [
        Transaction(
            id=1, type="expense", amount=Decimal("10"), category="Food"
        ),
        Transaction(
            id=2,
            type="expense",
            amount=Decimal("20"),
            category="Food",
            date=date(2023, 12, 31),
        ),
    ]
    logger = MagicMock()

    stats = GetMonthlyStatsUseCase(repository, logger=logger).execute(
        user_id=1, year=2024
    )

    assert sum(item.transaction_count for item in stats) == 0
    logger.warning.assert_called_once()
    assert "Skipped 2" in logger.warning.call_args.args[0]
