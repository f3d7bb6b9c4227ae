"""Tests for the AnalyzeUserTransactionsUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.analyze_user_transactions import (
    AnalyzeUserTransactionsUseCase,
)
from src.domain.models import Transaction, TransactionFilters


def test_execute_fetches_window_and_delegates_to_analyzer() -> None:
    """Use case should pass the date window and period through."""
    transactions = [
        Transaction(id=1, type="expense", amount=Decimal("10"), category="Food"),
    ]
    repository = MagicMock()
    repository.fetch_transactions.return_value = transactions
    analyzer = MagicMock()
    analyzer.execute.return_value = "analysis"

    use_case = AnalyzeUserTransactionsUseCase(
        transactions_repository=repository,
        analyzer=analyzer,
        logger=MagicMock(),
    )

    result = use_case.execute(
        user_id=7,
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 31),
        period="january",
    )

    assert result == "analysis"
    repository.fetch_transactions.assert_called_once_with(
        7,
        TransactionFilters(
            start_date=date(2024, 1, 1),
            end_date=date(2024, 1, 31),
        ),
    )
    analyzer.execute.assert_called_once_with(transactions, period="january")


def test_execute_defaults_to_unbounded_window() -> None:
    """Without dates the repository receives empty filters."""
    repository = MagicMock()
    repository.fetch_transactions.return_value = []
    analyzer = MagicMock()

    use_case = AnalyzeUserTransactionsUseCase(
        transactions_repository=repository,
        analyzer=analyzer,
        logger=MagicMock(),
    )
    use_case.execute(user_id="abc")

    repository.fetch_transactions.assert_called_once_with(
        "abc", TransactionFilters()
    )
    analyzer.execute.assert_called_once_with([], period="30d")
