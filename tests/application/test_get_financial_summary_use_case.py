"""Tests for the GetFinancialSummaryUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_financial_summary import (
    GetFinancialSummaryUseCase,
)
from src.domain.models import Transaction


def _expense(category: str, amount: str) -> Transaction:
    return Transaction(
        id=category, type="expense", amount=Decimal(amount), category=category
    )


def test_execute_limits_top_categories() -> None:
    """Only the largest categories per type should be returned."""
    repository = MagicMock()
    repository.fetch_transactions.return_value = [
        _expense("A", "10"),
        _expense("B", "60"),
        _expense("C", "30"),
        _expense("D", "50"),
        _expense("E", "20"),
        _expense("F", "40"),
        Transaction(
            id="s", type="income", amount=Decimal("300"), category="Salary"
        ),
    ]

    use_case = GetFinancialSummaryUseCase(
        transactions_repository=repository,
        logger=MagicMock(),
    )
    overview = use_case.execute(user_id=1)

    assert [item.category for item in overview.top_expense_categories] == [
        "B",
        "D",
        "F",
        "C",
        "E",
    ]
    assert [item.category for item in overview.top_income_categories] == [
        "Salary",
    ]
    assert overview.summary.total_expense == Decimal("210")
    assert overview.summary.balance == Decimal("90")
    assert overview.summary.average_expense == Decimal("35")


def test_execute_with_custom_limit_and_no_data() -> None:
    """Empty data yields zero totals and empty category lists."""
    repository = MagicMock()
    repository.fetch_transactions.return_value = []

    use_case = GetFinancialSummaryUseCase(
        transactions_repository=repository,
        logger=MagicMock(),
        top_limit=2,
    )
    overview = use_case.execute(user_id=1)

    assert overview.summary.transaction_count == 0
    assert overview.summary.average_income == Decimal("0")
    assert overview.top_expense_categories == []
    assert overview.top_income_categories == []
