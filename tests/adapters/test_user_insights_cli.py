"""Tests for the user_insights_cli adapter."""

import json
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.adapters import user_insights_cli
from src.application.use_cases.analyze_transactions import (
    AnalyzeTransactionsUseCase,
)
from src.application.use_cases.analyze_user_transactions import (
    AnalyzeUserTransactionsUseCase,
)
from src.domain.models import Transaction
from src.infrastructure.memory_transactions_repository import (
    InMemoryTransactionsRepository,
)


@pytest.fixture
def fake_logger(monkeypatch):
    logger = MagicMock()
    monkeypatch.setattr(user_insights_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(
        user_insights_cli,
        "get_usage_logger",
        lambda: MagicMock(),
    )
    for name in (
        "INSIGHTS_USER_ID",
        "INSIGHTS_START_DATE",
        "INSIGHTS_END_DATE",
        "INSIGHTS_PERIOD",
    ):
        monkeypatch.delenv(name, raising=False)
    return logger


def test_main_analyzes_stored_transactions(monkeypatch, capsys, fake_logger):
    """The CLI should analyze the user's transactions in the window."""
    repository = InMemoryTransactionsRepository(
        {
            42: [
                Transaction(
                    id=1,
                    type="income",
                    amount=Decimal("1000"),
                    category="Work",
                    date=date(2024, 1, 5),
                ),
                Transaction(
                    id=2,
                    type="expense",
                    amount=Decimal("300"),
                    category="Rent",
                    date=date(2024, 1, 10),
                ),
                Transaction(
                    id=3,
                    type="expense",
                    amount=Decimal("999"),
                    category="Travel",
                    date=date(2024, 2, 10),
                ),
            ]
        }
    )
    monkeypatch.setattr(
        user_insights_cli,
        "build_user_analysis_use_case",
        lambda: AnalyzeUserTransactionsUseCase(
            transactions_repository=repository,
            analyzer=AnalyzeTransactionsUseCase(logger=fake_logger),
            logger=fake_logger,
        ),
    )
    monkeypatch.setenv("INSIGHTS_USER_ID", "42")
    monkeypatch.setenv("INSIGHTS_START_DATE", "2024-01-01")
    monkeypatch.setenv("INSIGHTS_END_DATE", "2024-01-31")
    monkeypatch.setenv("INSIGHTS_PERIOD", "january")

    user_insights_cli.main()

    output = json.loads(capsys.readouterr().out)
    assert output["summary"]["period"] == "january"
    assert output["summary"]["totalExpenses"] == 300.0
    assert output["summary"]["transactionCount"] == 2
    assert output["categoryBreakdown"]["expenses"] == {"Rent": 300.0}


def test_main_requires_user_id(capsys, fake_logger):
    """Without a user id the CLI warns and stops."""
    user_insights_cli.main()

    fake_logger.warning.assert_called_once()
    assert capsys.readouterr().out == ""


def test_main_logs_configuration_errors(monkeypatch, capsys, fake_logger):
    """Configuration failures are logged instead of raised."""

    def _failing_builder():
        raise RuntimeError("Missing environment variable: TRANSACTIONS_DB_URL")

    monkeypatch.setattr(
        user_insights_cli,
        "build_user_analysis_use_case",
        _failing_builder,
    )
    monkeypatch.setenv("INSIGHTS_USER_ID", "7")

    user_insights_cli.main()

    fake_logger.error.assert_called_once_with(
        "Missing environment variable: TRANSACTIONS_DB_URL"
    )
    assert capsys.readouterr().out == ""


def test_main_ignores_invalid_dates(monkeypatch, fake_logger):
    """Invalid dates warn and fall back to an open window."""
    use_case = MagicMock()
    use_case.execute.return_value = AnalyzeTransactionsUseCase(
        logger=fake_logger
    ).execute([])
    monkeypatch.setattr(
        user_insights_cli,
        "build_user_analysis_use_case",
        lambda: use_case,
    )
    monkeypatch.setenv("INSIGHTS_USER_ID", "user-a")
    monkeypatch.setenv("INSIGHTS_START_DATE", "01/02/2024")

    user_insights_cli.main()

    use_case.execute.assert_called_once_with(
        "user-a",
        start_date=None,
        end_date=None,
        period="30d",
    )
    fake_logger.warning.assert_called_once()
