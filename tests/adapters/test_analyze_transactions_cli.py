"""Tests for the analyze_transactions_cli adapter."""

import json
from unittest.mock import MagicMock

import pytest

from src.adapters import analyze_transactions_cli
from src.application.use_cases.analyze_transactions import (
    AnalyzeTransactionsUseCase,
)
from src.application.use_cases.assess_savings_bands import (
    AssessSavingsBandsUseCase,
)


@pytest.fixture
def fake_logger(monkeypatch):
    logger = MagicMock()
    monkeypatch.setattr(
        analyze_transactions_cli,
        "get_app_logger",
        lambda: logger,
    )
    monkeypatch.setattr(
        analyze_transactions_cli,
        "get_usage_logger",
        lambda: MagicMock(),
    )
    return logger


def _write_request(tmp_path, payload) -> str:
    path = tmp_path / "request.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_main_prints_rule_engine_analysis(
    monkeypatch, capsys, tmp_path, fake_logger
):
    """The CLI should print the analysis of the request file."""
    request = {
        "transactions": [
            {"type": "income", "amount": 5000, "category": "Work"},
            {"type": "expense", "amount": 1500, "category": "Rent"},
            {"type": "expense", "amount": 650, "category": "Food"},
        ],
        "period": "30d",
    }
    monkeypatch.setenv("ANALYZE_INPUT_FILE", _write_request(tmp_path, request))
    monkeypatch.setattr(
        analyze_transactions_cli,
        "build_transaction_analyzer",
        lambda: AnalyzeTransactionsUseCase(logger=fake_logger),
    )

    analyze_transactions_cli.main()

    output = json.loads(capsys.readouterr().out)
    assert output["summary"]["balance"] == 2850.0
    assert output["summary"]["topExpenseCategory"] == "Rent"
    assert [item["type"] for item in output["insights"]] == [
        "positive",
        "warning",
        "suggestion",
        "suggestion",
    ]
    assert len(output["suggestions"]) == 6
    fake_logger.error.assert_not_called()


def test_main_prints_savings_band_report(
    monkeypatch, capsys, tmp_path, fake_logger
):
    """The savings-band policy output is serialized with its own shape."""
    request = {
        "transactions": [
            {"type": "income", "amount": 1000, "category": "Work"},
            {"type": "expense", "amount": 100, "category": "Food"},
        ]
    }
    monkeypatch.setenv("ANALYZE_INPUT_FILE", _write_request(tmp_path, request))
    monkeypatch.setattr(
        analyze_transactions_cli,
        "build_transaction_analyzer",
        lambda: AssessSavingsBandsUseCase(logger=fake_logger),
    )

    analyze_transactions_cli.main()

    output = json.loads(capsys.readouterr().out)
    assert output["summary"]["savingsRate"] == 90
    assert output["riskLevel"] == "Low"
    assert output["insights"][0] == "Excellent savings rate of 90.0%!"


def test_main_requires_input_file(monkeypatch, capsys, fake_logger):
    """A missing ANALYZE_INPUT_FILE should warn and print nothing."""
    monkeypatch.delenv("ANALYZE_INPUT_FILE", raising=False)

    analyze_transactions_cli.main()

    fake_logger.warning.assert_called_once()
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        json.dumps({"transactions": [{"type": "expense", "amount": 0}]}),
    ],
)
def test_main_logs_invalid_requests(
    monkeypatch, capsys, tmp_path, fake_logger, content
):
    """Unreadable or invalid requests should be logged as errors."""
    path = tmp_path / "request.json"
    path.write_text(content, encoding="utf-8")
    monkeypatch.setenv("ANALYZE_INPUT_FILE", str(path))

    analyze_transactions_cli.main()

    fake_logger.error.assert_called_once()
    assert capsys.readouterr().out == ""


def test_main_logs_missing_file(monkeypatch, capsys, tmp_path, fake_logger):
    """A path that does not exist is reported as an error."""
    monkeypatch.setenv("ANALYZE_INPUT_FILE", str(tmp_path / "missing.json"))

    analyze_transactions_cli.main()

    fake_logger.error.assert_called_once()
    assert capsys.readouterr().out == ""
