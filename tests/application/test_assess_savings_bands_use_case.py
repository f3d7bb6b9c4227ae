"""Tests for the AssessSavingsBandsUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.assess_savings_bands import (
    AssessSavingsBandsUseCase,
)
from src.domain.models import Transaction
from src.domain.policies import SavingsBandThresholds


def test_execute_returns_band_report() -> None:
    """Use case should classify the aggregated savings rate."""
    logger = MagicMock()
    use_case = AssessSavingsBandsUseCase(logger=logger)

    report = use_case.execute(
        [
            Transaction(id=1, type="income", amount=Decimal("1000"), category="Work"),
            Transaction(id=2, type="expense", amount=Decimal("450"), category="Rent"),
        ]
    )

    assert report.summary.savings_rate == Decimal("55")
    assert report.insights[0].startswith("Good savings rate")
    assert report.risk_level == "Low"
    logger.info.assert_called_once()


def test_execute_honors_custom_thresholds() -> None:
    """Custom band boundaries change the classification."""
    use_case = AssessSavingsBandsUseCase(
        thresholds=SavingsBandThresholds(excellent_rate=Decimal("50")),
        logger=MagicMock(),
    )

    report = use_case.execute(
        [
            Transaction(id=1, type="income", amount=Decimal("1000"), category="Work"),
            Transaction(id=2, type="expense", amount=Decimal("450"), category="Rent"),
        ]
    )

    assert report.insights[0].startswith("Excellent savings rate")
