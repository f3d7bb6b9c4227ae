"""Tunable thresholds for the insight engines."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.constants import (
    HIGH_AVERAGE_EXPENSE,
    LOW_ACTIVITY_TRANSACTION_COUNT,
    MAX_SUGGESTIONS,
    PATTERN_BALANCED_RATE,
    PATTERN_CONSERVATIVE_RATE,
    PATTERN_MODERATE_RATE,
    SAVINGS_EXCELLENT_RATE,
    SAVINGS_GOOD_RATE,
    SAVINGS_MODERATE_RATE,
    TOP_CATEGORY_SUGGESTION_PERCENT,
    TOP_CATEGORY_WARNING_PERCENT,
)


@dataclass(frozen=True)
class InsightThresholds:
    """Thresholds used by the rule-based insight engine.

    Attributes:
        top_category_warning_percent: Share above which the top expense
            category raises a warning.
        top_category_suggestion_percent: Share above which the top expense
            category raises a budgeting suggestion.
        high_average_expense: Average expense amount considered high.
        low_activity_count: Transaction count below which more logging is
            suggested.
        max_suggestions: Maximum suggestions returned.
    """

    top_category_warning_percent: Decimal = TOP_CATEGORY_WARNING_PERCENT
    top_category_suggestion_percent: Decimal = TOP_CATEGORY_SUGGESTION_PERCENT
    high_average_expense: Decimal = HIGH_AVERAGE_EXPENSE
    low_activity_count: int = LOW_ACTIVITY_TRANSACTION_COUNT
    max_suggestions: int = MAX_SUGGESTIONS


@dataclass(frozen=True)
class SavingsBandThresholds:
    """Savings-rate boundaries used by the banding policy."""

    excellent_rate: Decimal = SAVINGS_EXCELLENT_RATE
    good_rate: Decimal = SAVINGS_GOOD_RATE
    moderate_rate: Decimal = SAVINGS_MODERATE_RATE
    conservative_pattern_rate: Decimal = PATTERN_CONSERVATIVE_RATE
    balanced_pattern_rate: Decimal = PATTERN_BALANCED_RATE
    moderate_pattern_rate: Decimal = PATTERN_MODERATE_RATE


__all__ = ["InsightThresholds", "SavingsBandThresholds"]
