"""Savings-rate banding policy.

An alternate insight policy that classifies a period purely by its savings
rate. Deployments choose either this policy or the rule engine in
``insights``; the two are never combined.
"""

from decimal import Decimal

from src.domain.models import SavingsBandReport, TransactionAggregate
from src.domain.policies import SavingsBandThresholds
from src.domain.services.formatting import format_percent

RISK_LOW = "Low"
RISK_MEDIUM = "Medium"
RISK_HIGH = "High"
RISK_NEUTRAL = "Neutral"

PATTERN_CONSERVATIVE = "Conservative - spends little and saves a lot"
PATTERN_BALANCED = "Balanced - good ratio between spending and saving"
PATTERN_MODERATE = "Moderate - spends most of the income"
PATTERN_HIGH_RISK = "High risk - spending close to or above income"
PATTERN_BEGINNER = "Beginner - not enough data"

_EMPTY_INSIGHTS = [
    "You have no recorded transactions yet.",
    "Start adding your income and expenses to get personalized insights.",
    "Tracking your finances is the first step towards your goals!",
]
_EMPTY_SUGGESTIONS = [
    "Record your first transaction to get started",
    "Define categories to organize your spending",
    "Set monthly financial goals",
]


def assess_savings_rate(
    aggregate: TransactionAggregate,
    thresholds: SavingsBandThresholds | None = None,
) -> SavingsBandReport:
    """Classify a period by its savings rate.

    Args:
        aggregate: Aggregator output for the period.
        thresholds: Optional band boundary overrides.

    Returns:
        SavingsBandReport: Band insights, spending pattern and risk level,
        with a flat ranked expense breakdown.
    """
    summary = aggregate.summary
    if summary.transaction_count == 0:
        return SavingsBandReport(
            summary=summary,
            category_breakdown=[],
            insights=list(_EMPTY_INSIGHTS),
            suggestions=list(_EMPTY_SUGGESTIONS),
            spending_pattern=PATTERN_BEGINNER,
            risk_level=RISK_NEUTRAL,
        )

    bands = thresholds or SavingsBandThresholds()
    rate = summary.savings_rate
    insight, suggestion = _rate_band(rate, bands)
    insights = [insight]
    top = aggregate.top_expense
    if top is not None:
        insights.append(
            f"Your spending on {top.category} accounts for "
            f"{format_percent(top.percentage)} of total expenses."
        )
    spending_pattern, risk_level = classify_spending_pattern(rate, bands)
    return SavingsBandReport(
        summary=summary,
        category_breakdown=list(aggregate.breakdown.expense),
        insights=insights,
        suggestions=[suggestion],
        spending_pattern=spending_pattern,
        risk_level=risk_level,
    )


def classify_spending_pattern(
    savings_rate: Decimal,
    thresholds: SavingsBandThresholds | None = None,
) -> tuple[str, str]:
    """Return the spending pattern and risk level for a savings rate."""
    bands = thresholds or SavingsBandThresholds()
    if savings_rate >= bands.conservative_pattern_rate:
        return PATTERN_CONSERVATIVE, RISK_LOW
    if savings_rate >= bands.balanced_pattern_rate:
        return PATTERN_BALANCED, RISK_LOW
    if savings_rate >= bands.moderate_pattern_rate:
        return PATTERN_MODERATE, RISK_MEDIUM
    return PATTERN_HIGH_RISK, RISK_HIGH


def _rate_band(
    rate: Decimal,
    bands: SavingsBandThresholds,
) -> tuple[str, str]:
    label = format_percent(rate)
    if rate >= bands.excellent_rate:
        return (
            f"Excellent savings rate of {label}!",
            "Keep up this excellent discipline and consider investing "
            "the surplus",
        )
    if rate >= bands.good_rate:
        return (
            f"Good savings rate of {label}!",
            "Stay focused on controlling your spending",
        )
    if rate >= bands.moderate_rate:
        return (
            f"Moderate savings rate of {label}.",
            "Try to identify expenses that can be reduced",
        )
    if rate > 0:
        return (
            f"Low savings rate of {label}.",
            "Review your spending and find where you can save",
        )
    return (
        "Your spending is at or above your income.",
        "URGENT: review all your expenses and cut the superfluous ones",
    )


__all__ = [
    "assess_savings_rate",
    "classify_spending_pattern",
    "RISK_LOW",
    "RISK_MEDIUM",
    "RISK_HIGH",
    "RISK_NEUTRAL",
    "PATTERN_CONSERVATIVE",
    "PATTERN_BALANCED",
    "PATTERN_MODERATE",
    "PATTERN_HIGH_RISK",
    "PATTERN_BEGINNER",
]
