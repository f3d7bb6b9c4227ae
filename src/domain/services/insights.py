"""Rule-based insight engine over aggregated transactions.

Rules run in a fixed order and every matching rule contributes, so the order
below defines the order of insights and suggestions in the output:

1. balance sign
2. top expense category concentration
3. average expense magnitude
4. income source diversification
5. low activity (suggestion only)
6. general suggestions (always appended)

Suggestions are truncated after assembly, so rule-derived suggestions win
over the general tail when the cap is reached.
"""

from src.domain.constants import (
    DEFAULT_CURRENCY_SYMBOL,
    INSIGHT_POSITIVE,
    INSIGHT_SUGGESTION,
    INSIGHT_WARNING,
    NO_CATEGORY_LABEL,
)
from src.domain.models import (
    CategoryBreakdown,
    FinancialSummary,
    Insight,
    InsightReport,
)
from src.domain.policies import InsightThresholds
from src.domain.services.formatting import format_currency, format_percent

BALANCE_LABEL = "Balance"
SAVINGS_LABEL = "Savings"
BEHAVIOR_LABEL = "Behavior"
INCOME_LABEL = "Income"

GENERAL_SUGGESTIONS = (
    "Use auto-categorization to organize your spending better",
    "Set monthly goals for each spending category",
    "Review your spending weekly to stay in control",
)
LOW_ACTIVITY_SUGGESTION = "Log more transactions for more accurate analysis"


def generate_insights(
    summary: FinancialSummary,
    breakdown: CategoryBreakdown,
    transaction_count: int,
    thresholds: InsightThresholds | None = None,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> InsightReport:
    """Derive typed insights and capped suggestions from aggregates.

    Args:
        summary: Totals produced by the aggregator.
        breakdown: Category breakdowns produced by the aggregator.
        transaction_count: Number of transactions analyzed.
        thresholds: Optional threshold overrides.
        currency_symbol: Symbol used when formatting amounts.

    Returns:
        InsightReport: Insights in rule order, at most
        ``thresholds.max_suggestions`` suggestions, and the top expense
        category (``N/A`` when there are no expenses).
    """
    limits = thresholds or InsightThresholds()
    insights: list[Insight] = []
    suggestions: list[str] = []

    def money(value) -> str:
        return format_currency(value, currency_symbol)

    balance = summary.balance
    if balance < 0:
        insights.append(
            Insight(
                type=INSIGHT_WARNING,
                message=(
                    "Attention! Your spending exceeded your income by "
                    f"{money(abs(balance))}"
                ),
                category=BALANCE_LABEL,
            )
        )
        suggestions.append("Review your expenses to balance your budget")
        suggestions.append("Consider cutting non-essential spending")
    elif balance > 0:
        insights.append(
            Insight(
                type=INSIGHT_POSITIVE,
                message=(
                    f"Congratulations! You saved {money(balance)} this period"
                ),
                category=SAVINGS_LABEL,
            )
        )
        suggestions.append("Keep up this financial discipline")
        suggestions.append("Consider investing the amount you saved")

    top = breakdown.expense[0] if breakdown.expense else None
    if top is not None and summary.total_expense > 0:
        share = top.percentage
        if share > limits.top_category_warning_percent:
            insights.append(
                Insight(
                    type=INSIGHT_WARNING,
                    message=(
                        f"{top.category} accounts for {format_percent(share)} "
                        f"of your spending ({money(top.amount)})"
                    ),
                    category=top.category,
                )
            )
            suggestions.append(
                f"Analyze whether spending on {top.category} can be reduced"
            )
        elif share > limits.top_category_suggestion_percent:
            insights.append(
                Insight(
                    type=INSIGHT_SUGGESTION,
                    message=(
                        f"{top.category} is your largest spending category "
                        f"({money(top.amount)})"
                    ),
                    category=top.category,
                )
            )
            suggestions.append(f"Set a monthly budget for {top.category}")

    average_expense = summary.average_expense
    if average_expense > limits.high_average_expense:
        insights.append(
            Insight(
                type=INSIGHT_SUGGESTION,
                message=(
                    "Your transactions have a high average value "
                    f"({money(average_expense)})"
                ),
                category=BEHAVIOR_LABEL,
            )
        )
        suggestions.append(
            "Consider making more, smaller purchases for better control"
        )

    if len(breakdown.income) == 1:
        insights.append(
            Insight(
                type=INSIGHT_SUGGESTION,
                message="You have only one income source",
                category=INCOME_LABEL,
            )
        )
        suggestions.append("Consider diversifying your income sources")
        suggestions.append("Explore extra income opportunities")

    if transaction_count < limits.low_activity_count:
        suggestions.append(LOW_ACTIVITY_SUGGESTION)

    suggestions.extend(GENERAL_SUGGESTIONS)

    return InsightReport(
        insights=insights,
        suggestions=suggestions[: limits.max_suggestions],
        top_expense_category=top.category if top else NO_CATEGORY_LABEL,
    )


__all__ = [
    "generate_insights",
    "GENERAL_SUGGESTIONS",
    "LOW_ACTIVITY_SUGGESTION",
    "BALANCE_LABEL",
    "SAVINGS_LABEL",
    "BEHAVIOR_LABEL",
    "INCOME_LABEL",
]
