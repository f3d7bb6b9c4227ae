"""Domain models produced by the insight engines."""

from dataclasses import dataclass
from decimal import Decimal

from .finance import CategoryAmount, CategoryBreakdown, FinancialSummary


@dataclass(frozen=True)
class Insight:
    """A classified observation about the user's finances.

    Attributes:
        type: One of ``warning``, ``positive`` or ``suggestion``.
        message: Human-readable text with formatted figures.
        category: Category name, or a fixed label such as ``Balance``.
    """

    type: str
    message: str
    category: str


@dataclass(frozen=True)
class InsightReport:
    """Insights and capped suggestions from the rule engine."""

    insights: list[Insight]
    suggestions: list[str]
    top_expense_category: str


@dataclass(frozen=True)
class SpendingAnalysis:
    """Full rule-engine analysis returned to callers."""

    summary: FinancialSummary
    breakdown: CategoryBreakdown
    report: InsightReport
    period: str


@dataclass(frozen=True)
class SavingsBandReport:
    """Result of the savings-rate banding policy."""

    summary: FinancialSummary
    category_breakdown: list[CategoryAmount]
    insights: list[str]
    suggestions: list[str]
    spending_pattern: str
    risk_level: str


@dataclass(frozen=True)
class CategorySuggestion:
    """Category suggested for a free-text description."""

    suggested_category: str
    confidence: Decimal


__all__ = [
    "Insight",
    "InsightReport",
    "SpendingAnalysis",
    "SavingsBandReport",
    "CategorySuggestion",
]
