"""Domain models for transaction aggregates."""

from dataclasses import dataclass
from decimal import Decimal

from src.utils.decimal_utils import percentage_of, safe_divide


@dataclass(frozen=True)
class FinancialSummary:
    """Totals computed over one user's transactions.

    Attributes:
        total_income: Sum of income amounts.
        total_expense: Sum of expense amounts.
        transaction_count: Number of transactions examined.
        income_count: Number of income transactions.
        expense_count: Number of expense transactions.
    """

    total_income: Decimal
    total_expense: Decimal
    transaction_count: int
    income_count: int
    expense_count: int

    @property
    def balance(self) -> Decimal:
        """Return total_income minus total_expense."""
        return self.total_income - self.total_expense

    @property
    def savings_rate(self) -> Decimal:
        """Return the balance as a percentage of income, 0 without income."""
        return percentage_of(self.balance, self.total_income)

    @property
    def average_expense(self) -> Decimal:
        """Return the mean expense amount, 0 without expenses."""
        return safe_divide(self.total_expense, Decimal(self.expense_count))

    @property
    def average_income(self) -> Decimal:
        """Return the mean income amount, 0 without income."""
        return safe_divide(self.total_income, Decimal(self.income_count))


@dataclass(frozen=True)
class CategoryAmount:
    """Amount and share aggregated for a single category."""

    category: str
    amount: Decimal
    percentage: Decimal


@dataclass(frozen=True)
class CategoryBreakdown:
    """Per-type category totals, each list sorted by amount descending."""

    income: list[CategoryAmount]
    expense: list[CategoryAmount]


@dataclass(frozen=True)
class TransactionAggregate:
    """Aggregator output consumed by the insight engines."""

    summary: FinancialSummary
    breakdown: CategoryBreakdown

    @property
    def top_expense(self) -> CategoryAmount | None:
        """Return the largest expense category, if any."""
        if not self.breakdown.expense:
            return None
        return self.breakdown.expense[0]


@dataclass(frozen=True)
class FinancialOverview:
    """Summary totals with the leading categories per type."""

    summary: FinancialSummary
    top_income_categories: list[CategoryAmount]
    top_expense_categories: list[CategoryAmount]


@dataclass(frozen=True)
class MonthlyStats:
    """Totals for a single calendar month."""

    month: int
    month_name: str
    income: Decimal
    expense: Decimal
    transaction_count: int

    @property
    def balance(self) -> Decimal:
        """Return income minus expense for the month."""
        return self.income - self.expense


@dataclass(frozen=True)
class CategoryCatalog:
    """Categories used by a user plus default suggestions per type."""

    user_categories: list[str]
    income_suggestions: list[str]
    expense_suggestions: list[str]


__all__ = [
    "FinancialSummary",
    "CategoryAmount",
    "CategoryBreakdown",
    "TransactionAggregate",
    "FinancialOverview",
    "MonthlyStats",
    "CategoryCatalog",
]
