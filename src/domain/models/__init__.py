"""Domain models package."""

from .finance import (
    CategoryAmount,
    CategoryBreakdown,
    CategoryCatalog,
    FinancialOverview,
    FinancialSummary,
    MonthlyStats,
    TransactionAggregate,
)
from .insights import (
    CategorySuggestion,
    Insight,
    InsightReport,
    SavingsBandReport,
    SpendingAnalysis,
)
from .transactions import Transaction, TransactionFilters

__all__ = [
    "Transaction",
    "TransactionFilters",
    "FinancialSummary",
    "CategoryAmount",
    "CategoryBreakdown",
    "TransactionAggregate",
    "FinancialOverview",
    "MonthlyStats",
    "CategoryCatalog",
    "Insight",
    "InsightReport",
    "SpendingAnalysis",
    "SavingsBandReport",
    "CategorySuggestion",
]
