"""Domain package for business rules and core models."""

from .constants import (
    DEFAULT_PERIOD,
    EXPENSE,
    INCOME,
    NO_CATEGORY_LABEL,
    TRANSACTION_TYPES,
)
from .models import (
    CategoryAmount,
    CategoryBreakdown,
    FinancialSummary,
    Insight,
    InsightReport,
    SavingsBandReport,
    SpendingAnalysis,
    Transaction,
    TransactionAggregate,
    TransactionFilters,
)
from .policies import InsightThresholds, SavingsBandThresholds
from .services import (
    aggregate_transactions,
    assess_savings_rate,
    generate_insights,
    suggest_category,
)

__all__ = [
    "DEFAULT_PERIOD",
    "EXPENSE",
    "INCOME",
    "NO_CATEGORY_LABEL",
    "TRANSACTION_TYPES",
    "CategoryAmount",
    "CategoryBreakdown",
    "FinancialSummary",
    "Insight",
    "InsightReport",
    "SavingsBandReport",
    "SpendingAnalysis",
    "Transaction",
    "TransactionAggregate",
    "TransactionFilters",
    "InsightThresholds",
    "SavingsBandThresholds",
    "aggregate_transactions",
    "assess_savings_rate",
    "generate_insights",
    "suggest_category",
]
