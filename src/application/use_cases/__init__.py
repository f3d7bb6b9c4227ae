"""Application use cases package."""

from .analyze_transactions import AnalyzeTransactionsUseCase, SpendingAnalysis
from .analyze_user_transactions import (
    AnalyzeUserTransactionsUseCase,
    TransactionAnalyzer,
)
from .assess_savings_bands import AssessSavingsBandsUseCase, SavingsBandReport
from .categorize_description import (
    CategorizeDescriptionUseCase,
    CategorySuggestion,
)
from .get_categories import CategoryCatalog, GetCategoriesUseCase
from .get_financial_summary import (
    FinancialOverview,
    GetFinancialSummaryUseCase,
)
from .get_monthly_stats import GetMonthlyStatsUseCase, MonthlyStats

__all__ = [
    "AnalyzeTransactionsUseCase",
    "SpendingAnalysis",
    "AnalyzeUserTransactionsUseCase",
    "TransactionAnalyzer",
    "AssessSavingsBandsUseCase",
    "SavingsBandReport",
    "CategorizeDescriptionUseCase",
    "CategorySuggestion",
    "GetCategoriesUseCase",
    "CategoryCatalog",
    "GetFinancialSummaryUseCase",
    "FinancialOverview",
    "GetMonthlyStatsUseCase",
    "MonthlyStats",
]
