"""Use case to compute a user's financial summary with top categories."""

from datetime import date

from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.constants import TOP_CATEGORIES_LIMIT
from src.domain.models import FinancialOverview, TransactionFilters
from src.domain.services.aggregation import aggregate_transactions
from src.infrastructure.logging.logger import get_app_logger


class GetFinancialSummaryUseCase:
    """Compute totals, averages and leading categories for a user."""

    def __init__(
        self,
        transactions_repository: TransactionsRepositoryPort,
        logger=None,
        top_limit: int = TOP_CATEGORIES_LIMIT,
    ) -> None:
        """Initialize the use case.

        Args:
            transactions_repository: Port providing the user's transactions.
            logger: Optional logger compatible with logging.Logger-like API.
            top_limit: Number of categories kept per transaction type.
        """
        self._transactions_repository = transactions_repository
        self._logger = logger or get_app_logger()
        self._top_limit = top_limit

    def execute(
        self,
        user_id: int | str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> FinancialOverview:
        """Return the financial overview for the user.

        Args:
            user_id: Owner of the transactions.
            start_date: Optional inclusive lower bound.
            end_date: Optional inclusive upper bound.

        Returns:
            FinancialOverview: Summary plus top income and expense categories.
        """
        transactions = self._transactions_repository.fetch_transactions(
            user_id,
            TransactionFilters(start_date=start_date, end_date=end_date),
        )
        aggregate = aggregate_transactions(transactions)
        summary = aggregate.summary
        breakdown = aggregate.breakdown
        self._logger.info(
            f"Summary for user {user_id}: income={summary.total_income}, "
            f"expense={summary.total_expense}, "
            f"count={summary.transaction_count}"
        )
        return FinancialOverview(
            summary=summary,
            top_income_categories=breakdown.income[: self._top_limit],
            top_expense_categories=breakdown.expense[: self._top_limit],
        )


__all__ = ["GetFinancialSummaryUseCase", "FinancialOverview"]
