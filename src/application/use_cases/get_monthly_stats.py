"""Use case to compute month-by-month totals for a year."""

from collections import defaultdict
from datetime import date

from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.constants import MONTH_NAMES
from src.domain.models import MonthlyStats, Transaction, TransactionFilters
from src.domain.services.aggregation import aggregate_transactions
from src.infrastructure.logging.logger import get_app_logger


class GetMonthlyStatsUseCase:
    """Compute income, expense and balance for each month of a year."""

    def __init__(
        self,
        transactions_repository: TransactionsRepositoryPort,
        logger=None,
    ) -> None:
        self._transactions_repository = transactions_repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: int | str, year: int) -> list[MonthlyStats]:
        """Return twelve monthly entries, January first.

        Months without transactions are reported with zero totals.

        Args:
            user_id: Owner of the transactions.
            year: Calendar year to report.

        Returns:
            list[MonthlyStats]: One entry per month.
        """
        transactions = self._transactions_repository.fetch_transactions(
            user_id,
            TransactionFilters(
                start_date=date(year, 1, 1),
                end_date=date(year, 12, 31),
            ),
        )
        by_month: dict[int, list[Transaction]] = defaultdict(list)
        skipped = 0
        for transaction in transactions:
            posted = transaction.date
            if not isinstance(posted, date) or posted.year != year:
                skipped += 1
                continue
            by_month[posted.month].append(transaction)
        if skipped:
            self._logger.warning(
                f"Skipped {skipped} transactions outside {year} "
                "or without a date"
            )

        stats: list[MonthlyStats] = []
        for month, month_name in enumerate(MONTH_NAMES, start=1):
            summary = aggregate_transactions(by_month.get(month, [])).summary
            stats.append(
                MonthlyStats(
                    month=month,
                    month_name=month_name,
                    income=summary.total_income,
                    expense=summary.total_expense,
                    transaction_count=summary.transaction_count,
                )
            )
        return stats


__all__ = ["GetMonthlyStatsUseCase", "MonthlyStats"]
