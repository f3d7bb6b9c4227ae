"""Use case to analyze the stored transactions of a user."""

from datetime import date
from typing import Protocol

from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.constants import DEFAULT_PERIOD
from src.domain.models import (
    SavingsBandReport,
    SpendingAnalysis,
    Transaction,
    TransactionFilters,
)
from src.infrastructure.logging.logger import get_app_logger


class TransactionAnalyzer(Protocol):
    """Any use case turning a transaction list into an analysis."""

    def execute(
        self,
        transactions: list[Transaction],
        period: str = DEFAULT_PERIOD,
    ) -> SpendingAnalysis | SavingsBandReport:
        """Analyze the transactions."""


class AnalyzeUserTransactionsUseCase:
    """Fetch a user's transactions and run the configured analyzer."""

    def __init__(
        self,
        transactions_repository: TransactionsRepositoryPort,
        analyzer: TransactionAnalyzer,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transactions_repository: Port providing the user's transactions.
            analyzer: Rule-engine or savings-band use case.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._transactions_repository = transactions_repository
        self._analyzer = analyzer
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: int | str,
        start_date: date | None = None,
        end_date: date | None = None,
        period: str = DEFAULT_PERIOD,
    ) -> SpendingAnalysis | SavingsBandReport:
        """Return the analysis of the user's transactions in the window.

        Args:
            user_id: Owner of the transactions.
            start_date: Optional inclusive lower bound.
            end_date: Optional inclusive upper bound.
            period: Opaque period label echoed back in the result.

        Returns:
            SpendingAnalysis | SavingsBandReport: Output of the analyzer.
        """
        transactions = self._transactions_repository.fetch_transactions(
            user_id,
            TransactionFilters(start_date=start_date, end_date=end_date),
        )
        self._logger.info(
            f"Fetched {len(transactions)} transactions for user {user_id}"
        )
        return self._analyzer.execute(transactions, period=period)


__all__ = ["AnalyzeUserTransactionsUseCase", "TransactionAnalyzer"]
