"""Use case to analyze a transaction list with the rule engine."""

from collections.abc import Sequence

from src.domain.constants import DEFAULT_CURRENCY_SYMBOL, DEFAULT_PERIOD
from src.domain.models import SpendingAnalysis, Transaction
from src.domain.policies import InsightThresholds
from src.domain.services.aggregation import aggregate_transactions
from src.domain.services.insights import generate_insights
from src.infrastructure.logging.logger import get_app_logger


class AnalyzeTransactionsUseCase:
    """Aggregate transactions and derive rule-based insights."""

    def __init__(
        self,
        thresholds: InsightThresholds | None = None,
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            thresholds: Optional threshold overrides for the rule engine.
            currency_symbol: Symbol used in insight messages.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._thresholds = thresholds or InsightThresholds()
        self._currency_symbol = currency_symbol
        self._logger = logger or get_app_logger()

    def execute(
        self,
        transactions: Sequence[Transaction],
        period: str = DEFAULT_PERIOD,
    ) -> SpendingAnalysis:
        """Return the analysis for the given transactions.

        Args:
            transactions: Transactions already scoped to one user and period.
            period: Opaque period label echoed back in the result.

        Returns:
            SpendingAnalysis: Summary, breakdowns, insights and suggestions.
        """
        self._logger.info(
            f"Analyzing {len(transactions)} transactions for period {period}"
        )
        aggregate = aggregate_transactions(transactions)
        report = generate_insights(
            aggregate.summary,
            aggregate.breakdown,
            aggregate.summary.transaction_count,
            thresholds=self._thresholds,
            currency_symbol=self._currency_symbol,
        )
        self._logger.info(
            f"Analysis generated: insights={len(report.insights)}, "
            f"suggestions={len(report.suggestions)}"
        )
        return SpendingAnalysis(
            summary=aggregate.summary,
            breakdown=aggregate.breakdown,
            report=report,
            period=period,
        )


__all__ = ["AnalyzeTransactionsUseCase", "SpendingAnalysis"]
