"""Use case to classify a transaction list by savings-rate bands."""

from collections.abc import Sequence

from src.domain.constants import DEFAULT_PERIOD
from src.domain.models import SavingsBandReport, Transaction
from src.domain.policies import SavingsBandThresholds
from src.domain.services.aggregation import aggregate_transactions
from src.domain.services.savings_bands import assess_savings_rate
from src.infrastructure.logging.logger import get_app_logger


class AssessSavingsBandsUseCase:
    """Aggregate transactions and classify them with the banding policy."""

    def __init__(
        self,
        thresholds: SavingsBandThresholds | None = None,
        logger=None,
    ) -> None:
        self._thresholds = thresholds or SavingsBandThresholds()
        self._logger = logger or get_app_logger()

    def execute(
        self,
        transactions: Sequence[Transaction],
        period: str = DEFAULT_PERIOD,
    ) -> SavingsBandReport:
        """Return the savings-band report for the given transactions.

        ``period`` is accepted so both insight policies share one call
        signature; the band report does not echo it.
        """
        aggregate = aggregate_transactions(transactions)
        report = assess_savings_rate(aggregate, thresholds=self._thresholds)
        rate = aggregate.summary.savings_rate
        self._logger.info(
            f"Savings bands assessed: rate={rate:.1f}, "
            f"risk={report.risk_level}"
        )
        return report


__all__ = ["AssessSavingsBandsUseCase", "SavingsBandReport"]
