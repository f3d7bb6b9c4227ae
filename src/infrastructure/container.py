"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.application.use_cases.analyze_transactions import (
    AnalyzeTransactionsUseCase,
)
from src.application.use_cases.analyze_user_transactions import (
    AnalyzeUserTransactionsUseCase,
    TransactionAnalyzer,
)
from src.application.use_cases.assess_savings_bands import (
    AssessSavingsBandsUseCase,
)
from src.domain.policies import SAVINGS_BANDS_POLICY
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.memory_transactions_repository import (
    InMemoryTransactionsRepository,
)
from src.infrastructure.settings import (
    InsightSettings,
    SUPPORTED_BACKENDS,
    TransactionsSettings,
)
from src.infrastructure.transactions_repository import (
    SqlAlchemyTransactionsRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_transactions_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: TransactionsSettings | None = None,
) -> TransactionsRepositoryPort:
    """Return the configured transactions repository.

    Raises:
        ValueError: If TRANSACTIONS_BACKEND names an unsupported backend.
    """
    resolved = settings or TransactionsSettings.from_env()
    if resolved.backend == "memory":
        get_app_logger().warning(
            "Using the in-memory transactions backend: it starts empty, "
            "is not persisted, and is only meant for tests."
        )
        return InMemoryTransactionsRepository()
    if resolved.backend == "sqlalchemy":
        return SqlAlchemyTransactionsRepository(
            db_port or build_database_adapter()
        )
    raise ValueError(
        f"Unsupported transactions backend: {resolved.backend}. "
        f"Expected one of {', '.join(SUPPORTED_BACKENDS)}."
    )


def build_transaction_analyzer(
    settings: InsightSettings | None = None,
) -> TransactionAnalyzer:
    """Return the analyzer selected by the insight policy."""
    resolved = settings or InsightSettings.from_env()
    logger = get_app_logger()
    if resolved.policy == SAVINGS_BANDS_POLICY:
        return AssessSavingsBandsUseCase(logger=logger)
    return AnalyzeTransactionsUseCase(
        thresholds=resolved.thresholds,
        currency_symbol=resolved.currency_symbol,
        logger=logger,
    )


def build_user_analysis_use_case(
    repository: TransactionsRepositoryPort | None = None,
    settings: InsightSettings | None = None,
) -> AnalyzeUserTransactionsUseCase:
    """Return the use case analyzing stored transactions of a user."""
    return AnalyzeUserTransactionsUseCase(
        transactions_repository=repository or build_transactions_repository(),
        analyzer=build_transaction_analyzer(settings),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_transactions_repository",
    "build_transaction_analyzer",
    "build_user_analysis_use_case",
]
