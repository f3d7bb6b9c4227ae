"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
import os

import dotenv

from src.domain.constants import DEFAULT_CURRENCY_SYMBOL
from src.domain.policies import (
    InsightThresholds,
    RULES_POLICY,
    normalize_insight_policy,
)
from src.infrastructure.logging.logger import get_app_logger

SUPPORTED_BACKENDS = ("sqlalchemy", "memory")


@dataclass(frozen=True)
class InsightSettings:
    """Settings for the insight engines.

    Attributes:
        policy: Insight policy (rules or savings_bands).
        currency_symbol: Symbol used when formatting amounts in messages.
        thresholds: Thresholds for the rule engine.
    """

    policy: str = RULES_POLICY
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    thresholds: InsightThresholds = field(default_factory=InsightThresholds)

    @classmethod
    def from_env(cls) -> "InsightSettings":
        """Build settings from environment variables.

        Returns:
            InsightSettings: Settings sourced from environment variables.

        Raises:
            ValueError: If INSIGHT_POLICY names an unsupported policy.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        defaults = InsightThresholds()
        policy = normalize_insight_policy(os.getenv("INSIGHT_POLICY"))
        currency_symbol = (
            os.getenv("INSIGHT_CURRENCY_SYMBOL", "").strip()
            or DEFAULT_CURRENCY_SYMBOL
        )
        thresholds = InsightThresholds(
            top_category_warning_percent=cls._read_decimal(
                "INSIGHT_TOP_CATEGORY_WARNING_PERCENT",
                defaults.top_category_warning_percent,
                logger,
            ),
            top_category_suggestion_percent=cls._read_decimal(
                "INSIGHT_TOP_CATEGORY_SUGGESTION_PERCENT",
                defaults.top_category_suggestion_percent,
                logger,
            ),
            high_average_expense=cls._read_decimal(
                "INSIGHT_HIGH_AVERAGE_EXPENSE",
                defaults.high_average_expense,
                logger,
            ),
            low_activity_count=cls._read_int(
                "INSIGHT_LOW_ACTIVITY_COUNT",
                defaults.low_activity_count,
                logger,
            ),
            max_suggestions=cls._read_int(
                "INSIGHT_MAX_SUGGESTIONS",
                defaults.max_suggestions,
                logger,
            ),
        )
        return cls(
            policy=policy,
            currency_symbol=currency_symbol,
            thresholds=thresholds,
        )

    @staticmethod
    def _read_decimal(name: str, default: Decimal, logger) -> Decimal:
        """Read a Decimal environment variable, falling back on errors.

        Args:
            name: Environment variable name.
            default: Value used when the variable is unset or invalid.
            logger: Logger used for warnings.

        Returns:
            Decimal: Parsed or default value.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            logger.warning(f"Invalid decimal for {name}: {raw!r}")
            return default
        if not value.is_finite():
            logger.warning(f"Invalid decimal for {name}: {raw!r}")
            return default
        return value

    @staticmethod
    def _read_int(name: str, default: int, logger) -> int:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw.strip())
        except ValueError:
            logger.warning(f"Invalid integer for {name}: {raw!r}")
            return default
        if value < 0:
            logger.warning(f"Negative value for {name} ignored: {value}")
            return default
        return value


@dataclass(frozen=True)
class TransactionsSettings:
    """Settings for selecting the transactions repository backend."""

    backend: str = "sqlalchemy"

    @classmethod
    def from_env(cls) -> "TransactionsSettings":
        """Build settings from environment variables."""
        dotenv.load_dotenv()
        backend = os.getenv("TRANSACTIONS_BACKEND", "sqlalchemy")
        return cls(backend=backend.strip().lower() or "sqlalchemy")


__all__ = ["InsightSettings", "TransactionsSettings", "SUPPORTED_BACKENDS"]
