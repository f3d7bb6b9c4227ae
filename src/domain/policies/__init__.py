"""Domain policies package."""

from .insight_policy import (
    INSIGHT_POLICIES,
    RULES_POLICY,
    SAVINGS_BANDS_POLICY,
    normalize_insight_policy,
)
from .thresholds import InsightThresholds, SavingsBandThresholds

__all__ = [
    "INSIGHT_POLICIES",
    "RULES_POLICY",
    "SAVINGS_BANDS_POLICY",
    "normalize_insight_policy",
    "InsightThresholds",
    "SavingsBandThresholds",
]
