"""Selection of the insight policy used by a deployment."""

RULES_POLICY = "rules"
SAVINGS_BANDS_POLICY = "savings_bands"
INSIGHT_POLICIES = (RULES_POLICY, SAVINGS_BANDS_POLICY)


def normalize_insight_policy(name: str | None) -> str:
    """Return a supported policy name.

    Args:
        name: Raw policy name; empty values select the rule engine.

    Returns:
        str: Either ``rules`` or ``savings_bands``.

    Raises:
        ValueError: If the name is not a supported policy.
    """
    if not name or not name.strip():
        return RULES_POLICY
    candidate = name.strip().lower().replace("-", "_")
    if candidate not in INSIGHT_POLICIES:
        raise ValueError(
            f"Unsupported insight policy: {name}. "
            "Expected rules or savings_bands."
        )
    return candidate


__all__ = [
    "RULES_POLICY",
    "SAVINGS_BANDS_POLICY",
    "INSIGHT_POLICIES",
    "normalize_insight_policy",
]
