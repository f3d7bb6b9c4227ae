"""Keyword-based category suggestions for transaction descriptions."""

from collections.abc import Sequence

from src.domain.constants import (
    CATEGORIZATION_CONFIDENCE,
    CATEGORY_KEYWORDS,
    FALLBACK_CATEGORY,
)
from src.domain.models import CategorySuggestion


def suggest_category(
    description: str,
    keywords: Sequence[tuple[str, str]] = CATEGORY_KEYWORDS,
) -> CategorySuggestion:
    """Suggest a category by scanning an ordered keyword table.

    Args:
        description: Free-text transaction description.
        keywords: Ordered ``(keyword, category)`` pairs; the first keyword
            contained in the description wins.

    Returns:
        CategorySuggestion: Matched category, or the fallback category,
        with a fixed confidence.
    """
    lowered = description.lower()
    suggested = FALLBACK_CATEGORY
    for keyword, category in keywords:
        if keyword.lower() in lowered:
            suggested = category
            break
    return CategorySuggestion(
        suggested_category=suggested,
        confidence=CATEGORIZATION_CONFIDENCE,
    )


__all__ = ["suggest_category"]
