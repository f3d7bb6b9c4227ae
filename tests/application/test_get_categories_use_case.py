"""Tests for the GetCategoriesUseCase."""

from unittest.mock import MagicMock

from src.application.use_cases.get_categories import GetCategoriesUseCase
from src.domain.constants import (
    DEFAULT_EXPENSE_CATEGORIES,
    DEFAULT_INCOME_CATEGORIES,
)


def test_execute_returns_user_categories_and_defaults() -> None:
    """Catalog should combine stored categories with default suggestions."""
    repository = MagicMock()
    repository.fetch_categories.return_value = ["Food", "Salary"]

    catalog = GetCategoriesUseCase(repository).execute(user_id=3)

    repository.fetch_categories.assert_called_once_with(3)
    assert catalog.user_categories == ["Food", "Salary"]
    assert catalog.income_suggestions == list(DEFAULT_INCOME_CATEGORIES)
    assert catalog.expense_suggestions == list(DEFAULT_EXPENSE_CATEGORIES)
