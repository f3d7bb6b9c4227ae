"""Use case to list a user's categories with default suggestions."""

from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.constants import (
    DEFAULT_EXPENSE_CATEGORIES,
    DEFAULT_INCOME_CATEGORIES,
)
from src.domain.models import CategoryCatalog


class GetCategoriesUseCase:
    """Return categories already used by a user plus suggestions."""

    def __init__(
        self,
        transactions_repository: TransactionsRepositoryPort,
    ) -> None:
        self._transactions_repository = transactions_repository

    def execute(self, user_id: int | str) -> CategoryCatalog:
        return CategoryCatalog(
            user_categories=self._transactions_repository.fetch_categories(
                user_id
            ),
            income_suggestions=list(DEFAULT_INCOME_CATEGORIES),
            expense_suggestions=list(DEFAULT_EXPENSE_CATEGORIES),
        )


__all__ = ["GetCategoriesUseCase", "CategoryCatalog"]
