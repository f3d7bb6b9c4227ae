"""Port for reading a user's transactions."""

from typing import Protocol

from src.domain.models import Transaction, TransactionFilters


class TransactionsRepositoryPort(Protocol):
    """Port exposing transactions scoped to one user.

    Implementations own the storage details; the analytics core only ever
    receives already-filtered transaction lists from this port.
    """

    def fetch_transactions(
        self,
        user_id: int | str,
        filters: TransactionFilters | None = None,
    ) -> list[Transaction]:
        """Return the user's transactions matching the filters.

        Args:
            user_id: Owner of the transactions.
            filters: Optional type, category, date and paging filters.

        Returns:
            list[Transaction]: Matching transactions, newest first.
        """

    def fetch_categories(self, user_id: int | str) -> list[str]:
        """Return the distinct categories used by the user, sorted."""


__all__ = ["TransactionsRepositoryPort"]
