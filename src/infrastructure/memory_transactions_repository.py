"""In-memory repository for user transactions."""

from collections.abc import Iterable
from datetime import date, datetime

from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.models import Transaction, TransactionFilters


class InMemoryTransactionsRepository(TransactionsRepositoryPort):
    """Repository holding transactions in process memory.

    Transactions are stored per user id; nothing is persisted.
    """

    def __init__(
        self,
        transactions_by_user: dict[int | str, Iterable[Transaction]]
        | None = None,
    ) -> None:
        self._transactions: dict[int | str, list[Transaction]] = {
            user_id: list(items)
            for user_id, items in (transactions_by_user or {}).items()
        }

    def add(self, user_id: int | str, transaction: Transaction) -> None:
        """Store a transaction for the user."""
        self._transactions.setdefault(user_id, []).append(transaction)

    def fetch_transactions(
        self,
        user_id: int | str,
        filters: TransactionFilters | None = None,
    ) -> list[Transaction]:
        resolved = filters or TransactionFilters()
        matches = [
            transaction
            for transaction in self._transactions.get(user_id, [])
            if self._matches(transaction, resolved)
        ]
        matches.sort(key=self._sort_key, reverse=True)
        start = resolved.offset or 0
        if resolved.limit:
            return matches[start : start + resolved.limit]
        return matches[start:]

    def fetch_categories(self, user_id: int | str) -> list[str]:
        return sorted(
            {t.category for t in self._transactions.get(user_id, [])}
        )

    @classmethod
    def _matches(
        cls,
        transaction: Transaction,
        filters: TransactionFilters,
    ) -> bool:
        if filters.type and transaction.type != filters.type:
            return False
        if filters.category and transaction.category != filters.category:
            return False
        if filters.start_date or filters.end_date:
            posted = cls._as_date(transaction.date)
            if posted is None:
                return False
            start = cls._as_date(filters.start_date)
            end = cls._as_date(filters.end_date)
            if start and posted < start:
                return False
            if end and posted > end:
                return False
        return True

    @staticmethod
    def _as_date(value) -> date | None:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        return None

    @classmethod
    def _sort_key(cls, transaction: Transaction) -> date:
        return cls._as_date(transaction.date) or date.min


__all__ = ["InMemoryTransactionsRepository"]
