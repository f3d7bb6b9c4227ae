"""SQLAlchemy-backed repository for user transactions."""

from datetime import date, datetime, timedelta

from sqlalchemy import Date, bindparam, text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transactions_repository import (
    TransactionsRepositoryPort,
)
from src.domain.models import Transaction, TransactionFilters
from src.utils.decimal_utils import coerce_decimal


class SqlAlchemyTransactionsRepository(TransactionsRepositoryPort):
    """Repository reading the ``transactions`` table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the transactions engine.
        """
        self._db_port = db_port

    def fetch_transactions(
        self,
        user_id: int | str,
        filters: TransactionFilters | None = None,
    ) -> list[Transaction]:
        resolved = filters or TransactionFilters()
        query = self._build_query(resolved)
        params = self._build_params(user_id, resolved)
        engine = self._db_port.get_transactions_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        if resolved.offset and not resolved.limit:
            # SQLite rejects OFFSET without LIMIT; skip the rows here.
            rows = rows[resolved.offset :]
        return [
            Transaction(
                id=row.id,
                type=row.type,
                amount=coerce_decimal(row.amount),
                category=row.category,
                description=row.description,
                date=self._coerce_date(row.date),
            )
            for row in rows
        ]

    def fetch_categories(self, user_id: int | str) -> list[str]:
        query = text(
            """
            SELECT DISTINCT category
            FROM transactions
            WHERE user_id = :user_id
            ORDER BY category
            """
        )
        engine = self._db_port.get_transactions_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"user_id": user_id}).all()
        return [row.category for row in rows]

    @staticmethod
    def _build_query(filters: TransactionFilters):
        base_sql = """
        SELECT id, type, amount, category, description, date
        FROM transactions
        WHERE user_id = :user_id
        """
        if filters.type:
            base_sql += " AND type = :type"
        if filters.category:
            base_sql += " AND category = :category"
        if filters.start_date:
            base_sql += " AND date >= :start_date"
        if filters.end_date:
            base_sql += " AND date < :end_before"
        base_sql += " ORDER BY date DESC, id DESC"
        if filters.limit:
            base_sql += " LIMIT :limit"
            if filters.offset:
                base_sql += " OFFSET :offset"
        query = text(base_sql)
        date_params = [
            bindparam(name, type_=Date)
            for name, value in (
                ("start_date", filters.start_date),
                ("end_before", filters.end_date),
            )
            if value
        ]
        if date_params:
            query = query.bindparams(*date_params)
        return query

    @staticmethod
    def _build_params(
        user_id: int | str,
        filters: TransactionFilters,
    ) -> dict[str, object]:
        params: dict[str, object] = {"user_id": user_id}
        if filters.type:
            params["type"] = filters.type
        if filters.category:
            params["category"] = filters.category
        if filters.start_date:
            params["start_date"] = filters.start_date
        if filters.end_date:
            # Inclusive end date: keep everything before the next day.
            params["end_before"] = filters.end_date + timedelta(days=1)
        if filters.limit:
            params["limit"] = filters.limit
            if filters.offset:
                params["offset"] = filters.offset
        return params

    @staticmethod
    def _coerce_date(value) -> date | datetime | None:
        if value is None or isinstance(value, date):
            return value
        raw = str(value).strip()
        if not raw:
            return None
        return datetime.fromisoformat(raw.replace("Z", "+00:00"))


__all__ = ["SqlAlchemyTransactionsRepository"]
