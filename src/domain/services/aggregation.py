"""Aggregation of transactions into summaries and category breakdowns."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import EXPENSE, INCOME
from src.domain.models import (
    CategoryAmount,
    CategoryBreakdown,
    FinancialSummary,
    Transaction,
    TransactionAggregate,
)
from src.utils.decimal_utils import coerce_decimal, percentage_of


def aggregate_transactions(
    transactions: Iterable[Transaction],
) -> TransactionAggregate:
    """Compute totals and per-category breakdowns for transactions.

    The input is expected to be scoped to one user and one period already.
    Transactions whose type is neither income nor expense are counted but
    contribute to no total.

    Args:
        transactions: Transactions to aggregate, in any order.

    Returns:
        TransactionAggregate: Summary totals and sorted breakdowns.
    """
    income_totals: dict[str, Decimal] = {}
    expense_totals: dict[str, Decimal] = {}
    total_income = Decimal("0")
    total_expense = Decimal("0")
    income_count = 0
    expense_count = 0
    transaction_count = 0

    for transaction in transactions:
        transaction_count += 1
        amount = coerce_decimal(transaction.amount)
        if transaction.type == INCOME:
            income_count += 1
            total_income += amount
            _accumulate(income_totals, transaction.category, amount)
        elif transaction.type == EXPENSE:
            expense_count += 1
            total_expense += amount
            _accumulate(expense_totals, transaction.category, amount)

    summary = FinancialSummary(
        total_income=total_income,
        total_expense=total_expense,
        transaction_count=transaction_count,
        income_count=income_count,
        expense_count=expense_count,
    )
    breakdown = CategoryBreakdown(
        income=rank_categories(income_totals, total_income),
        expense=rank_categories(expense_totals, total_expense),
    )
    return TransactionAggregate(summary=summary, breakdown=breakdown)


def rank_categories(
    totals: dict[str, Decimal],
    type_total: Decimal,
) -> list[CategoryAmount]:
    """Convert category totals into a list sorted by amount descending.

    Ties keep the first-seen order of ``totals``.

    Args:
        totals: Summed amounts keyed by category, in first-seen order.
        type_total: Total for the transaction type, used for percentages.

    Returns:
        list[CategoryAmount]: Ranked category amounts with their shares.
    """
    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [
        CategoryAmount(
            category=category,
            amount=amount,
            percentage=percentage_of(amount, type_total),
        )
        for category, amount in ranked
    ]


def _accumulate(
    totals: dict[str, Decimal],
    category: str,
    amount: Decimal,
) -> None:
    totals[category] = totals.get(category, Decimal("0")) + amount


__all__ = ["aggregate_transactions", "rank_categories"]
