"""JSON payload mapping for the analysis contract.

Requests are validated here, at the boundary, so the aggregation core only
ever receives well-formed transactions. Responses use the camelCase keys of
the public JSON contract.
"""

from collections.abc import Mapping
from datetime import date, datetime
from decimal import ROUND_FLOOR, Decimal

from src.domain.constants import DEFAULT_PERIOD
from src.domain.models import (
    CategoryAmount,
    CategoryCatalog,
    CategorySuggestion,
    FinancialOverview,
    FinancialSummary,
    MonthlyStats,
    SavingsBandReport,
    SpendingAnalysis,
    Transaction,
)
from src.domain.services.validation import (
    TransactionValidationError,
    validate_amount,
    validate_category,
    validate_transaction_type,
)


def parse_analysis_request(
    payload: Mapping,
) -> tuple[list[Transaction], str]:
    """Validate an analysis request.

    Args:
        payload: Decoded JSON body with ``transactions`` and optional
            ``period``.

    Returns:
        tuple[list[Transaction], str]: Parsed transactions and period label.

    Raises:
        TransactionValidationError: If the body or a transaction is invalid.
    """
    if not isinstance(payload, Mapping):
        raise TransactionValidationError(
            "body", "expected a JSON object"
        )
    raw_transactions = payload.get("transactions")
    if not isinstance(raw_transactions, list):
        raise TransactionValidationError(
            "transactions", "a list of transactions is required"
        )
    period = payload.get("period") or DEFAULT_PERIOD
    transactions = [
        parse_transaction_payload(raw, index)
        for index, raw in enumerate(raw_transactions)
    ]
    return transactions, str(period)


def parse_transaction_payload(
    raw: Mapping,
    index: int | None = None,
) -> Transaction:
    """Build a Transaction from a raw JSON object.

    Amounts are made positive and categories capitalized before the
    transaction is constructed.

    Raises:
        TransactionValidationError: If a field is missing or invalid.
    """
    if not isinstance(raw, Mapping):
        raise TransactionValidationError(
            "transaction", "expected a JSON object", index
        )
    description = raw.get("description")
    if description is not None and not isinstance(description, str):
        raise TransactionValidationError(
            "description", "must be a string", index
        )
    return Transaction(
        id=raw.get("id"),
        type=validate_transaction_type(raw.get("type"), index),
        amount=validate_amount(raw.get("amount"), index),
        category=validate_category(raw.get("category"), index),
        description=description,
        date=_parse_date(raw.get("date"), index),
    )


def analysis_to_payload(analysis: SpendingAnalysis) -> dict:
    """Serialize a rule-engine analysis to the response contract."""
    summary = analysis.summary
    return {
        "summary": {
            "totalIncome": _number(summary.total_income),
            "totalExpenses": _number(summary.total_expense),
            "balance": _number(summary.balance),
            "period": analysis.period,
            "transactionCount": summary.transaction_count,
            "averageExpense": _number(summary.average_expense),
            "topExpenseCategory": analysis.report.top_expense_category,
        },
        "insights": [
            {
                "type": insight.type,
                "message": insight.message,
                "category": insight.category,
            }
            for insight in analysis.report.insights
        ],
        "suggestions": list(analysis.report.suggestions),
        "categoryBreakdown": {
            "expenses": _amounts_by_category(analysis.breakdown.expense),
            "income": _amounts_by_category(analysis.breakdown.income),
        },
    }


def savings_report_to_payload(report: SavingsBandReport) -> dict:
    """Serialize a savings-band report to the response contract."""
    summary = report.summary
    return {
        "summary": {
            "totalIncome": _number(summary.total_income),
            "totalExpenses": _number(summary.total_expense),
            "balance": _number(summary.balance),
            "savingsRate": _round_half_toward_ceiling(summary.savings_rate),
        },
        "categoryBreakdown": [
            _category_entry(item) for item in report.category_breakdown
        ],
        "insights": list(report.insights),
        "suggestions": list(report.suggestions),
        "spendingPattern": report.spending_pattern,
        "riskLevel": report.risk_level,
    }


def to_payload(result: SpendingAnalysis | SavingsBandReport) -> dict:
    """Serialize the output of whichever insight policy ran."""
    if isinstance(result, SavingsBandReport):
        return savings_report_to_payload(result)
    return analysis_to_payload(result)


def category_suggestion_to_payload(suggestion: CategorySuggestion) -> dict:
    """Serialize a category suggestion."""
    return {
        "suggestedCategory": suggestion.suggested_category,
        "confidence": _number(suggestion.confidence),
    }


def overview_to_payload(overview: FinancialOverview) -> dict:
    """Serialize a financial overview with its top categories."""
    summary = overview.summary
    payload = _summary_totals(summary)
    payload["topCategories"] = {
        "income": [
            {"category": item.category, "total": _number(item.amount)}
            for item in overview.top_income_categories
        ],
        "expense": [
            {"category": item.category, "total": _number(item.amount)}
            for item in overview.top_expense_categories
        ],
    }
    return payload


def monthly_stats_to_payload(stats: list[MonthlyStats]) -> list[dict]:
    """Serialize monthly stats in month order."""
    return [
        {
            "month": item.month,
            "monthName": item.month_name,
            "income": _number(item.income),
            "expense": _number(item.expense),
            "balance": _number(item.balance),
            "transactionCount": item.transaction_count,
        }
        for item in stats
    ]


def category_catalog_to_payload(catalog: CategoryCatalog) -> dict:
    """Serialize the user categories and default suggestions."""
    return {
        "userCategories": list(catalog.user_categories),
        "suggestions": {
            "income": list(catalog.income_suggestions),
            "expense": list(catalog.expense_suggestions),
        },
    }


def _summary_totals(summary: FinancialSummary) -> dict:
    return {
        "totalIncome": _number(summary.total_income),
        "totalExpense": _number(summary.total_expense),
        "balance": _number(summary.balance),
        "transactionCount": summary.transaction_count,
        "averageIncome": _number(summary.average_income),
        "averageExpense": _number(summary.average_expense),
    }


def _category_entry(item: CategoryAmount) -> dict:
    return {
        "category": item.category,
        "amount": _number(item.amount),
        "percentage": _number(item.percentage),
    }


def _amounts_by_category(items: list[CategoryAmount]) -> dict[str, float]:
    return {item.category: _number(item.amount) for item in items}


def _number(value: Decimal) -> float:
    return float(value)


def _round_half_toward_ceiling(value: Decimal) -> int:
    """Round to an integer with halves going up, so -2.5 becomes -2."""
    return int(
        (value + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR)
    )


def _parse_date(value, index: int | None) -> date | datetime | None:
    if value is None or isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise TransactionValidationError(
            "date", "expected an ISO date string", index
        )
    try:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError as exc:
        raise TransactionValidationError(
            "date", f"invalid ISO date {value!r}", index
        ) from exc


__all__ = [
    "parse_analysis_request",
    "parse_transaction_payload",
    "analysis_to_payload",
    "savings_report_to_payload",
    "to_payload",
    "category_suggestion_to_payload",
    "overview_to_payload",
    "monthly_stats_to_payload",
    "category_catalog_to_payload",
]
