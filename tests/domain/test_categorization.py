"""Tests for keyword-based categorization."""

from decimal import Decimal

from src.domain.services.categorization import suggest_category


def test_keyword_match_is_case_insensitive() -> None:
    """Descriptions match keywords regardless of case."""
    suggestion = suggest_category("UBER trip to the airport")

    assert suggestion.suggested_category == "Transporte"
    assert suggestion.confidence == Decimal("0.85")


def test_first_keyword_in_table_order_wins() -> None:
    """When several keywords match, the earliest table entry wins."""
    suggestion = suggest_category("Netflix e supermercado")

    assert suggestion.suggested_category == "Alimentação"


def test_accented_keywords_match() -> None:
    """Accented keywords such as farmácia are matched."""
    assert suggest_category("Farmácia São João").suggested_category == "Saúde"


def test_unknown_description_falls_back() -> None:
    """Descriptions without keywords fall back to Outros."""
    suggestion = suggest_category("Random purchase")

    assert suggestion.suggested_category == "Outros"
    assert suggestion.confidence == Decimal("0.85")


def test_custom_keyword_table() -> None:
    """Callers can supply their own ordered table."""
    suggestion = suggest_category(
        "Weekly groceries",
        keywords=(("grocer", "Food"),),
    )

    assert suggestion.suggested_category == "Food"
