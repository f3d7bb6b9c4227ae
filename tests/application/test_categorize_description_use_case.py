"""Tests for the CategorizeDescriptionUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.categorize_description import (
    CategorizeDescriptionUseCase,
)


def test_execute_returns_keyword_match() -> None:
    """A known keyword should map to its category."""
    use_case = CategorizeDescriptionUseCase(logger=MagicMock())

    suggestion = use_case.execute("Uber para o trabalho")

    assert suggestion.suggested_category == "Transporte"
    assert suggestion.confidence == Decimal("0.85")


@pytest.mark.parametrize("description", ["", "   "])
def test_execute_rejects_empty_description(description: str) -> None:
    """Empty descriptions are invalid input."""
    use_case = CategorizeDescriptionUseCase(logger=MagicMock())

    with pytest.raises(ValueError):
        use_case.execute(description)
