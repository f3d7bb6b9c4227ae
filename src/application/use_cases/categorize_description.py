"""Use case to suggest a category for a transaction description."""

from src.domain.models import CategorySuggestion
from src.domain.services.categorization import suggest_category
from src.infrastructure.logging.logger import get_app_logger


class CategorizeDescriptionUseCase:
    """Suggest a category using the keyword table."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def execute(self, description: str) -> CategorySuggestion:
        """Return the suggested category for the description.

        Raises:
            ValueError: If the description is empty.
        """
        if not description or not description.strip():
            raise ValueError("A description is required for categorization.")
        suggestion = suggest_category(description)
        self._logger.debug(
            f"Categorized '{description}' as {suggestion.suggested_category}"
        )
        return suggestion


__all__ = ["CategorizeDescriptionUseCase", "CategorySuggestion"]
