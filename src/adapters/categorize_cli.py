"""CLI adapter suggesting a category for a transaction description."""

import json
import os
import sys

from src.adapters.payloads import category_suggestion_to_payload
from src.application.use_cases.categorize_description import (
    CategorizeDescriptionUseCase,
)
from src.infrastructure.logging.logger import get_app_logger


def main(argv: list[str] | None = None) -> None:
    """Categorize the description from arguments or the environment."""
    logger = get_app_logger()
    args = sys.argv[1:] if argv is None else argv
    description = " ".join(args) or os.getenv("CATEGORIZE_DESCRIPTION", "")

    try:
        suggestion = CategorizeDescriptionUseCase(logger=logger).execute(
            description
        )
    except ValueError as exc:
        logger.warning(str(exc))
        return

    payload = category_suggestion_to_payload(suggestion)
    print(json.dumps(payload, ensure_ascii=False))


if __name__ == "__main__":  # pragma: no cover
    main()
