"""CLI adapter printing a user's summary, monthly stats and categories."""

import json
import os

from src.adapters.cli_options import parse_date, parse_user_id
from src.adapters.payloads import (
    category_catalog_to_payload,
    monthly_stats_to_payload,
    overview_to_payload,
)
from src.application.use_cases.get_categories import GetCategoriesUseCase
from src.application.use_cases.get_financial_summary import (
    GetFinancialSummaryUseCase,
)
from src.application.use_cases.get_monthly_stats import GetMonthlyStatsUseCase
from src.infrastructure.container import build_transactions_repository
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Print the financial summary of INSIGHTS_USER_ID as JSON."""
    logger = get_app_logger()
    user_id = parse_user_id(os.getenv("INSIGHTS_USER_ID"))
    if user_id is None:
        logger.warning("INSIGHTS_USER_ID is required to summarize a user.")
        return

    start_date = parse_date(os.getenv("INSIGHTS_START_DATE"), logger)
    end_date = parse_date(os.getenv("INSIGHTS_END_DATE"), logger)
    raw_year = (os.getenv("INSIGHTS_YEAR") or "").strip()
    if raw_year and not raw_year.isdigit():
        logger.warning(f"Invalid year '{raw_year}'; monthly stats skipped.")
        raw_year = ""

    try:
        repository = build_transactions_repository()
        summary_use_case = GetFinancialSummaryUseCase(
            repository,
            logger=logger,
        )
        overview = summary_use_case.execute(
            user_id,
            start_date=start_date,
            end_date=end_date,
        )
        catalog = GetCategoriesUseCase(repository).execute(user_id)
        monthly = []
        if raw_year:
            stats_use_case = GetMonthlyStatsUseCase(repository, logger=logger)
            monthly = stats_use_case.execute(user_id, int(raw_year))
    except (RuntimeError, ValueError) as exc:
        logger.error(str(exc))
        return

    output = {
        "summary": overview_to_payload(overview),
        "categories": category_catalog_to_payload(catalog),
        "monthlyStats": monthly_stats_to_payload(monthly),
    }
    print(json.dumps(output, ensure_ascii=False, indent=2))


if __name__ == "__main__":  # pragma: no cover
    main()
