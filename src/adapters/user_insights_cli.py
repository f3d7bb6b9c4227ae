"""CLI adapter analyzing the stored transactions of one user."""

import json
import os

from src.adapters.cli_options import parse_date, parse_user_id
from src.adapters.payloads import to_payload
from src.domain.constants import DEFAULT_PERIOD
from src.infrastructure.container import build_user_analysis_use_case
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def main() -> None:
    """Print the insight analysis for INSIGHTS_USER_ID as JSON."""
    logger = get_app_logger()
    user_id = parse_user_id(os.getenv("INSIGHTS_USER_ID"))
    if user_id is None:
        logger.warning("INSIGHTS_USER_ID is required to analyze a user.")
        return

    start_date = parse_date(os.getenv("INSIGHTS_START_DATE"), logger)
    end_date = parse_date(os.getenv("INSIGHTS_END_DATE"), logger)
    period = os.getenv("INSIGHTS_PERIOD") or DEFAULT_PERIOD

    try:
        use_case = build_user_analysis_use_case()
        result = use_case.execute(
            user_id,
            start_date=start_date,
            end_date=end_date,
            period=period,
        )
    except (RuntimeError, ValueError) as exc:
        logger.error(str(exc))
        return

    get_usage_logger().info(
        f"user_insights user={user_id} start={start_date} end={end_date}"
    )
    print(json.dumps(to_payload(result), ensure_ascii=False, indent=2))


if __name__ == "__main__":  # pragma: no cover
    main()
