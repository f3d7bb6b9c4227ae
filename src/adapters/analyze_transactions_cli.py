"""CLI adapter analyzing a JSON transaction list.

The request file follows the analysis contract
(``{"transactions": [...], "period": "30d"}``); the response is printed as
JSON on stdout. The insight policy comes from INSIGHT_POLICY.
"""

import json
import os
from pathlib import Path

from src.adapters.payloads import parse_analysis_request, to_payload
from src.infrastructure.container import build_transaction_analyzer
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def _load_request(path: Path) -> dict:
    """Read and decode the JSON request file."""
    return json.loads(path.read_text(encoding="utf-8"))


def main() -> None:
    """Analyze the transactions listed in ANALYZE_INPUT_FILE."""
    logger = get_app_logger()
    raw_path = os.getenv("ANALYZE_INPUT_FILE")
    if not raw_path:
        logger.warning(
            "ANALYZE_INPUT_FILE is required to analyze transactions."
        )
        return

    try:
        payload = _load_request(Path(raw_path).expanduser())
        transactions, period = parse_analysis_request(payload)
        analyzer = build_transaction_analyzer()
    except (OSError, ValueError) as exc:
        logger.error(f"Cannot analyze {raw_path}: {exc}")
        return

    result = analyzer.execute(transactions, period=period)
    get_usage_logger().info(
        f"analyze_transactions transactions={len(transactions)} "
        f"period={period}"
    )
    print(json.dumps(to_payload(result), ensure_ascii=False, indent=2))


if __name__ == "__main__":  # pragma: no cover
    main()
