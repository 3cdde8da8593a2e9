"""
Fetch LeetCode and Codeforces stats once and print them as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from portfolio.config import get_settings
from portfolio.routes import combined_stats_response
from stats.aggregator import StatsAggregator
from stats.codeforces import CodeforcesClient
from stats.errors import AggregationError
from stats.leetcode import LeetCodeClient

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Fetch competitive stats once")
    parser.add_argument(
        "--leetcode-username",
        type=str,
        default=settings.leetcode_username,
        help="LeetCode username to query",
    )
    parser.add_argument(
        "--codeforces-handle",
        type=str,
        default=settings.codeforces_handle,
        help="Codeforces handle to query",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(message)s")

    aggregator = StatsAggregator(
        judge_client=LeetCodeClient(
            username=args.leetcode_username,
            graphql_url=settings.leetcode_graphql_url,
            timeout=settings.request_timeout_seconds,
        ),
        competitive_client=CodeforcesClient(
            handle=args.codeforces_handle,
            api_url=settings.codeforces_api_url,
            timeout=settings.request_timeout_seconds,
            tz=settings.stats_tzinfo(),
        ),
    )
    try:
        combined = aggregator.get_combined_stats()
    except AggregationError as exc:
        logger.error("Failed to fetch competitive stats: %s", exc)
        return 1

    response = combined_stats_response(combined)
    print(json.dumps(response.model_dump(exclude_none=True), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
