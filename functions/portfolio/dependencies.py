"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

from portfolio.config import get_settings
from stats.aggregator import StatsAggregator
from stats.codeforces import CodeforcesClient
from stats.leetcode import LeetCodeClient

_stats_aggregator: StatsAggregator | None = None


def get_stats_aggregator() -> StatsAggregator:
    """
    Return a singleton aggregator wired from settings.

    The clients hold configuration only; every call fetches fresh data.
    """
    global _stats_aggregator
    if _stats_aggregator:
        return _stats_aggregator

    settings = get_settings()
    _stats_aggregator = StatsAggregator(
        judge_client=LeetCodeClient(
            username=settings.leetcode_username,
            graphql_url=settings.leetcode_graphql_url,
            timeout=settings.request_timeout_seconds,
        ),
        competitive_client=CodeforcesClient(
            handle=settings.codeforces_handle,
            api_url=settings.codeforces_api_url,
            timeout=settings.request_timeout_seconds,
            tz=settings.stats_tzinfo(),
        ),
    )
    return _stats_aggregator
