# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================

import concurrent.futures
import logging
from typing import Protocol

from shared.types import CombinedStats, CompetitiveStats, JudgeStats
from stats.errors import AggregationError, UpstreamError

logger = logging.getLogger(__name__)


class JudgeStatsClient(Protocol):
    def fetch_stats(self) -> JudgeStats:
        ...


class CompetitiveStatsClient(Protocol):
    def fetch_stats(self) -> CompetitiveStats:
        ...


class StatsAggregator:
    """Fetches judge and competitive stats in parallel and merges them."""

    def __init__(
        self,
        judge_client: JudgeStatsClient,
        competitive_client: CompetitiveStatsClient,
    ):
        self.judge_client = judge_client
        self.competitive_client = competitive_client

    def get_combined_stats(self) -> CombinedStats:
        """
        Runs both fetches concurrently and waits for both to finish.

        Returns:
            CombinedStats: Results from both sources.

        Raises:
            AggregationError: If either source failed. Partial results are
                discarded.
        """
        with concurrent.futures.ThreadPoolExecutor(
            max_workers=2, thread_name_prefix="stats"
        ) as executor:
            judge_future = executor.submit(self.judge_client.fetch_stats)
            competitive_future = executor.submit(self.competitive_client.fetch_stats)
            concurrent.futures.wait([judge_future, competitive_future])

        failures = []
        for future in (judge_future, competitive_future):
            exc = future.exception()
            if exc is None:
                continue
            if not isinstance(exc, UpstreamError):
                raise exc
            logger.error("Stats source failed: %s", exc, exc_info=exc)
            failures.append(exc)

        if failures:
            raise AggregationError(
                f"{len(failures)} stats source(s) failed"
            ) from failures[0]

        return CombinedStats(
            judge=judge_future.result(), competitive=competitive_future.result()
        )
