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

import time
import unittest

from shared.types import CombinedStats, CompetitiveStats, JudgeStats
from stats.aggregator import StatsAggregator
from stats.errors import AggregationError, UpstreamError


class FakeClient:
    """Returns (or raises) a canned result after a configurable delay."""

    def __init__(self, result=None, error=None, delay=0.0):
        self.result = result
        self.error = error
        self.delay = delay
        self.calls = 0

    def fetch_stats(self):
        self.calls += 1
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.result


JUDGE = JudgeStats(username="alice", total_solved=15, easy_solved=10, medium_solved=5)
COMPETITIVE = CompetitiveStats(
    handle="alice_cf",
    rating=1500,
    max_rating=1600,
    rank="specialist",
    total_solved=42,
    current_streak=3,
)


class StatsAggregatorTest(unittest.TestCase):

    def test_merges_both_results(self):
        aggregator = StatsAggregator(FakeClient(JUDGE), FakeClient(COMPETITIVE))

        combined = aggregator.get_combined_stats()

        self.assertEqual(combined, CombinedStats(judge=JUDGE, competitive=COMPETITIVE))

    def test_judge_failure_discards_competitive_result(self):
        competitive = FakeClient(COMPETITIVE)
        aggregator = StatsAggregator(
            FakeClient(error=UpstreamError("leetcode", "down")), competitive
        )

        with self.assertRaises(AggregationError) as ctx:
            aggregator.get_combined_stats()

        self.assertEqual(competitive.calls, 1)
        self.assertIsInstance(ctx.exception.__cause__, UpstreamError)

    def test_competitive_failure_fails_everything(self):
        aggregator = StatsAggregator(
            FakeClient(JUDGE),
            FakeClient(error=UpstreamError("codeforces", "no user record")),
        )

        with self.assertRaises(AggregationError):
            aggregator.get_combined_stats()

    def test_both_failures_raise_once(self):
        aggregator = StatsAggregator(
            FakeClient(error=UpstreamError("leetcode", "down")),
            FakeClient(error=UpstreamError("codeforces", "down")),
        )

        with self.assertLogs("stats.aggregator", level="ERROR") as logs:
            with self.assertRaises(AggregationError) as ctx:
                aggregator.get_combined_stats()

        self.assertEqual(len(logs.records), 2)
        self.assertIn("2", str(ctx.exception))

    def test_waits_for_slow_source_before_failing(self):
        slow = FakeClient(COMPETITIVE, delay=0.2)
        aggregator = StatsAggregator(
            FakeClient(error=UpstreamError("leetcode", "down")), slow
        )

        start = time.monotonic()
        with self.assertRaises(AggregationError):
            aggregator.get_combined_stats()

        self.assertGreaterEqual(time.monotonic() - start, 0.2)

    def test_fetches_run_concurrently(self):
        judge = FakeClient(JUDGE, delay=0.5)
        competitive = FakeClient(COMPETITIVE, delay=0.5)
        aggregator = StatsAggregator(judge, competitive)

        start = time.monotonic()
        aggregator.get_combined_stats()
        elapsed = time.monotonic() - start

        self.assertGreaterEqual(elapsed, 0.5)
        self.assertLess(elapsed, 0.9)

    def test_unexpected_errors_propagate(self):
        aggregator = StatsAggregator(
            FakeClient(error=RuntimeError("bug")), FakeClient(COMPETITIVE)
        )

        with self.assertRaises(RuntimeError):
            aggregator.get_combined_stats()


if __name__ == "__main__":
    unittest.main()
