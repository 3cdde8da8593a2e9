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

import unittest
from unittest.mock import MagicMock, patch

import requests

from shared.types import JudgeStats
from stats import leetcode
from stats.errors import UpstreamError


def _payload(entries):
    return {
        "data": {
            "matchedUser": {"submitStatsGlobal": {"acSubmissionNum": entries}}
        }
    }


class ParseJudgeStatsTest(unittest.TestCase):

    def test_maps_difficulties_and_defaults_missing_to_zero(self):
        payload = _payload(
            [
                {"difficulty": "Easy", "count": 10},
                {"difficulty": "Medium", "count": 5},
                {"difficulty": "All", "count": 15},
            ]
        )

        stats = leetcode.parse_judge_stats("alice", payload)

        self.assertEqual(
            stats,
            JudgeStats(
                username="alice",
                total_solved=15,
                easy_solved=10,
                medium_solved=5,
                hard_solved=0,
            ),
        )

    def test_missing_path_is_all_zero(self):
        for payload in (
            {},
            {"data": None},
            {"data": {"matchedUser": None}},
            {"data": {"matchedUser": {"submitStatsGlobal": {}}}},
            _payload([]),
        ):
            with self.subTest(payload=payload):
                stats = leetcode.parse_judge_stats("bob", payload)
                self.assertEqual(stats, JudgeStats(username="bob"))

    def test_unknown_labels_are_ignored(self):
        payload = _payload(
            [
                {"difficulty": "Hard", "count": 2},
                {"difficulty": "Insane", "count": 99},
            ]
        )

        stats = leetcode.parse_judge_stats("carol", payload)

        self.assertEqual(stats.hard_solved, 2)
        self.assertEqual(stats.total_solved, 0)

    def test_unindexable_payload_raises(self):
        for payload in (
            ["not", "an", "object"],
            {"data": "oops"},
            _payload("not a list"),
            _payload(["Easy"]),
            _payload([{"difficulty": "Easy", "count": "ten"}]),
        ):
            with self.subTest(payload=payload):
                with self.assertRaises(UpstreamError):
                    leetcode.parse_judge_stats("dave", payload)

    def test_negative_count_raises(self):
        payload = _payload([{"difficulty": "All", "count": -4}])

        with self.assertRaises(UpstreamError):
            leetcode.parse_judge_stats("ivy", payload)


class LeetCodeClientTest(unittest.TestCase):

    @patch("stats.leetcode.requests.post")
    def test_fetch_stats_sends_query_for_username(self, mock_post):
        response = MagicMock()
        response.json.return_value = _payload([{"difficulty": "All", "count": 3}])
        mock_post.return_value = response

        client = leetcode.LeetCodeClient(
            "erin", graphql_url="https://judge.test/graphql", timeout=5
        )
        stats = client.fetch_stats()

        self.assertEqual(stats.username, "erin")
        self.assertEqual(stats.total_solved, 3)
        args, kwargs = mock_post.call_args
        self.assertEqual(args[0], "https://judge.test/graphql")
        self.assertEqual(kwargs["json"]["variables"], {"username": "erin"})
        self.assertIn("matchedUser", kwargs["json"]["query"])
        self.assertEqual(kwargs["headers"]["Referer"], "https://leetcode.com")
        self.assertEqual(kwargs["timeout"], 5)

    @patch("stats.leetcode.requests.post")
    def test_network_failure_raises_upstream_error(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("boom")

        with self.assertRaises(UpstreamError) as ctx:
            leetcode.LeetCodeClient("frank").fetch_stats()

        self.assertEqual(ctx.exception.source, "leetcode")
        self.assertIsInstance(ctx.exception.__cause__, requests.ConnectionError)

    @patch("stats.leetcode.requests.post")
    def test_http_error_raises_upstream_error(self, mock_post):
        response = MagicMock()
        response.raise_for_status.side_effect = requests.HTTPError("429")
        mock_post.return_value = response

        with self.assertRaises(UpstreamError):
            leetcode.LeetCodeClient("gina").fetch_stats()

    @patch("stats.leetcode.requests.post")
    def test_invalid_json_raises_upstream_error(self, mock_post):
        response = MagicMock()
        response.json.side_effect = ValueError("Expecting value")
        mock_post.return_value = response

        with self.assertRaises(UpstreamError):
            leetcode.LeetCodeClient("hank").fetch_stats()


if __name__ == "__main__":
    unittest.main()
