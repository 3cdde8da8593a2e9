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

import logging
from typing import Any

import requests

from shared.types import JudgeStats
from stats.errors import UpstreamError

logger = logging.getLogger(__name__)

SOURCE = "leetcode"
DEFAULT_GRAPHQL_URL = "https://leetcode.com/graphql"
REQUEST_TIMEOUT = 30  # seconds

USER_PROFILE_QUERY = """
query getUserProfile($username: String!) {
  matchedUser(username: $username) {
    submitStatsGlobal {
      acSubmissionNum {
        difficulty
        count
      }
    }
  }
}
"""

# Difficulty label -> JudgeStats attribute.
DIFFICULTY_FIELDS = {
    "All": "total_solved",
    "Easy": "easy_solved",
    "Medium": "medium_solved",
    "Hard": "hard_solved",
}

_STATS_PATH = ("data", "matchedUser", "submitStatsGlobal", "acSubmissionNum")


def extract_submission_counts(payload: Any) -> list:
    """
    Returns the acSubmissionNum list from a GraphQL response.

    A missing or null level anywhere along the path yields an empty list, so
    an unknown user reads as "nothing solved" rather than an error.

    Raises:
        UpstreamError: If the payload cannot be navigated.
    """
    node = payload
    for key in _STATS_PATH:
        if node is None:
            return []
        if not isinstance(node, dict):
            raise UpstreamError(SOURCE, f"expected an object at '{key}'")
        node = node.get(key)
    if node is None:
        return []
    if not isinstance(node, list):
        raise UpstreamError(SOURCE, "acSubmissionNum is not a list")
    return node


def parse_judge_stats(username: str, payload: Any) -> JudgeStats:
    """
    Builds JudgeStats from a getUserProfile response.

    Args:
        username (str): The username the query was issued for.
        payload: The decoded JSON response body.

    Returns:
        JudgeStats: Counts keyed by difficulty; anything absent stays 0.
    """
    stats = JudgeStats(username=username)
    for entry in extract_submission_counts(payload):
        if not isinstance(entry, dict):
            raise UpstreamError(SOURCE, f"unexpected submission entry: {entry!r}")
        difficulty = entry.get("difficulty")
        field_name = DIFFICULTY_FIELDS.get(difficulty) if isinstance(difficulty, str) else None
        if field_name is None:
            continue
        count = entry.get("count", 0)
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise UpstreamError(SOURCE, f"bad count: {count!r}")
        setattr(stats, field_name, count)
    return stats


class LeetCodeClient:
    """Fetches solved-problem counts from the LeetCode GraphQL API."""

    def __init__(
        self,
        username: str,
        graphql_url: str = DEFAULT_GRAPHQL_URL,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.username = username
        self.graphql_url = graphql_url
        self.timeout = timeout

    def fetch_stats(self) -> JudgeStats:
        """
        Queries the judge for the configured username.

        Raises:
            UpstreamError: On network failure, a non-2xx status, or a body
                that is not usable JSON.
        """
        logger.info("Fetching LeetCode stats for %s", self.username)
        try:
            response = requests.post(
                self.graphql_url,
                json={
                    "query": USER_PROFILE_QUERY,
                    "variables": {"username": self.username},
                },
                headers={"Referer": "https://leetcode.com"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except ValueError as e:
            raise UpstreamError(SOURCE, f"invalid JSON: {e}") from e
        except requests.RequestException as e:
            raise UpstreamError(SOURCE, f"request failed: {e}") from e

        return parse_judge_stats(self.username, payload)
