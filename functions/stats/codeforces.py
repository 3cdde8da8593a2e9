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
from datetime import date, datetime, timedelta, tzinfo
from typing import Any, Iterable, Optional, Set, Tuple

import requests

from shared.types import CompetitiveStats
from stats.errors import UpstreamError

logger = logging.getLogger(__name__)

SOURCE = "codeforces"
DEFAULT_API_URL = "https://codeforces.com/api"
REQUEST_TIMEOUT = 30  # seconds
ACCEPTED_VERDICT = "OK"


def _accepted(submissions: Iterable[dict]) -> Iterable[dict]:
    for submission in submissions:
        if not isinstance(submission, dict):
            raise UpstreamError(SOURCE, f"unexpected submission: {submission!r}")
        if submission.get("verdict") == ACCEPTED_VERDICT:
            yield submission


def _problem_key(submission: dict) -> Tuple[Any, Any]:
    problem = submission.get("problem")
    if not isinstance(problem, dict):
        raise UpstreamError(SOURCE, "accepted submission has no problem")
    # Gym and acmsguru problems can lack a contest id.
    group = problem.get("contestId", problem.get("problemsetName"))
    return group, problem.get("index")


def count_solved_problems(submissions: Iterable[dict]) -> int:
    """Returns the number of distinct problems with an accepted submission."""
    return len({_problem_key(s) for s in _accepted(submissions)})


def solved_dates(
    submissions: Iterable[dict], tz: Optional[tzinfo] = None
) -> Set[date]:
    """
    Returns the calendar dates with at least one accepted submission.

    Args:
        submissions: Submission objects from user.status.
        tz: Time zone for the calendar; server local time when None.
    """
    dates = set()
    for submission in _accepted(submissions):
        seconds = submission.get("creationTimeSeconds")
        if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
            raise UpstreamError(SOURCE, f"bad creationTimeSeconds: {seconds!r}")
        try:
            dates.add(datetime.fromtimestamp(seconds, tz).date())
        except (OverflowError, OSError, ValueError) as e:
            raise UpstreamError(
                SOURCE, f"creationTimeSeconds out of range: {seconds!r}"
            ) from e
    return dates


def local_today(tz: Optional[tzinfo] = None) -> date:
    return datetime.now(tz).date()


def _user_field(user: dict, key: str, kind: type) -> Any:
    value = user.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, kind):
        raise UpstreamError(SOURCE, f"bad {key} in user.info: {value!r}")
    return value


def current_streak(days: Set[date], today: date) -> int:
    """
    Counts consecutive solved days ending today.

    A day without a solve breaks the chain, so nothing solved today means a
    streak of 0 regardless of earlier activity. The walk never goes past the
    earliest solved date.
    """
    if not days:
        return 0
    earliest = min(days)
    streak = 0
    day = today
    while day >= earliest and day in days:
        streak += 1
        day -= timedelta(days=1)
    return streak


class CodeforcesClient:
    """Fetches rating, solved count and streak from the Codeforces API."""

    def __init__(
        self,
        handle: str,
        api_url: str = DEFAULT_API_URL,
        timeout: float = REQUEST_TIMEOUT,
        tz: Optional[tzinfo] = None,
    ):
        self.handle = handle
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.tz = tz

    def _call(self, method: str, params: dict) -> Any:
        """
        Calls a Codeforces API method and returns its `result` field.

        Raises:
            UpstreamError: On network failure, a non-2xx status, invalid JSON
                or a FAILED status envelope.
        """
        try:
            response = requests.get(
                f"{self.api_url}/{method}", params=params, timeout=self.timeout
            )
            response.raise_for_status()
            payload = response.json()
        except ValueError as e:
            raise UpstreamError(SOURCE, f"{method} returned invalid JSON: {e}") from e
        except requests.RequestException as e:
            raise UpstreamError(SOURCE, f"{method} failed: {e}") from e

        if not isinstance(payload, dict):
            raise UpstreamError(SOURCE, f"{method} returned {type(payload).__name__}")
        if payload.get("status") != "OK":
            raise UpstreamError(
                SOURCE, f"{method} status {payload.get('status')}: {payload.get('comment')}"
            )
        return payload.get("result")

    def fetch_user(self) -> dict:
        users = self._call("user.info", {"handles": self.handle})
        if not isinstance(users, list):
            raise UpstreamError(SOURCE, "user.info result is not a list")
        if not users:
            raise UpstreamError(SOURCE, f"no user record for handle {self.handle!r}")
        user = users[0]
        if not isinstance(user, dict):
            raise UpstreamError(SOURCE, "user.info returned a non-object user")
        return user

    def fetch_submissions(self) -> list:
        submissions = self._call("user.status", {"handle": self.handle})
        if submissions is None:
            return []
        if not isinstance(submissions, list):
            raise UpstreamError(SOURCE, "user.status result is not a list")
        return submissions

    def fetch_stats(self) -> CompetitiveStats:
        logger.info("Fetching Codeforces stats for %s", self.handle)
        user = self.fetch_user()
        submissions = self.fetch_submissions()
        logger.info(
            "Codeforces returned %d submissions for %s", len(submissions), self.handle
        )

        return CompetitiveStats(
            handle=self.handle,
            rating=_user_field(user, "rating", int),
            max_rating=_user_field(user, "maxRating", int),
            rank=_user_field(user, "rank", str),
            total_solved=count_solved_problems(submissions),
            current_streak=current_streak(
                solved_dates(submissions, self.tz), local_today(self.tz)
            ),
        )
