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

from dataclasses import dataclass
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class ProjectRecord:
    """A portfolio project shown on the projects page."""

    id: int
    title: str
    description: str
    tech: Tuple[str, ...] = ()
    stack: Optional[str] = None
    highlights: Optional[Tuple[str, ...]] = None
    link: Optional[str] = None


@dataclass
class ContactMessage:
    """A contact-form submission. Fields are whatever the client sent."""

    name: Any = None
    email: Any = None
    message: Any = None


@dataclass
class ContactReceipt:
    success: bool
    message: str


@dataclass
class JudgeStats:
    """Solved counts per difficulty for a LeetCode user."""

    username: str
    total_solved: int = 0
    easy_solved: int = 0
    medium_solved: int = 0
    hard_solved: int = 0


@dataclass
class CompetitiveStats:
    """Rating and solve summary for a Codeforces user."""

    handle: str
    rating: Optional[int] = None
    max_rating: Optional[int] = None
    rank: Optional[str] = None
    total_solved: int = 0
    current_streak: int = 0


@dataclass
class CombinedStats:
    judge: JudgeStats
    competitive: CompetitiveStats
