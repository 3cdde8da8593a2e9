"""
Pydantic schemas for the portfolio HTTP API.

Field names are camelCase because the frontend consumes them directly.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ProjectResponse(BaseModel):
    id: int
    title: str
    description: str
    tech: list[str]
    stack: Optional[str] = None
    highlights: Optional[list[str]] = None
    link: Optional[str] = None


class ContactRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Any = None
    email: Any = None
    message: Any = None


class ContactResponse(BaseModel):
    success: bool
    message: str


class LeetCodeStatsResponse(BaseModel):
    username: str
    totalSolved: int = 0
    easySolved: int = 0
    mediumSolved: int = 0
    hardSolved: int = 0


class CodeforcesStatsResponse(BaseModel):
    handle: str
    rating: Optional[int] = None
    maxRating: Optional[int] = None
    rank: Optional[str] = None
    totalSolved: int = 0
    currentStreak: int = 0


class CompetitiveStatsResponse(BaseModel):
    leetcode: LeetCodeStatsResponse
    codeforces: CodeforcesStatsResponse


class ErrorResponse(BaseModel):
    error: str
