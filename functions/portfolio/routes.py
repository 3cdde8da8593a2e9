"""
HTTP routes for the portfolio API.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request

from portfolio.catalog import list_projects
from portfolio.contact import submit_contact
from portfolio.dependencies import get_stats_aggregator
from portfolio.schemas import (
    CodeforcesStatsResponse,
    CompetitiveStatsResponse,
    ContactRequest,
    ContactResponse,
    ErrorResponse,
    LeetCodeStatsResponse,
    ProjectResponse,
)
from shared.types import CombinedStats
from stats.aggregator import StatsAggregator

logger = logging.getLogger(__name__)

router = APIRouter()


def combined_stats_response(combined: CombinedStats) -> CompetitiveStatsResponse:
    judge = combined.judge
    competitive = combined.competitive
    return CompetitiveStatsResponse(
        leetcode=LeetCodeStatsResponse(
            username=judge.username,
            totalSolved=judge.total_solved,
            easySolved=judge.easy_solved,
            mediumSolved=judge.medium_solved,
            hardSolved=judge.hard_solved,
        ),
        codeforces=CodeforcesStatsResponse(
            handle=competitive.handle,
            rating=competitive.rating,
            maxRating=competitive.max_rating,
            rank=competitive.rank,
            totalSolved=competitive.total_solved,
            currentStreak=competitive.current_streak,
        ),
    )


@router.get(
    "/projects",
    response_model=list[ProjectResponse],
    response_model_exclude_none=True,
)
def projects():
    return [
        ProjectResponse(
            id=project.id,
            title=project.title,
            description=project.description,
            tech=list(project.tech),
            stack=project.stack,
            highlights=list(project.highlights) if project.highlights else None,
            link=project.link,
        )
        for project in list_projects()
    ]


@router.post("/contact", response_model=ContactResponse)
async def contact(request: Request):
    """
    Accept a contact form submission.

    The body is optional and unvalidated: a missing body, invalid JSON or a
    non-object payload are all treated as an empty submission.
    """
    body = await request.body()
    data = {}
    if body:
        try:
            data = await request.json()
        except ValueError:
            logger.info("Contact body is not valid JSON; treating as empty")
    if not isinstance(data, dict):
        data = {}

    payload = ContactRequest.model_validate(data)
    receipt = submit_contact(
        name=payload.name, email=payload.email, message=payload.message
    )
    return ContactResponse(success=receipt.success, message=receipt.message)


@router.get(
    "/competitive-stats",
    response_model=CompetitiveStatsResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)
def competitive_stats(
    aggregator: StatsAggregator = Depends(get_stats_aggregator),
):
    """
    Fetch LeetCode and Codeforces stats together.

    AggregationError is mapped to a 500 by the app-level exception handler.
    """
    return combined_stats_response(aggregator.get_combined_stats())
