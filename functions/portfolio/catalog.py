"""
Static project catalog served on the portfolio's projects page.
"""

from __future__ import annotations

from shared.types import ProjectRecord

PROJECTS: tuple[ProjectRecord, ...] = (
    ProjectRecord(
        id=1,
        title="Personal Portfolio",
        description="Personal website built using React + Vite with a Node backend.",
        tech=("React", "Vite", "Node.js", "Express"),
    ),
    ProjectRecord(
        id=2,
        title="DSA Practice",
        description="Solved DSA problems across LeetCode and Codeforces.",
        tech=("C++", "STL", "Algorithms"),
    ),
    ProjectRecord(
        id=3,
        title="Mini Projects",
        description="Small frontend and backend experiments for learning.",
        tech=("JavaScript", "CSS", "APIs"),
    ),
)


def list_projects() -> list[ProjectRecord]:
    return list(PROJECTS)
