"""
Pydantic schemas for the skill tree API.
"""

from typing import List

from pydantic import BaseModel


class ProblemResponse(BaseModel):
    """Calibration problem; its id is what POST /mastery/{topic}/solved expects."""

    id: str
    title: str
    difficulty: str
    invariant: str = ""


class TopicResponse(BaseModel):
    """Static topic definition."""

    key: str
    label: str
    tier: int
    prerequisites: List[str]
    description: str
    theory: str
    youtube: str
    problem_count: int
    problems: List[ProblemResponse] = []


class TierResponse(BaseModel):
    """Topics of one tier."""

    tier: int
    topics: List[TopicResponse]


class TopicsByTierResponse(BaseModel):
    """Whole static graph grouped by tier."""

    tiers: List[TierResponse]


class TopicStatusResponse(BaseModel):
    """A topic's status for the current user."""

    key: str
    tier: int
    status: str
    confidence: int
    solved_problems: List[str] = []


class TreeResponse(BaseModel):
    """Every topic's status plus tier gates."""

    topics: List[TopicStatusResponse]
    unlocked_tiers: List[int]
