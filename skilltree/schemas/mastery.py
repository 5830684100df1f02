"""
Pydantic schemas for mastery API.
"""

from typing import Dict, List

from pydantic import BaseModel, Field


class MasteryData(BaseModel):
    """Mastery of one topic."""

    confidence: int
    solved: List[str] = []


class MasteryResponse(BaseModel):
    """Mastery map keyed by topic."""

    mastery: Dict[str, MasteryData]


class SolveProblemRequest(BaseModel):
    """Body for marking a calibration problem solved."""

    problem_id: str = Field(..., min_length=1)
