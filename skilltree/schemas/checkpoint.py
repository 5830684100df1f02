"""
Pydantic schemas for checkpoint API.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class CheckpointSummary(BaseModel):
    """Checkpoint state of one tier plus eligibility."""

    tier_number: int
    is_passed: bool
    attempts: int
    can_attempt: bool


class CheckpointListResponse(BaseModel):
    """All checkpoint tiers."""

    checkpoints: List[CheckpointSummary]


class CheckpointStatusResponse(BaseModel):
    """Projection of a single tier's checkpoint record."""

    tier: int
    exists: bool
    passed: bool
    attempts: int
    last_attempt_at: Optional[datetime] = None
    passed_at: Optional[datetime] = None
    can_attempt: bool
    title: Optional[str] = None
    description: Optional[str] = None
    required_patterns: List[str] = []


class CheckpointAttemptRequest(BaseModel):
    """Body for checkpoint submission."""

    tier_number: int
    code: str


class CheckpointJudgeResponse(BaseModel):
    """Judge outcome of a checkpoint submission."""

    verdict: str
    feedback: str
    patterns_found: List[str] = []
    missing_patterns: List[str] = []
    is_passed: bool
    attempts: int
