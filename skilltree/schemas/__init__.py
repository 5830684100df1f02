"""
Pydantic schemas for API request/response validation.
"""

from skilltree.schemas.common import ErrorResponse, HealthResponse
from skilltree.schemas.tree import (
    ProblemResponse,
    TierResponse,
    TopicResponse,
    TopicStatusResponse,
    TopicsByTierResponse,
    TreeResponse,
)
from skilltree.schemas.mastery import (
    MasteryData,
    MasteryResponse,
    SolveProblemRequest,
)
from skilltree.schemas.checkpoint import (
    CheckpointAttemptRequest,
    CheckpointJudgeResponse,
    CheckpointListResponse,
    CheckpointStatusResponse,
    CheckpointSummary,
)

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "ProblemResponse",
    "TierResponse",
    "TopicResponse",
    "TopicStatusResponse",
    "TopicsByTierResponse",
    "TreeResponse",
    "MasteryData",
    "MasteryResponse",
    "SolveProblemRequest",
    "CheckpointAttemptRequest",
    "CheckpointJudgeResponse",
    "CheckpointListResponse",
    "CheckpointStatusResponse",
    "CheckpointSummary",
]
