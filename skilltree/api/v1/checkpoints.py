"""
Checkpoint endpoints - tier gate status, eligibility and submissions.
"""

from fastapi import APIRouter, HTTPException, status

from skilltree.api.deps import CheckpointAttempts, CurrentUserId, Tracker
from skilltree.curriculum.checkpoints import CHECKPOINT_TIERS, get_checkpoint_problem
from skilltree.engines.gating import can_attempt_checkpoint, get_checkpoint_status
from skilltree.errors import (
    CheckpointNotEligibleError,
    InvalidCheckpointRequestError,
    JudgeUnavailableError,
)
from skilltree.logging_config import get_logger
from skilltree.schemas.common import ErrorResponse
from skilltree.schemas.checkpoint import (
    CheckpointAttemptRequest,
    CheckpointJudgeResponse,
    CheckpointListResponse,
    CheckpointStatusResponse,
    CheckpointSummary,
)

router = APIRouter()
logger = get_logger(__name__)


@router.get("", response_model=CheckpointListResponse)
async def list_checkpoints(user_id: CurrentUserId, tracker: Tracker):
    """Every checkpoint tier with pass state, attempts and eligibility."""
    mastery = await tracker.get_mastery(user_id)
    checkpoints = await tracker.get_checkpoints(user_id)
    summaries = []
    for tier in CHECKPOINT_TIERS:
        cp = get_checkpoint_status(tier, checkpoints)
        summaries.append(
            CheckpointSummary(
                tier_number=tier,
                is_passed=cp.passed,
                attempts=cp.attempts,
                can_attempt=can_attempt_checkpoint(tier, mastery),
            )
        )
    return CheckpointListResponse(checkpoints=summaries)


@router.get("/{tier}", response_model=CheckpointStatusResponse)
async def get_checkpoint(tier: int, user_id: CurrentUserId, tracker: Tracker):
    """Checkpoint record projection for one tier."""
    if tier not in CHECKPOINT_TIERS:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No checkpoint for tier {tier}")
    mastery = await tracker.get_mastery(user_id)
    checkpoints = await tracker.get_checkpoints(user_id)
    cp = get_checkpoint_status(tier, checkpoints)
    problem = get_checkpoint_problem(tier)
    return CheckpointStatusResponse(
        tier=tier,
        exists=cp.exists,
        passed=cp.passed,
        attempts=cp.attempts,
        last_attempt_at=cp.last_attempt_at,
        passed_at=cp.passed_at,
        can_attempt=can_attempt_checkpoint(tier, mastery),
        title=problem.title if problem else None,
        description=problem.description if problem else None,
        required_patterns=list(problem.required_patterns) if problem else [],
    )


@router.post(
    "/attempt",
    response_model=CheckpointJudgeResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def attempt_checkpoint(
    body: CheckpointAttemptRequest,
    user_id: CurrentUserId,
    service: CheckpointAttempts,
):
    """Submit checkpoint code to the judge."""
    try:
        result = await service.attempt(user_id, body.tier_number, body.code)
    except InvalidCheckpointRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except CheckpointNotEligibleError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except JudgeUnavailableError as e:
        logger.warning("Checkpoint judge unavailable: %s", e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Checkpoint judge is unavailable. Please try again.",
        )
    return CheckpointJudgeResponse(
        verdict=result.verdict,
        feedback=result.feedback,
        patterns_found=result.patterns_found,
        missing_patterns=result.missing_patterns,
        is_passed=result.is_passed,
        attempts=result.attempts,
    )
