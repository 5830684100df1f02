"""
Mastery endpoints - read the mastery map, record solved problems.
"""

from fastapi import APIRouter, HTTPException, status

from skilltree.api.deps import CurrentUserId, Tracker
from skilltree.errors import UnknownProblemError, UnknownTopicError
from skilltree.schemas.mastery import MasteryData, MasteryResponse, SolveProblemRequest

router = APIRouter()


@router.get("", response_model=MasteryResponse)
async def get_mastery(user_id: CurrentUserId, tracker: Tracker):
    """Mastery map for the current user."""
    mastery = await tracker.get_mastery(user_id)
    return MasteryResponse(
        mastery={
            key: MasteryData(confidence=r.confidence, solved=r.solved_problems)
            for key, r in mastery.items()
        }
    )


@router.post("/{topic_key}/solved", response_model=MasteryData)
async def record_solved_problem(
    topic_key: str,
    body: SolveProblemRequest,
    user_id: CurrentUserId,
    tracker: Tracker,
):
    """Mark a calibration problem solved; confidence is recomputed from the solved set."""
    try:
        record = await tracker.record_solved_problem(user_id, topic_key, body.problem_id)
    except (UnknownTopicError, UnknownProblemError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MasteryData(confidence=record.confidence, solved=record.solved_problems)
