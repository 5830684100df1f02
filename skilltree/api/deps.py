"""
FastAPI dependencies for identity, progress records and the checkpoint judge.
"""

from functools import lru_cache
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from skilltree.ai.judge_client import HttpJudgeClient
from skilltree.config import get_settings
from skilltree.engines.progress.checkpoint_service import CheckpointAttemptService
from skilltree.engines.progress.progress_tracker import ProgressTracker


# Security scheme
security = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
) -> str:
    """
    Current user identity or 401.

    The bearer credential is the user id issued by the identity provider,
    which verifies it before requests reach this service.
    """
    if not credentials or not credentials.credentials.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return credentials.credentials.strip()


CurrentUserId = Annotated[str, Depends(get_current_user_id)]


@lru_cache
def get_progress_tracker() -> ProgressTracker:
    """Process-wide progress store."""
    return ProgressTracker()


Tracker = Annotated[ProgressTracker, Depends(get_progress_tracker)]


def get_judge_client() -> HttpJudgeClient:
    """Judge client built from settings."""
    settings = get_settings()
    return HttpJudgeClient(settings.judge_url, settings.judge_timeout_seconds)


def get_checkpoint_service(
    tracker: Tracker,
    judge: Annotated[HttpJudgeClient, Depends(get_judge_client)],
) -> CheckpointAttemptService:
    return CheckpointAttemptService(tracker, judge)


CheckpointAttempts = Annotated[CheckpointAttemptService, Depends(get_checkpoint_service)]
