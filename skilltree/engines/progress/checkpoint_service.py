"""
Checkpoint Service - Submits tier checkpoint attempts to the judge.

Flow:
1. Validate tier (0-6) and that code was submitted
2. Every topic of the tier must be at >= 70% confidence
3. Count the attempt
4. Ask the judge; an ADVANCE verdict marks the checkpoint passed
"""

from typing import List

from pydantic import BaseModel

from skilltree.ai.judge_client import HttpJudgeClient
from skilltree.curriculum.checkpoints import CHECKPOINT_TIERS, get_checkpoint_problem
from skilltree.engines.gating.gating_engine import can_attempt_checkpoint
from skilltree.engines.progress.progress_tracker import ProgressTracker
from skilltree.errors import CheckpointNotEligibleError, InvalidCheckpointRequestError
from skilltree.logging_config import get_logger

logger = get_logger(__name__)


class CheckpointAttemptResult(BaseModel):
    """Outcome of one checkpoint submission."""

    tier: int
    verdict: str
    feedback: str
    patterns_found: List[str] = []
    missing_patterns: List[str] = []
    is_passed: bool
    attempts: int


class CheckpointAttemptService:
    """Coordinates eligibility, attempt bookkeeping and judging for checkpoints."""

    def __init__(self, tracker: ProgressTracker, judge: HttpJudgeClient):
        self.tracker = tracker
        self.judge = judge

    async def attempt(self, user_id: str, tier: int, code: str) -> CheckpointAttemptResult:
        """
        Submit code for a tier's checkpoint.

        Raises:
            InvalidCheckpointRequestError: tier outside 0-6 or empty code
            CheckpointNotEligibleError: tier topics not all at the unlock threshold
            JudgeUnavailableError: judge unreachable (the attempt is still counted)
        """
        if tier not in CHECKPOINT_TIERS:
            raise InvalidCheckpointRequestError(
                f"Invalid tier number (must be {CHECKPOINT_TIERS.start}-{CHECKPOINT_TIERS.stop - 1})"
            )
        if not code.strip():
            raise InvalidCheckpointRequestError("Code is required")

        mastery = await self.tracker.get_mastery(user_id)
        if not can_attempt_checkpoint(tier, mastery):
            raise CheckpointNotEligibleError(tier)

        problem = get_checkpoint_problem(tier)
        if problem is None:
            raise InvalidCheckpointRequestError(f"No checkpoint problem for tier {tier}")

        record = await self.tracker.record_attempt(user_id, tier)
        logger.info(
            "Checkpoint attempt",
            extra={"user_id": user_id, "tier": tier, "attempts": record.attempts},
        )

        verdict = await self.judge.judge_checkpoint(
            code,
            tier,
            problem.required_patterns,
            problem.description,
        )

        is_passed = record.is_passed
        if verdict.advanced:
            record = await self.tracker.mark_passed(user_id, tier)
            is_passed = True

        return CheckpointAttemptResult(
            tier=tier,
            verdict=verdict.verdict,
            feedback=verdict.feedback,
            patterns_found=verdict.patterns_found,
            missing_patterns=verdict.missing_patterns,
            is_passed=is_passed,
            attempts=record.attempts,
        )
