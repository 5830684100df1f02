"""
Progress Tracker - Owns per-user mastery and checkpoint records (in-memory).

The gating engine only ever reads snapshots produced here. Confidence is
always recomputed from the solved set, never written directly.
"""

import asyncio
from datetime import datetime, timezone
from typing import Dict, List

from skilltree.curriculum.checkpoints import CHECKPOINT_TIERS
from skilltree.curriculum.dag import DAG_STRUCTURE
from skilltree.curriculum.problems import find_problem
from skilltree.engines.gating.gating_engine import compute_confidence
from skilltree.engines.gating.records import CheckpointRecord, MasteryRecord
from skilltree.errors import InvalidCheckpointRequestError, UnknownProblemError, UnknownTopicError
from skilltree.logging_config import get_logger

logger = get_logger(__name__)


class ProgressTracker:
    """
    Tracks and manages per-user progression.

    A user's checkpoints for tiers 0-6 are created unpassed the first time
    the user is seen, so tiers above 0 stay gated until checkpoints pass.
    All reads return copies; callers cannot mutate stored records.
    """

    def __init__(self):
        self._mastery: Dict[str, Dict[str, MasteryRecord]] = {}
        self._checkpoints: Dict[str, Dict[int, CheckpointRecord]] = {}
        self._lock = asyncio.Lock()

    def _ensure_user(self, user_id: str) -> None:
        if user_id in self._checkpoints:
            return
        self._mastery[user_id] = {}
        self._checkpoints[user_id] = {
            tier: CheckpointRecord(tier_number=tier) for tier in CHECKPOINT_TIERS
        }
        logger.info("Initialized progress", extra={"user_id": user_id})

    async def get_mastery(self, user_id: str) -> Dict[str, MasteryRecord]:
        """Mastery map keyed by topic; topics never touched are absent."""
        async with self._lock:
            self._ensure_user(user_id)
            return {k: r.model_copy(deep=True) for k, r in self._mastery[user_id].items()}

    async def get_checkpoints(self, user_id: str) -> List[CheckpointRecord]:
        """Checkpoint records ordered by tier."""
        async with self._lock:
            self._ensure_user(user_id)
            records = self._checkpoints[user_id]
            return [records[t].model_copy() for t in sorted(records)]

    async def record_solved_problem(self, user_id: str, topic_key: str, problem_id: str) -> MasteryRecord:
        """
        Mark a problem solved and recompute the topic's confidence. Idempotent.

        Topic status is not checked here: solves on LOCKED or CHECKPOINT_BLOCKED
        topics are recorded like any other. Gating decides what the learner is
        offered, not what the tracker accepts.
        """
        topic = DAG_STRUCTURE.get(topic_key)
        if topic is None:
            raise UnknownTopicError(topic_key)
        if find_problem(topic_key, problem_id) is None:
            raise UnknownProblemError(topic_key, problem_id)

        async with self._lock:
            self._ensure_user(user_id)
            record = self._mastery[user_id].setdefault(topic_key, MasteryRecord())
            if problem_id not in record.solved_problems:
                record.solved_problems.append(problem_id)
            record.confidence = compute_confidence(len(record.solved_problems), topic.problem_count)
            logger.info(
                "Problem solved",
                extra={
                    "user_id": user_id,
                    "topic_key": topic_key,
                    "problem_id": problem_id,
                    "confidence": record.confidence,
                },
            )
            return record.model_copy(deep=True)

    def _checkpoint(self, user_id: str, tier: int) -> CheckpointRecord:
        self._ensure_user(user_id)
        record = self._checkpoints[user_id].get(tier)
        if record is None:
            raise InvalidCheckpointRequestError(f"No checkpoint for tier {tier}")
        return record

    async def record_attempt(self, user_id: str, tier: int) -> CheckpointRecord:
        """Count a checkpoint submission."""
        async with self._lock:
            record = self._checkpoint(user_id, tier)
            record.attempts += 1
            record.last_attempt_at = datetime.now(timezone.utc)
            return record.model_copy()

    async def mark_passed(self, user_id: str, tier: int) -> CheckpointRecord:
        """Mark a tier's checkpoint passed. Only called after the judge advances the user."""
        async with self._lock:
            record = self._checkpoint(user_id, tier)
            if not record.is_passed:
                record.is_passed = True
                record.passed_at = datetime.now(timezone.utc)
                logger.info("Checkpoint passed", extra={"user_id": user_id, "tier": tier})
            return record.model_copy()
