"""
Gating Engine - topic unlock status and checkpoint eligibility.

Pure functions over (static graph, mastery snapshot, checkpoint snapshot).
Nothing here performs I/O or keeps state; the same inputs always give the
same answer.

Status precedence for a topic (first match wins):
1. Unknown topic                                  -> LOCKED
2. Checkpoint of tier-1 exists and is not passed  -> CHECKPOINT_BLOCKED
3. confidence >= 100                              -> MASTERED
4. confidence > 0                                 -> IN_PROGRESS
5. No prerequisites                               -> UNLOCKED
6. Every prerequisite confidence >= 70            -> UNLOCKED, else LOCKED

A missing checkpoint record for tier-1 does not block (step 2 only fires on an
existing, unpassed record).
"""

from datetime import datetime
from enum import Enum
from typing import Dict, Iterable, Mapping, Optional

from pydantic import BaseModel

from skilltree.curriculum.dag import DAG_STRUCTURE, PROBLEMS_PER_TOPIC, Topic
from skilltree.engines.gating.records import (
    CheckpointRecord,
    MasteryRecord,
    checkpoint_for,
    mastery_for,
)
from skilltree.logging_config import get_logger

logger = get_logger(__name__)

UNLOCK_THRESHOLD = 70
MASTERY_THRESHOLD = 100


class TopicStatus(str, Enum):
    """Derived, never persisted."""
    LOCKED = "LOCKED"
    CHECKPOINT_BLOCKED = "CHECKPOINT_BLOCKED"
    UNLOCKED = "UNLOCKED"
    IN_PROGRESS = "IN_PROGRESS"
    MASTERED = "MASTERED"


class CheckpointStatus(BaseModel):
    """Read-model projection of a tier's checkpoint record."""

    exists: bool
    passed: bool
    attempts: int
    last_attempt_at: Optional[datetime] = None
    passed_at: Optional[datetime] = None


def compute_confidence(solved_count: int, total: int = PROBLEMS_PER_TOPIC) -> int:
    """
    Confidence percentage from the number of solved problems.

    min(100, floor(solved_count / total * 100)). Callers never pass a
    negative count.
    """
    return min(MASTERY_THRESHOLD, (solved_count * 100) // total)


def _graph(graph: Optional[Mapping[str, Topic]]) -> Mapping[str, Topic]:
    return DAG_STRUCTURE if graph is None else graph


def resolve_status(
    topic_key: str,
    mastery: Mapping[str, MasteryRecord],
    checkpoints: Iterable[CheckpointRecord],
    graph: Optional[Mapping[str, Topic]] = None,
) -> TopicStatus:
    """Classify one topic for the given mastery and checkpoint snapshot."""
    node = _graph(graph).get(topic_key)
    if node is None:
        logger.debug("Unknown topic %s resolved as LOCKED", topic_key)
        return TopicStatus.LOCKED

    if node.tier > 0:
        gate = checkpoint_for(checkpoints, node.tier - 1)
        if gate is not None and not gate.is_passed:
            return TopicStatus.CHECKPOINT_BLOCKED

    confidence = mastery_for(mastery, topic_key).confidence
    if confidence >= MASTERY_THRESHOLD:
        return TopicStatus.MASTERED
    if confidence > 0:
        return TopicStatus.IN_PROGRESS

    if not node.prerequisites:
        return TopicStatus.UNLOCKED

    prereqs_met = all(
        mastery_for(mastery, req).confidence >= UNLOCK_THRESHOLD
        for req in node.prerequisites
    )
    return TopicStatus.UNLOCKED if prereqs_met else TopicStatus.LOCKED


def resolve_all_statuses(
    mastery: Mapping[str, MasteryRecord],
    checkpoints: Iterable[CheckpointRecord],
    graph: Optional[Mapping[str, Topic]] = None,
) -> Dict[str, TopicStatus]:
    """Status of every topic in the graph, in definition order."""
    checkpoints = list(checkpoints)
    nodes = _graph(graph)
    return {key: resolve_status(key, mastery, checkpoints, nodes) for key in nodes}


def can_attempt_checkpoint(
    tier: int,
    mastery: Mapping[str, MasteryRecord],
    graph: Optional[Mapping[str, Topic]] = None,
) -> bool:
    """
    True iff every topic of the tier has confidence >= 70.

    A tier without topics is vacuously eligible.
    """
    return all(
        mastery_for(mastery, key).confidence >= UNLOCK_THRESHOLD
        for key, node in _graph(graph).items()
        if node.tier == tier
    )


def get_checkpoint_status(tier: int, checkpoints: Iterable[CheckpointRecord]) -> CheckpointStatus:
    """Project the tier's checkpoint record; absent records read as never attempted."""
    record = checkpoint_for(checkpoints, tier)
    if record is None:
        return CheckpointStatus(exists=False, passed=False, attempts=0)
    return CheckpointStatus(
        exists=True,
        passed=record.is_passed,
        attempts=record.attempts,
        last_attempt_at=record.last_attempt_at,
        passed_at=record.passed_at,
    )


def is_tier_unlocked(tier: int, checkpoints: Iterable[CheckpointRecord]) -> bool:
    """
    Strict tier-level gate: tier 0 is always open, later tiers need the
    previous checkpoint passed.

    Unlike resolve_status, a missing previous checkpoint counts as closed.
    """
    if tier == 0:
        return True
    previous = checkpoint_for(checkpoints, tier - 1)
    return previous is not None and previous.is_passed
