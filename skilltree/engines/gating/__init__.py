"""
Gating engine - stateless rules over the skill tree.

Thresholds:
- Unlock: every prerequisite at >= 70% confidence
- Mastery: 100% confidence (all 3 problems solved)
- Checkpoint attempt: every topic of the tier at >= 70%
"""

from skilltree.engines.gating.records import (
    CheckpointRecord,
    MasteryRecord,
    checkpoint_for,
    mastery_for,
)
from skilltree.engines.gating.gating_engine import (
    MASTERY_THRESHOLD,
    UNLOCK_THRESHOLD,
    CheckpointStatus,
    TopicStatus,
    can_attempt_checkpoint,
    compute_confidence,
    get_checkpoint_status,
    is_tier_unlocked,
    resolve_all_statuses,
    resolve_status,
)

__all__ = [
    "CheckpointRecord",
    "MasteryRecord",
    "checkpoint_for",
    "mastery_for",
    "MASTERY_THRESHOLD",
    "UNLOCK_THRESHOLD",
    "CheckpointStatus",
    "TopicStatus",
    "can_attempt_checkpoint",
    "compute_confidence",
    "get_checkpoint_status",
    "is_tier_unlocked",
    "resolve_all_statuses",
    "resolve_status",
]
