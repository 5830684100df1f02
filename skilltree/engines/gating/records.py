"""
Mastery and checkpoint records as read by the gating engine.

Records are owned by the progress layer; the engine only reads them. Absent
records are never an error: the accessors below return the zero state.
"""

from datetime import datetime
from typing import Iterable, List, Mapping, Optional

from pydantic import BaseModel


class MasteryRecord(BaseModel):
    """Per-user, per-topic mastery."""

    confidence: int = 0
    solved_problems: List[str] = []


class CheckpointRecord(BaseModel):
    """Per-user, per-tier checkpoint state."""

    tier_number: int
    is_passed: bool = False
    attempts: int = 0
    last_attempt_at: Optional[datetime] = None
    passed_at: Optional[datetime] = None


def mastery_for(mastery: Mapping[str, MasteryRecord], topic_key: str) -> MasteryRecord:
    """Return the topic's mastery record, or a zero record when there is none."""
    record = mastery.get(topic_key)
    if record is None:
        return MasteryRecord()
    return record


def checkpoint_for(checkpoints: Iterable[CheckpointRecord], tier: int) -> Optional[CheckpointRecord]:
    """Return the first checkpoint record for a tier, or None when the tier has none yet."""
    for record in checkpoints:
        if record.tier_number == tier:
            return record
    return None
