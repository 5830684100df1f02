"""
Progress engine - per-user mastery/checkpoint records and checkpoint attempts.
"""

from skilltree.engines.progress.progress_tracker import ProgressTracker
from skilltree.engines.progress.checkpoint_service import (
    CheckpointAttemptResult,
    CheckpointAttemptService,
)

__all__ = [
    "ProgressTracker",
    "CheckpointAttemptResult",
    "CheckpointAttemptService",
]
