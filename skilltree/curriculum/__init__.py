"""
Curriculum - static topic DAG, calibration problems and tier checkpoints.

Tiers:
- 0 Roots, 1 Structuring, 2 Patterns, 3 Advanced Linear
- 4 Hierarchical, 5 Graph & Search, 6 Complex Graph & Specialist, 7 Endgame
"""

from skilltree.curriculum.dag import (
    DAG_STRUCTURE,
    MAX_TIER,
    PROBLEMS_PER_TOPIC,
    Topic,
    get_topics_by_tier,
    validate_graph,
)
from skilltree.curriculum.problems import PROBLEMS_DB, Problem, find_problem, get_problems
from skilltree.curriculum.checkpoints import (
    CHECKPOINT_TIERS,
    CHECKPOINTS_DB,
    CheckpointProblem,
    get_checkpoint_problem,
)

__all__ = [
    "DAG_STRUCTURE",
    "MAX_TIER",
    "PROBLEMS_PER_TOPIC",
    "Topic",
    "get_topics_by_tier",
    "validate_graph",
    "PROBLEMS_DB",
    "Problem",
    "find_problem",
    "get_problems",
    "CHECKPOINT_TIERS",
    "CHECKPOINTS_DB",
    "CheckpointProblem",
    "get_checkpoint_problem",
]
