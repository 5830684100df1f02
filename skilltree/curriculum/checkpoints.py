"""
Checkpoint problems - one multi-pattern integration challenge per tier.

Tiers 0-6 each close with a checkpoint; tier 7 is the endgame and has none.
Passing the checkpoint of tier N opens the gate into tier N+1.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict

CHECKPOINT_TIERS = range(0, 7)


class CheckpointProblem(BaseModel):
    """Integrative challenge judged against a set of required patterns."""

    model_config = ConfigDict(frozen=True)

    tier: int
    title: str
    difficulty: str
    description: str
    required_topics: Tuple[str, ...]
    required_patterns: Tuple[str, ...]


CHECKPOINTS_DB: Mapping[int, CheckpointProblem] = MappingProxyType({
    0: CheckpointProblem(
        tier=0,
        title="Subsets Generator",
        difficulty="Medium",
        description="Generate all subsets (power set) using recursion and array iteration",
        required_topics=("ARRAY_SCAN", "RECURSION_ROOTS"),
        required_patterns=("Array Iteration", "Recursive Backtracking"),
    ),
    1: CheckpointProblem(
        tier=1,
        title="Interval Merger with Validation",
        difficulty="Hard",
        description="Merge overlapping intervals with hash deduplication and stack validation",
        required_topics=("ARRAY_SCAN", "RECURSION_ROOTS", "SORTING", "HASHING", "STACKS"),
        required_patterns=("Sorting", "Hashing", "Stack"),
    ),
    2: CheckpointProblem(
        tier=2,
        title="Maximum Subarray with Constraints",
        difficulty="Hard",
        description="Maximum sum subarray with prefix sum optimization and sliding window",
        required_topics=("PREFIX_SUM", "TWO_POINTERS", "QUEUES", "LINKED_LISTS"),
        required_patterns=("Prefix Sum", "Sliding Window", "Queue"),
    ),
    3: CheckpointProblem(
        tier=3,
        title="Largest Rectangle in Histogram",
        difficulty="Hard",
        description="Largest rectangle in histogram using binary search and monotonic stack",
        required_topics=("SLIDING_WINDOW", "BINARY_SEARCH", "MONOTONIC_STACK"),
        required_patterns=("Binary Search", "Monotonic Stack", "Sliding Window"),
    ),
    4: CheckpointProblem(
        tier=4,
        title="Non-overlapping Intervals in Tree",
        difficulty="Hard",
        description="Maximum non-overlapping intervals in binary tree with greedy selection",
        required_topics=("BINARY_TREES", "INTERVALS", "GREEDY"),
        required_patterns=("Tree Traversal", "Interval Merging", "Greedy"),
    ),
    5: CheckpointProblem(
        tier=5,
        title="Word Search II",
        difficulty="Hard",
        description="Word Search II using Trie construction, DFS traversal, and backtracking",
        required_topics=("DFS_BFS", "BACKTRACKING", "TRIES"),
        required_patterns=("Trie", "DFS", "Backtracking"),
    ),
    6: CheckpointProblem(
        tier=6,
        title="Course Schedule with Prerequisites",
        difficulty="Hard",
        description="Course scheduling with topological sort, union-find, and bitmask states",
        required_topics=("TOPOLOGICAL_SORT", "UNION_FIND", "BIT_MANIPULATION"),
        required_patterns=("Topological Sort", "Union-Find", "Bit Manipulation"),
    ),
})


def get_checkpoint_problem(tier: int) -> Optional[CheckpointProblem]:
    """Return the checkpoint problem closing a tier, if any."""
    return CHECKPOINTS_DB.get(tier)
