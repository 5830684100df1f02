"""
Pytest fixtures for skill tree tests.
"""

from types import MappingProxyType

import pytest

from skilltree.ai.judge_client import JudgeVerdict
from skilltree.curriculum.dag import Topic
from skilltree.engines.progress.progress_tracker import ProgressTracker


class FakeJudge:
    """Judge stand-in that answers with a fixed verdict and records calls."""

    def __init__(self, verdict: str = "ADVANCE", error: Exception = None):
        self.verdict = verdict
        self.error = error
        self.calls = []

    async def judge_checkpoint(self, code, tier, required_patterns, description):
        self.calls.append({
            "code": code,
            "tier": tier,
            "required_patterns": list(required_patterns),
            "description": description,
        })
        if self.error is not None:
            raise self.error
        advanced = self.verdict == "ADVANCE"
        return JudgeVerdict(
            verdict=self.verdict,
            feedback="judged",
            patterns_found=list(required_patterns) if advanced else [],
            missing_patterns=[] if advanced else list(required_patterns),
        )


@pytest.fixture
def xy_graph():
    """Two-topic graph: X (tier 0) -> Y (tier 1)."""
    return MappingProxyType({
        "X": Topic(key="X", label="X", tier=0),
        "Y": Topic(key="Y", label="Y", tier=1, prerequisites=("X",)),
    })


@pytest.fixture
def tracker() -> ProgressTracker:
    """Fresh in-memory progress store."""
    return ProgressTracker()


@pytest.fixture
def fake_judge() -> FakeJudge:
    """Judge that always advances."""
    return FakeJudge()


@pytest.fixture
def make_judge():
    """Factory for judges with a chosen verdict or error."""
    return FakeJudge
