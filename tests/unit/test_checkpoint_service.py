"""Unit tests for CheckpointAttemptService: validation, eligibility and judging."""

import pytest

from skilltree.engines.progress.checkpoint_service import CheckpointAttemptService
from skilltree.errors import (
    CheckpointNotEligibleError,
    InvalidCheckpointRequestError,
    JudgeUnavailableError,
)


async def _master_tier_zero(tracker, user_id="u1"):
    for problem_id in ("run_sum", "prod_except", "max_subarray"):
        await tracker.record_solved_problem(user_id, "ARRAY_SCAN", problem_id)
    for problem_id in ("fib_num", "pow_x_n", "gen_parens"):
        await tracker.record_solved_problem(user_id, "RECURSION_ROOTS", problem_id)


class TestCheckpointAttempt:
    """Checkpoint submission flow."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("tier", [-1, 7, 12])
    async def test_invalid_tier(self, tracker, fake_judge, tier):
        service = CheckpointAttemptService(tracker, fake_judge)
        with pytest.raises(InvalidCheckpointRequestError, match="Invalid tier"):
            await service.attempt("u1", tier, "print(1)")
        assert fake_judge.calls == []

    @pytest.mark.asyncio
    async def test_blank_code(self, tracker, fake_judge):
        service = CheckpointAttemptService(tracker, fake_judge)
        with pytest.raises(InvalidCheckpointRequestError, match="Code is required"):
            await service.attempt("u1", 0, "   ")

    @pytest.mark.asyncio
    async def test_not_eligible_does_not_count_attempt(self, tracker, fake_judge):
        """Tier topics below 70% reject the attempt before it is recorded."""
        await tracker.record_solved_problem("u1", "ARRAY_SCAN", "run_sum")
        service = CheckpointAttemptService(tracker, fake_judge)
        with pytest.raises(CheckpointNotEligibleError):
            await service.attempt("u1", 0, "def subsets(): ...")
        records = await tracker.get_checkpoints("u1")
        assert records[0].attempts == 0
        assert fake_judge.calls == []

    @pytest.mark.asyncio
    async def test_advance_marks_passed(self, tracker, fake_judge):
        await _master_tier_zero(tracker)
        service = CheckpointAttemptService(tracker, fake_judge)
        result = await service.attempt("u1", 0, "def subsets(): ...")
        assert result.verdict == "ADVANCE"
        assert result.is_passed is True
        assert result.attempts == 1
        assert fake_judge.calls[0]["required_patterns"] == ["Array Iteration", "Recursive Backtracking"]
        records = await tracker.get_checkpoints("u1")
        assert records[0].is_passed is True

    @pytest.mark.asyncio
    async def test_repeat_keeps_gate_closed(self, tracker, make_judge):
        await _master_tier_zero(tracker)
        judge = make_judge(verdict="REPEAT")
        service = CheckpointAttemptService(tracker, judge)
        result = await service.attempt("u1", 0, "def subsets(): ...")
        assert result.verdict == "REPEAT"
        assert result.is_passed is False
        assert result.missing_patterns == ["Array Iteration", "Recursive Backtracking"]
        result = await service.attempt("u1", 0, "def subsets(): ...")
        assert result.attempts == 2

    @pytest.mark.asyncio
    async def test_judge_down_still_counts_attempt(self, tracker, make_judge):
        await _master_tier_zero(tracker)
        judge = make_judge(error=JudgeUnavailableError("down"))
        service = CheckpointAttemptService(tracker, judge)
        with pytest.raises(JudgeUnavailableError):
            await service.attempt("u1", 0, "def subsets(): ...")
        records = await tracker.get_checkpoints("u1")
        assert records[0].attempts == 1
        assert records[0].is_passed is False
