"""
Domain errors raised by curriculum, progress and checkpoint services.

Routes translate these into HTTP responses. The gating engine itself never
raises: unknown keys and missing records resolve to safe defaults.
"""


class SkillTreeError(ValueError):
    """Base class for skill tree domain errors."""


class GraphValidationError(SkillTreeError):
    """The static topic graph violates a structural invariant."""


class UnknownTopicError(SkillTreeError):
    """Topic key is not part of the skill tree."""

    def __init__(self, topic_key: str):
        self.topic_key = topic_key
        super().__init__(f"Unknown topic: {topic_key}")


class UnknownProblemError(SkillTreeError):
    """Problem id does not belong to the topic's calibration set."""

    def __init__(self, topic_key: str, problem_id: str):
        self.topic_key = topic_key
        self.problem_id = problem_id
        super().__init__(f"Problem {problem_id!r} is not part of topic {topic_key}")


class InvalidCheckpointRequestError(SkillTreeError):
    """Checkpoint submission is malformed (bad tier, empty code)."""


class CheckpointNotEligibleError(SkillTreeError):
    """Not every topic of the tier has reached the unlock threshold."""

    def __init__(self, tier: int):
        self.tier = tier
        super().__init__(f"Cannot attempt checkpoint: complete all tier {tier} topics first")


class JudgeUnavailableError(SkillTreeError):
    """The external checkpoint judge could not be reached or answered garbage."""
