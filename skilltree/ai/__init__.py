"""
External AI collaborators - checkpoint judge.
"""

from skilltree.ai.judge_client import HttpJudgeClient, JudgeVerdict, parse_verdict

__all__ = [
    "HttpJudgeClient",
    "JudgeVerdict",
    "parse_verdict",
]
