"""
Skill tree endpoints - static graph and per-user topic statuses.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from skilltree.api.deps import CurrentUserId, Tracker
from skilltree.curriculum.dag import DAG_STRUCTURE, Topic, get_topics_by_tier
from skilltree.curriculum.problems import Problem, get_problems
from skilltree.engines.gating import (
    is_tier_unlocked,
    mastery_for,
    resolve_all_statuses,
    resolve_status,
)
from skilltree.schemas.tree import (
    ProblemResponse,
    TierResponse,
    TopicResponse,
    TopicsByTierResponse,
    TopicStatusResponse,
    TreeResponse,
)

router = APIRouter()


def _problem_to_schema(problem: Problem) -> ProblemResponse:
    return ProblemResponse(
        id=problem.id,
        title=problem.title,
        difficulty=problem.difficulty,
        invariant=problem.invariant,
    )


def _topic_to_schema(topic: Topic) -> TopicResponse:
    return TopicResponse(
        key=topic.key,
        label=topic.label,
        tier=topic.tier,
        prerequisites=list(topic.prerequisites),
        description=topic.description,
        theory=topic.theory,
        youtube=topic.youtube,
        problem_count=topic.problem_count,
        problems=[_problem_to_schema(p) for p in get_problems(topic.key)],
    )


@router.get("/topics", response_model=TopicsByTierResponse)
async def list_topics():
    """Static skill tree grouped by tier."""
    tiers = get_topics_by_tier(DAG_STRUCTURE)
    return TopicsByTierResponse(
        tiers=[
            TierResponse(tier=tier, topics=[_topic_to_schema(t) for t in tiers[tier]])
            for tier in sorted(tiers)
        ]
    )


@router.get("/topics/{topic_key}/problems", response_model=List[ProblemResponse])
async def list_topic_problems(topic_key: str):
    """Calibration problems of a topic, in the order they are presented."""
    if topic_key not in DAG_STRUCTURE:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown topic: {topic_key}")
    return [_problem_to_schema(p) for p in get_problems(topic_key)]


@router.get("", response_model=TreeResponse)
async def get_tree(user_id: CurrentUserId, tracker: Tracker):
    """Status of every topic for the current user."""
    mastery = await tracker.get_mastery(user_id)
    checkpoints = await tracker.get_checkpoints(user_id)
    statuses = resolve_all_statuses(mastery, checkpoints)
    topics = []
    for key, topic_status in statuses.items():
        record = mastery_for(mastery, key)
        topics.append(
            TopicStatusResponse(
                key=key,
                tier=DAG_STRUCTURE[key].tier,
                status=topic_status.value,
                confidence=record.confidence,
                solved_problems=record.solved_problems,
            )
        )
    tiers = sorted({t.tier for t in DAG_STRUCTURE.values()})
    return TreeResponse(
        topics=topics,
        unlocked_tiers=[tier for tier in tiers if is_tier_unlocked(tier, checkpoints)],
    )


@router.get("/{topic_key}", response_model=TopicStatusResponse)
async def get_topic_status(topic_key: str, user_id: CurrentUserId, tracker: Tracker):
    """Status of a single topic. Unknown topics read as LOCKED."""
    mastery = await tracker.get_mastery(user_id)
    checkpoints = await tracker.get_checkpoints(user_id)
    record = mastery_for(mastery, topic_key)
    node = DAG_STRUCTURE.get(topic_key)
    return TopicStatusResponse(
        key=topic_key,
        tier=node.tier if node else -1,
        status=resolve_status(topic_key, mastery, checkpoints).value,
        confidence=record.confidence,
        solved_problems=record.solved_problems,
    )
