"""
System smoke test: full API flow in-process.
Verifies health, auth, tree statuses, mastery, checkpoint eligibility and judging.
Progress store and judge are swapped through dependency overrides.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from skilltree.api.deps import get_judge_client, get_progress_tracker
from skilltree.errors import JudgeUnavailableError
from skilltree.main import app

AUTH = {"Authorization": "Bearer learner-1"}

TIER_ZERO_PROBLEMS = {
    "ARRAY_SCAN": ["run_sum", "prod_except", "max_subarray"],
    "RECURSION_ROOTS": ["fib_num", "pow_x_n", "gen_parens"],
}


@pytest_asyncio.fixture
async def client(tracker, fake_judge):
    """Async client bound to a fresh tracker and an always-advancing judge."""
    app.dependency_overrides[get_progress_tracker] = lambda: tracker
    app.dependency_overrides[get_judge_client] = lambda: fake_judge
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


async def _solve_tier_zero(client: AsyncClient):
    for topic_key, problem_ids in TIER_ZERO_PROBLEMS.items():
        for problem_id in problem_ids:
            r = await client.post(
                f"/api/v1/mastery/{topic_key}/solved",
                json={"problem_id": problem_id},
                headers=AUTH,
            )
            assert r.status_code == 200, r.text


def _statuses(tree: dict) -> dict:
    return {t["key"]: t["status"] for t in tree["topics"]}


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    """Health endpoint responds."""
    r = await client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert "version" in data
    assert "X-Request-ID" in r.headers


@pytest.mark.asyncio
async def test_requires_bearer(client: AsyncClient):
    r = await client.get("/api/v1/tree")
    assert r.status_code == 401
    assert r.json()["detail"] == "Not authenticated"


@pytest.mark.asyncio
async def test_static_topics(client: AsyncClient):
    """Topic listing needs no identity."""
    r = await client.get("/api/v1/tree/topics")
    assert r.status_code == 200
    tiers = r.json()["tiers"]
    assert [t["tier"] for t in tiers] == list(range(8))
    assert sum(len(t["topics"]) for t in tiers) == 22


@pytest.mark.asyncio
async def test_fresh_user_tree(client: AsyncClient):
    """Only tier 0 is open; every higher topic waits on its checkpoint."""
    r = await client.get("/api/v1/tree", headers=AUTH)
    assert r.status_code == 200
    data = r.json()
    assert data["unlocked_tiers"] == [0]
    statuses = _statuses(data)
    assert statuses["ARRAY_SCAN"] == "UNLOCKED"
    assert statuses["RECURSION_ROOTS"] == "UNLOCKED"
    assert statuses["SORTING"] == "CHECKPOINT_BLOCKED"
    assert statuses["DYNAMIC_PROGRAMMING"] == "CHECKPOINT_BLOCKED"


@pytest.mark.asyncio
async def test_single_topic_status(client: AsyncClient):
    r = await client.get("/api/v1/tree/ARRAY_SCAN", headers=AUTH)
    assert r.status_code == 200
    assert r.json()["status"] == "UNLOCKED"

    r = await client.get("/api/v1/tree/NOT_A_TOPIC", headers=AUTH)
    assert r.status_code == 200
    assert r.json()["status"] == "LOCKED"
    assert r.json()["tier"] == -1


@pytest.mark.asyncio
async def test_record_solved_problem(client: AsyncClient):
    r = await client.post("/api/v1/mastery/ARRAY_SCAN/solved", json={"problem_id": "run_sum"}, headers=AUTH)
    assert r.status_code == 200
    assert r.json() == {"confidence": 33, "solved": ["run_sum"]}

    r = await client.get("/api/v1/mastery", headers=AUTH)
    assert r.json()["mastery"]["ARRAY_SCAN"]["confidence"] == 33

    r = await client.get("/api/v1/tree/ARRAY_SCAN", headers=AUTH)
    assert r.json()["status"] == "IN_PROGRESS"


@pytest.mark.asyncio
async def test_solved_errors(client: AsyncClient):
    r = await client.post("/api/v1/mastery/NOPE/solved", json={"problem_id": "run_sum"}, headers=AUTH)
    assert r.status_code == 404
    r = await client.post("/api/v1/mastery/ARRAY_SCAN/solved", json={"problem_id": "fib_num"}, headers=AUTH)
    assert r.status_code == 404
    r = await client.post("/api/v1/mastery/ARRAY_SCAN/solved", json={"problem_id": ""}, headers=AUTH)
    assert r.status_code == 422
    assert r.json()["detail"] == "Validation error"


@pytest.mark.asyncio
async def test_checkpoint_views(client: AsyncClient):
    r = await client.get("/api/v1/checkpoints", headers=AUTH)
    assert r.status_code == 200
    checkpoints = r.json()["checkpoints"]
    assert [c["tier_number"] for c in checkpoints] == list(range(7))
    assert not any(c["can_attempt"] for c in checkpoints)

    r = await client.get("/api/v1/checkpoints/0", headers=AUTH)
    assert r.status_code == 200
    data = r.json()
    assert data["exists"] is True
    assert data["passed"] is False
    assert data["title"] == "Subsets Generator"

    r = await client.get("/api/v1/checkpoints/7", headers=AUTH)
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_attempt_rejections(client: AsyncClient):
    r = await client.post("/api/v1/checkpoints/attempt", json={"tier_number": 9, "code": "x"}, headers=AUTH)
    assert r.status_code == 400
    r = await client.post("/api/v1/checkpoints/attempt", json={"tier_number": 0, "code": ""}, headers=AUTH)
    assert r.status_code == 400
    r = await client.post("/api/v1/checkpoints/attempt", json={"tier_number": 0, "code": "x"}, headers=AUTH)
    assert r.status_code == 403


@pytest.mark.asyncio
async def test_full_flow(client: AsyncClient, fake_judge):
    """Master tier 0 -> pass checkpoint 0 -> tier 1 opens, tier 2 stays gated."""
    await _solve_tier_zero(client)

    r = await client.get("/api/v1/checkpoints", headers=AUTH)
    assert r.json()["checkpoints"][0]["can_attempt"] is True

    r = await client.post(
        "/api/v1/checkpoints/attempt",
        json={"tier_number": 0, "code": "def subsets(nums): ..."},
        headers=AUTH,
    )
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["verdict"] == "ADVANCE"
    assert data["is_passed"] is True
    assert data["attempts"] == 1
    assert fake_judge.calls[0]["tier"] == 0

    r = await client.get("/api/v1/tree", headers=AUTH)
    tree = r.json()
    assert tree["unlocked_tiers"] == [0, 1]
    statuses = _statuses(tree)
    assert statuses["ARRAY_SCAN"] == "MASTERED"
    assert statuses["SORTING"] == "UNLOCKED"
    assert statuses["TWO_POINTERS"] == "CHECKPOINT_BLOCKED"

    r = await client.post("/api/v1/checkpoints/attempt", json={"tier_number": 1, "code": "x"}, headers=AUTH)
    assert r.status_code == 403


@pytest.mark.asyncio
async def test_judge_unavailable(client: AsyncClient, make_judge):
    await _solve_tier_zero(client)
    app.dependency_overrides[get_judge_client] = lambda: make_judge(error=JudgeUnavailableError("down"))

    r = await client.post(
        "/api/v1/checkpoints/attempt",
        json={"tier_number": 0, "code": "def subsets(nums): ..."},
        headers={**AUTH, "X-Request-ID": "req-503"},
    )
    assert r.status_code == 503
    assert "try again" in r.json()["detail"]
    assert r.headers["X-Request-ID"] == "req-503"


@pytest.mark.asyncio
async def test_solve_problem_listed_by_topics(client: AsyncClient):
    """Problem ids served with the tree are the ones the solve endpoint accepts."""
    r = await client.get("/api/v1/tree/topics")
    topics = {t["key"]: t for tier in r.json()["tiers"] for t in tier["topics"]}
    problems = topics["ARRAY_SCAN"]["problems"]
    assert len(problems) == 3
    assert problems[0]["id"] == "run_sum"

    r = await client.post(
        "/api/v1/mastery/ARRAY_SCAN/solved",
        json={"problem_id": problems[0]["id"]},
        headers=AUTH,
    )
    assert r.status_code == 200
    assert r.json()["confidence"] == 33


@pytest.mark.asyncio
async def test_topic_problems_endpoint(client: AsyncClient):
    r = await client.get("/api/v1/tree/topics/HASHING/problems")
    assert r.status_code == 200
    assert [p["id"] for p in r.json()] == ["contains_dup", "group_anagrams", "longest_consec"]

    for problem in r.json():
        r2 = await client.post(
            "/api/v1/mastery/HASHING/solved",
            json={"problem_id": problem["id"]},
            headers=AUTH,
        )
        assert r2.status_code == 200
    assert r2.json()["confidence"] == 100

    r = await client.get("/api/v1/tree/topics/NOPE/problems")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_checkpoint_description_served(client: AsyncClient):
    r = await client.get("/api/v1/checkpoints/0", headers=AUTH)
    assert r.json()["description"].startswith("Generate all subsets")


@pytest.mark.asyncio
async def test_bad_request_id_replaced(client: AsyncClient):
    r = await client.get("/health", headers={"X-Request-ID": "bad id with spaces"})
    assert r.headers["X-Request-ID"] != "bad id with spaces"
    assert len(r.headers["X-Request-ID"]) == 36
