"""
Checkpoint judge client - thin wrapper around the external AI judge.

The judge decides whether submitted code implements every pattern a
checkpoint requires. Its reasoning is opaque; this module only ships the
request and normalizes the answer into a JudgeVerdict.

Expected response body:
    {"verdict": "ADVANCE" | "REPEAT", "feedback": "...",
     "patterns_found": [...], "missing_patterns": [...]}
"""

import asyncio
from typing import Any, List, Optional, Sequence

import httpx
from pydantic import BaseModel

from skilltree.errors import JudgeUnavailableError
from skilltree.logging_config import get_logger

logger = get_logger(__name__)

VERDICT_ADVANCE = "ADVANCE"
VERDICT_REPEAT = "REPEAT"
VERDICT_ERROR = "ERROR"

MAX_RETRIES = 3
RETRY_BACKOFF = (1.0, 2.0, 4.0)


class JudgeVerdict(BaseModel):
    """Normalized judge answer."""

    verdict: str
    feedback: str = ""
    patterns_found: List[str] = []
    missing_patterns: List[str] = []

    @property
    def advanced(self) -> bool:
        return self.verdict == VERDICT_ADVANCE


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, str)]


def parse_verdict(data: Any) -> JudgeVerdict:
    """Turn a judge payload into a JudgeVerdict; anything unrecognized becomes ERROR."""
    if not isinstance(data, dict):
        return JudgeVerdict(verdict=VERDICT_ERROR, feedback="Judge returned an unreadable response.")
    verdict = data.get("verdict")
    if verdict not in (VERDICT_ADVANCE, VERDICT_REPEAT):
        verdict = VERDICT_ERROR
    feedback = data.get("feedback")
    return JudgeVerdict(
        verdict=verdict,
        feedback=feedback if isinstance(feedback, str) else "",
        patterns_found=_string_list(data.get("patterns_found")),
        missing_patterns=_string_list(data.get("missing_patterns")),
    )


class HttpJudgeClient:
    """
    Posts checkpoint submissions to the judge service.

    Timeouts, connection errors and 5xx answers are retried with backoff;
    when retries run out, or the judge URL is not configured, the call
    raises JudgeUnavailableError so the caller can ask the user to try again.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        retry_backoff: Sequence[float] = RETRY_BACKOFF,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._retry_backoff = tuple(retry_backoff)

    async def _post_with_retry(self, client: httpx.AsyncClient, url: str, payload: dict) -> httpx.Response:
        last_exc: Optional[Exception] = None
        for attempt in range(MAX_RETRIES):
            delay = self._retry_backoff[min(attempt, len(self._retry_backoff) - 1)]
            try:
                response = await client.post(url, json=payload)
                if response.status_code >= 500 and attempt < MAX_RETRIES - 1:
                    await asyncio.sleep(delay)
                    continue
                return response
            except (httpx.TimeoutException, httpx.ConnectError) as e:
                last_exc = e
                if attempt < MAX_RETRIES - 1:
                    await asyncio.sleep(delay)
        raise JudgeUnavailableError("Checkpoint judge did not respond") from last_exc

    async def judge_checkpoint(
        self,
        code: str,
        tier: int,
        required_patterns: Sequence[str],
        description: str,
    ) -> JudgeVerdict:
        """Ask the judge whether code implements every required pattern."""
        if not self.base_url:
            raise JudgeUnavailableError("Checkpoint judge is not configured")

        payload = {
            "code": code,
            "tier": tier,
            "required_patterns": list(required_patterns),
            "description": description,
        }
        url = f"{self.base_url}/checkpoint"
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                response = await self._post_with_retry(client, url, payload)
        except httpx.HTTPError as e:
            logger.warning("Judge request failed for tier %s: %s", tier, e)
            raise JudgeUnavailableError("Checkpoint judge request failed") from e

        if response.status_code >= 400:
            logger.warning("Judge answered %s for tier %s", response.status_code, tier)
            raise JudgeUnavailableError(f"Checkpoint judge answered {response.status_code}")

        try:
            data = response.json()
        except ValueError:
            logger.warning("Judge returned non-JSON body for tier %s", tier)
            data = None
        return parse_verdict(data)
