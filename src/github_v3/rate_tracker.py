"""
Rate limit bookkeeping for the GitHub API.

GitHub reports quota per rate group in response headers. The tracker keeps the last
observed quota for each group so a request that is certain to be rejected can be
failed locally instead of spending a network round trip.
"""

from __future__ import annotations

import asyncio
import time
from enum import Enum

import structlog

from github_v3.response import Rate

logger = structlog.get_logger()


class RateGroup(str, Enum):
    """GitHub API rate limit groups."""

    CORE = "core"
    SEARCH = "search"
    GRAPHQL = "graphql"

    @classmethod
    def for_path(cls, path: str, prefix: str = "") -> RateGroup:
        """Classify a request path, ignoring the API base path (e.g. `/api/v3`)."""
        prefix = prefix.rstrip("/")
        if prefix and path.startswith(prefix):
            path = path[len(prefix) :]

        if path.startswith("/search"):
            return cls.SEARCH
        if path.startswith("/graphql"):
            return cls.GRAPHQL
        return cls.CORE


def is_exhausted(rate: Rate, now: float | None = None) -> bool:
    """Return True when `rate` has no calls left and its window has not reset yet."""
    if now is None:
        now = time.time()
    return rate.remaining == 0 and now < rate.reset


class RateTracker:
    """
    Last known rate limit per group, shared by all callers of one client.

    The lock is only held for a single read or write, never across a network call.
    """

    def __init__(self) -> None:
        self._rates: dict[RateGroup, Rate] = {}
        self._lock = asyncio.Lock()

    async def check(self, group: RateGroup) -> Rate | None:
        """Return the last observed rate for `group`, if any."""
        async with self._lock:
            return self._rates.get(group)

    async def update(self, group: RateGroup, rate: Rate) -> None:
        """Replace the stored rate for `group`."""
        async with self._lock:
            self._rates[group] = rate

    async def blocked(self, group: RateGroup) -> Rate | None:
        """Return the stored rate when it rules out any call in `group`, else None."""
        rate = await self.check(group)
        if rate is not None and is_exhausted(rate):
            logger.warning(
                "Rate limit exhausted",
                group=group.value,
                limit=rate.limit,
                reset=rate.reset,
            )
            return rate
        return None
