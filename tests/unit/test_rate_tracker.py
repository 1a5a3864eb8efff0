"""Unit tests for rate group classification and the rate tracker."""

from __future__ import annotations

import time

import pytest

from github_v3.rate_tracker import RateGroup, RateTracker, is_exhausted
from github_v3.response import Rate


class TestRateGroup:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/search/repositories", RateGroup.SEARCH),
            ("/search", RateGroup.SEARCH),
            ("/graphql", RateGroup.GRAPHQL),
            ("/repos/octocat/Hello-World", RateGroup.CORE),
            ("/user", RateGroup.CORE),
            ("/", RateGroup.CORE),
        ],
    )
    def test_for_path(self, path: str, expected: RateGroup) -> None:
        assert RateGroup.for_path(path) is expected

    def test_for_path_ignores_enterprise_prefix(self) -> None:
        assert RateGroup.for_path("/api/v3/search/code", "/api/v3/") is RateGroup.SEARCH
        assert RateGroup.for_path("/api/v3/user", "/api/v3/") is RateGroup.CORE


class TestIsExhausted:
    def test_remaining_calls(self) -> None:
        assert not is_exhausted(Rate(limit=60, remaining=1, reset=200), now=100)

    def test_no_calls_before_reset(self) -> None:
        assert is_exhausted(Rate(limit=60, remaining=0, reset=200), now=100)

    def test_no_calls_after_reset(self) -> None:
        assert not is_exhausted(Rate(limit=60, remaining=0, reset=200), now=200)

    def test_zero_value_rate_is_not_exhausted(self) -> None:
        assert not is_exhausted(Rate(), now=100)


class TestRateTracker:
    @pytest.mark.asyncio
    async def test_check_unknown_group(self) -> None:
        tracker = RateTracker()
        assert await tracker.check(RateGroup.CORE) is None

    @pytest.mark.asyncio
    async def test_update_replaces_rate(self) -> None:
        tracker = RateTracker()
        first = Rate(limit=60, used=1, remaining=59, reset=1)
        second = Rate(limit=60, used=2, remaining=58, reset=1)

        await tracker.update(RateGroup.CORE, first)
        await tracker.update(RateGroup.CORE, second)

        assert await tracker.check(RateGroup.CORE) == second
        assert await tracker.check(RateGroup.SEARCH) is None

    @pytest.mark.asyncio
    async def test_blocked_only_when_exhausted_and_not_reset(self) -> None:
        tracker = RateTracker()
        future = int(time.time()) + 3600
        exhausted = Rate(limit=30, used=30, remaining=0, reset=future)

        await tracker.update(RateGroup.SEARCH, exhausted)
        await tracker.update(RateGroup.CORE, Rate(limit=60, remaining=0, reset=1))

        assert await tracker.blocked(RateGroup.SEARCH) == exhausted
        assert await tracker.blocked(RateGroup.CORE) is None
        assert await tracker.blocked(RateGroup.GRAPHQL) is None
