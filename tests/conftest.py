"""
Shared test fixtures.

PHILOSOPHY: Use REAL objects wherever possible. Only mock at system boundaries.
- Real Pydantic models (not dicts pretending to be models)
- Real GitHubClient instances
- respx ONLY for HTTP boundary
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from github_v3.client import GitHubClient
from github_v3.request import RequestContext
from tests.payloads import TEST_TOKEN

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


@pytest.fixture(autouse=True)
def _isolate_github_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's real GITHUB_* settings out of the tests."""
    for name in (
        "GITHUB_TOKEN",
        "GITHUB_API_URL",
        "GITHUB_UPLOAD_URL",
        "GITHUB_DOWNLOAD_URL",
        "GITHUB_TIMEOUT",
        "GITHUB_V3_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def ctx() -> RequestContext:
    return RequestContext.background()


@pytest.fixture
async def gh() -> AsyncGenerator[GitHubClient, None]:
    """Authenticated client against the public GitHub endpoints."""
    async with GitHubClient(TEST_TOKEN) as client:
        yield client
