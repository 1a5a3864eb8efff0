"""Users endpoint tests - mock ONLY at HTTP boundary."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
import respx
from httpx import Response

from github_v3.client import GitHubClient
from github_v3.exceptions import AuthError, NotFoundError
from github_v3.request import RequestContext
from tests.payloads import API_URL, RATE_HEADERS, TEST_TOKEN, USER


@pytest.mark.asyncio
@respx.mock
async def test_user_returns_authenticated_user() -> None:
    route = respx.get(f"{API_URL}/user").mock(
        return_value=Response(200, json=USER, headers=RATE_HEADERS)
    )

    async with GitHubClient(TEST_TOKEN) as gh:
        user, response = await gh.users.user(RequestContext.background())

    assert route.calls[0].request.headers["Authorization"] == f"token {TEST_TOKEN}"
    assert user.id == 1
    assert user.login == "octocat"
    assert user.name == "The Octocat"
    assert user.email == "octocat@github.com"
    assert user.html_url == "https://github.com/octocat"
    assert user.created_at == datetime(2011, 1, 25, 18, 44, 36, tzinfo=UTC)
    assert response.rate.remaining == 4999


@pytest.mark.asyncio
@respx.mock
async def test_user_requires_authentication() -> None:
    respx.get(f"{API_URL}/user").mock(
        return_value=Response(401, json={"message": "Requires authentication"})
    )

    async with GitHubClient() as gh:
        with pytest.raises(AuthError) as exc_info:
            await gh.users.user(RequestContext.background())

    assert "GET /user: 401 Requires authentication" in str(exc_info.value)


@pytest.mark.asyncio
@respx.mock
async def test_get_user_by_login() -> None:
    respx.get(f"{API_URL}/users/octocat").mock(return_value=Response(200, json=USER))

    async with GitHubClient() as gh:
        user, _ = await gh.users.get(RequestContext.background(), "octocat")

    assert user.login == "octocat"
    assert user.type == "User"


@pytest.mark.asyncio
@respx.mock
async def test_get_unknown_user() -> None:
    respx.get(f"{API_URL}/users/ghost").mock(
        return_value=Response(404, json={"message": "Not Found"})
    )

    async with GitHubClient() as gh:
        with pytest.raises(NotFoundError):
            await gh.users.get(RequestContext.background(), "ghost")
