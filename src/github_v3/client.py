"""GitHub API client."""

from __future__ import annotations

import httpx
import structlog

from github_v3._base import ClientBase
from github_v3._services import RepoService, UsersService
from github_v3.config import GitHubConfig
from github_v3.exceptions import MissingScopeError
from github_v3.request import RequestContext
from github_v3.scopes import Scope, parse_scopes

logger = structlog.get_logger()

HEADER_SCOPES = "X-OAuth-Scopes"


class GitHubClient(ClientBase):
    """
    Async client for GitHub API v3.

    Use as an async context manager:

        async with GitHubClient(token) as gh:
            user, resp = await gh.users.get(RequestContext.background(), "octocat")
    """

    def __init__(
        self,
        access_token: str = "",
        *,
        config: GitHubConfig | None = None,
        _transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if config is None:
            config = GitHubConfig(access_token=access_token)
        super().__init__(config, _transport=_transport)
        self.users = UsersService(self)

    @classmethod
    def enterprise(
        cls,
        api_url: str,
        upload_url: str,
        download_url: str,
        access_token: str = "",
    ) -> GitHubClient:
        """Create a client for a GitHub Enterprise deployment.

        Raises:
            InvalidURLError: If any of the base URLs is not an absolute http(s) URL.
        """
        return cls(
            config=GitHubConfig(
                access_token=access_token,
                api_url=api_url,
                upload_url=upload_url,
                download_url=download_url,
            )
        )

    @classmethod
    def from_env(cls) -> GitHubClient:
        """Create a client from `GITHUB_*` environment variables (see `GitHubConfig`)."""
        return cls(config=GitHubConfig.from_env())

    def repo(self, owner: str, repo: str) -> RepoService:
        """Return a service for the endpoints of one repository."""
        return RepoService(self, owner, repo)

    async def ensure_scopes(self, ctx: RequestContext | None, *scopes: Scope | str) -> None:
        """Make sure the access token was granted every scope in `scopes`.

        Raises:
            MissingScopeError: For the first scope the token does not have.
        """
        request = self.new_request(ctx, "HEAD", "/user")
        _, response = await self.do(request)

        granted = parse_scopes(response.headers.get(HEADER_SCOPES))
        for scope in scopes:
            name = scope.value if isinstance(scope, Scope) else scope
            if name not in granted:
                logger.info("Access token is missing a scope", scope=name)
                raise MissingScopeError(name)
