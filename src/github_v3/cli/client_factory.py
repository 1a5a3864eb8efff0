"""Factory for constructing GitHub API clients in CLI commands.

Commands build their client here so tests can patch a single function.
"""

from dataclasses import replace

from github_v3.client import GitHubClient
from github_v3.config import GitHubConfig


def github_client(*, timeout: float | None = None) -> GitHubClient:
    """Create a GitHubClient from `GITHUB_*` environment variables.

    Args:
        timeout: Override `GITHUB_TIMEOUT` (seconds).

    Raises:
        ValueError: If `GITHUB_TIMEOUT` is not a number.
        InvalidURLError: If a configured base URL is not an absolute http(s) URL.

    Example:
        ```python
        async with github_client() as gh:
            user, _ = await gh.users.user(RequestContext.background())
        ```
    """
    config = GitHubConfig.from_env()
    if timeout is not None:
        config = replace(config, timeout_seconds=timeout)
    return GitHubClient(config=config)
