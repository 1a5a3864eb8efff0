"""Endpoint services for GitHub API clients."""

from github_v3._services.repos import IssuesParams, PullsParams, RepoService
from github_v3._services.users import UsersService

__all__ = [
    "IssuesParams",
    "PullsParams",
    "RepoService",
    "UsersService",
]
