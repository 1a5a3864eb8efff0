"""
GitHub v3.

Typed async client for the GitHub REST API v3.
"""

__version__ = "0.1.0"

from github_v3._services import IssuesParams, PullsParams, RepoService, UsersService
from github_v3.client import GitHubClient
from github_v3.config import GitHubConfig
from github_v3.exceptions import (
    AuthError,
    BodyEncodeError,
    ContextError,
    DecodeError,
    GitHubAPIError,
    GitHubError,
    InvalidURLError,
    MissingScopeError,
    NotFoundError,
    RateLimitAbuseError,
    RateLimitError,
    ResponseError,
)

# Configure structlog once at import time (quiet by default).
from github_v3.logging import configure_structlog
from github_v3.request import JSONBody, RawBody, RequestContext
from github_v3.response import Pages, Rate, Response
from github_v3.scopes import Scope

configure_structlog()

__all__ = [
    "AuthError",
    "BodyEncodeError",
    "ContextError",
    "DecodeError",
    "GitHubAPIError",
    "GitHubClient",
    "GitHubConfig",
    "GitHubError",
    "InvalidURLError",
    "IssuesParams",
    "JSONBody",
    "MissingScopeError",
    "NotFoundError",
    "Pages",
    "PullsParams",
    "Rate",
    "RateLimitAbuseError",
    "RateLimitError",
    "RawBody",
    "RepoService",
    "RequestContext",
    "Response",
    "ResponseError",
    "Scope",
    "UsersService",
    "__version__",
]
