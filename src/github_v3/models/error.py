"""Error response models for GitHub API."""

from __future__ import annotations

from github_v3.models._base import GitHubModel


class ErrorBody(GitHubModel):
    """Error payload returned by the GitHub API on client errors."""

    message: str = ""
    documentation_url: str = ""
