"""User data models for GitHub API."""

from __future__ import annotations

from datetime import datetime

from github_v3.models._base import GitHubModel


class User(GitHubModel):
    """A GitHub user (or organization) account."""

    id: int = 0
    login: str = ""
    type: str = ""
    email: str = ""
    name: str = ""
    url: str = ""
    html_url: str = ""
    organizations_url: str = ""
    avatar_url: str = ""
    gravatar_id: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
