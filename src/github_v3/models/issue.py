"""Issue, label, milestone, and issue event data models for GitHub API."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from github_v3.models._base import GitHubModel
from github_v3.models.user import User


class Label(GitHubModel):
    id: int = 0
    name: str = ""
    description: str = ""
    color: str = ""
    default: bool = False
    url: str = ""


class Milestone(GitHubModel):
    id: int = 0
    number: int = 0
    state: str = ""
    title: str = ""
    description: str = ""
    creator: User = Field(default_factory=User)
    open_issues: int = 0
    closed_issues: int = 0
    due_on: datetime | None = None
    url: str = ""
    html_url: str = ""
    labels_url: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None


class PullURLs(GitHubModel):
    """Links attached to an issue that is really a pull request."""

    url: str = ""
    html_url: str = ""
    diff_url: str = ""
    patch_url: str = ""


class Issue(GitHubModel):
    """A GitHub issue. Pull requests are issues too; see `pull_request`."""

    id: int = 0
    number: int = 0
    state: str = ""
    locked: bool = False
    title: str = ""
    body: str = ""
    user: User = Field(default_factory=User)
    labels: list[Label] = Field(default_factory=list)
    milestone: Milestone | None = None
    url: str = ""
    html_url: str = ""
    labels_url: str = ""
    pull_request: PullURLs | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None


class Event(GitHubModel):
    """An issue event (closed, merged, labeled, ...)."""

    id: int = 0
    event: str = ""
    commit_id: str = ""
    actor: User = Field(default_factory=User)
    url: str = ""
    commit_url: str = ""
    created_at: datetime | None = None
