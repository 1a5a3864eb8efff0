"""Pull request data models for GitHub API."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from github_v3.models._base import GitHubModel
from github_v3.models.issue import Label, Milestone
from github_v3.models.repository import Repository
from github_v3.models.user import User


class PullBranch(GitHubModel):
    """The base or head side of a pull request."""

    label: str = ""
    ref: str = ""
    sha: str = ""
    user: User = Field(default_factory=User)
    repo: Repository = Field(default_factory=Repository)


class Pull(GitHubModel):
    """A GitHub pull request."""

    id: int = 0
    number: int = 0
    state: str = ""
    draft: bool = False
    locked: bool = False
    title: str = ""
    body: str = ""
    user: User = Field(default_factory=User)
    labels: list[Label] = Field(default_factory=list)
    milestone: Milestone | None = None
    base: PullBranch = Field(default_factory=PullBranch)
    head: PullBranch = Field(default_factory=PullBranch)
    merged: bool = False
    mergeable: bool | None = None
    rebaseable: bool | None = None
    merged_by: User | None = None
    merge_commit_sha: str = ""
    url: str = ""
    html_url: str = ""
    diff_url: str = ""
    patch_url: str = ""
    issue_url: str = ""
    commits_url: str = ""
    statuses_url: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None
    merged_at: datetime | None = None
