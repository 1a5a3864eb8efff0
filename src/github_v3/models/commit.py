"""Commit, branch, and tag data models for GitHub API."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from github_v3.models._base import GitHubModel
from github_v3.models.user import User


class Hash(GitHubModel):
    """A reference to a git object."""

    sha: str = ""
    url: str = ""


class Signature(GitHubModel):
    """Author or committer identity recorded in a git commit."""

    name: str = ""
    email: str = ""
    date: datetime | None = None


class RawCommit(GitHubModel):
    """The git-level commit object."""

    message: str = ""
    author: Signature = Field(default_factory=Signature)
    committer: Signature = Field(default_factory=Signature)
    tree: Hash = Field(default_factory=Hash)
    url: str = ""


class Commit(GitHubModel):
    """A repository commit with its GitHub accounts."""

    sha: str = ""
    commit: RawCommit = Field(default_factory=RawCommit)
    author: User = Field(default_factory=User)
    committer: User = Field(default_factory=User)
    parents: list[Hash] = Field(default_factory=list)
    url: str = ""
    html_url: str = ""


class Branch(GitHubModel):
    name: str = ""
    protected: bool = False
    commit: Commit = Field(default_factory=Commit)


class Tag(GitHubModel):
    name: str = ""
    commit: Hash = Field(default_factory=Hash)
