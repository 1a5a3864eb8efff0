"""Repository data models for GitHub API."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import Field

from github_v3.models._base import GitHubModel
from github_v3.models.user import User


class Permission(str, Enum):
    """Repository permission level of a collaborator."""

    NONE = "none"
    READ = "read"
    TRIAGE = "triage"
    WRITE = "write"
    MAINTAIN = "maintain"
    ADMIN = "admin"


class Repository(GitHubModel):
    """A GitHub repository."""

    id: int = 0
    name: str = ""
    full_name: str = ""
    description: str = ""
    topics: list[str] = Field(default_factory=list)
    private: bool = False
    fork: bool = False
    archived: bool = False
    disabled: bool = False
    default_branch: str = ""
    owner: User = Field(default_factory=User)
    url: str = ""
    html_url: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    pushed_at: datetime | None = None


class PermissionResponse(GitHubModel):
    """Response of the collaborator permission endpoint."""

    permission: Permission = Permission.NONE
    user: User = Field(default_factory=User)
