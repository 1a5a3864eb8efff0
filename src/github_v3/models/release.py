"""Release data models for GitHub API."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from github_v3.models._base import GitHubModel
from github_v3.models.user import User


class ReleaseParams(GitHubModel):
    """Request body for creating or updating a release."""

    name: str = ""
    tag_name: str = ""
    target_commitish: str = ""
    draft: bool = False
    prerelease: bool = False
    body: str = ""


class ReleaseAsset(GitHubModel):
    id: int = 0
    name: str = ""
    label: str = ""
    state: str = ""
    content_type: str = ""
    size: int = 0
    download_count: int = 0
    url: str = ""
    browser_download_url: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    uploader: User = Field(default_factory=User)


class Release(GitHubModel):
    """A GitHub release."""

    id: int = 0
    name: str = ""
    tag_name: str = ""
    target_commitish: str = ""
    draft: bool = False
    prerelease: bool = False
    body: str = ""
    url: str = ""
    html_url: str = ""
    assets_url: str = ""
    upload_url: str = ""
    tarball_url: str = ""
    zipball_url: str = ""
    created_at: datetime | None = None
    published_at: datetime | None = None
    author: User = Field(default_factory=User)
    assets: list[ReleaseAsset] = Field(default_factory=list)
