"""Pydantic models for GitHub API payloads."""

from github_v3.models.commit import Branch, Commit, Hash, RawCommit, Signature, Tag
from github_v3.models.error import ErrorBody
from github_v3.models.issue import Event, Issue, Label, Milestone, PullURLs
from github_v3.models.pull import Pull, PullBranch
from github_v3.models.release import Release, ReleaseAsset, ReleaseParams
from github_v3.models.repository import Permission, PermissionResponse, Repository
from github_v3.models.user import User

__all__ = [
    "Branch",
    "Commit",
    "ErrorBody",
    "Event",
    "Hash",
    "Issue",
    "Label",
    "Milestone",
    "Permission",
    "PermissionResponse",
    "Pull",
    "PullBranch",
    "PullURLs",
    "RawCommit",
    "Release",
    "ReleaseAsset",
    "ReleaseParams",
    "Repository",
    "Signature",
    "Tag",
    "User",
]
