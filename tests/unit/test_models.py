"""Unit tests for GitHub payload models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from github_v3.models import Issue, PermissionResponse, Pull, Release, Repository, User
from github_v3.models.repository import Permission
from tests.payloads import ISSUES, PULL, RELEASE, REPOSITORY


def test_missing_fields_take_zero_values() -> None:
    user = User.model_validate({"login": "octocat"})

    assert user.id == 0
    assert user.name == ""
    assert user.created_at is None


def test_null_string_decodes_as_empty() -> None:
    user = User.model_validate({"login": "octocat", "name": None, "email": None})

    assert user.name == ""
    assert user.email == ""


def test_unknown_fields_are_ignored() -> None:
    repository = Repository.model_validate(REPOSITORY)

    assert not hasattr(repository, "visibility")


def test_models_are_frozen() -> None:
    user = User(login="octocat")

    with pytest.raises(ValidationError):
        user.login = "octodog"  # type: ignore[misc]


def test_issue_null_pull_request() -> None:
    issue = Issue.model_validate(ISSUES[1])

    assert issue.pull_request is None
    assert issue.milestone is not None
    assert issue.milestone.number == 1


def test_pull_branches() -> None:
    pull = Pull.model_validate(PULL)

    assert pull.head.label == "octodog:new-topic"
    assert pull.head.repo == Repository()
    assert pull.rebaseable is None


def test_release_assets() -> None:
    release = Release.model_validate(RELEASE)

    assert len(release.assets) == 1
    assert release.assets[0].uploader.login == "octocat"


def test_unknown_permission_is_rejected() -> None:
    with pytest.raises(ValidationError):
        PermissionResponse.model_validate({"permission": "superuser"})


def test_permission_values() -> None:
    assert PermissionResponse.model_validate({"permission": "write"}).permission is Permission.WRITE
    assert PermissionResponse().permission is Permission.NONE
