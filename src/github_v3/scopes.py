"""GitHub OAuth scopes.

See https://docs.github.com/developers/apps/scopes-for-oauth-apps
"""

from __future__ import annotations

from enum import Enum


class Scope(str, Enum):
    """An OAuth scope granted to an access token."""

    REPO = "repo"
    REPO_STATUS = "repo:status"
    REPO_DEPLOYMENT = "repo_deployment"
    PUBLIC_REPO = "public_repo"
    REPO_INVITE = "repo:invite"
    SECURITY_EVENTS = "security_events"

    WRITE_PACKAGES = "write:packages"
    READ_PACKAGES = "read:packages"
    DELETE_PACKAGES = "delete:packages"

    ADMIN_ORG = "admin:org"
    WRITE_ORG = "write:org"
    READ_ORG = "read:org"

    ADMIN_PUBLIC_KEY = "admin:public_key"
    WRITE_PUBLIC_KEY = "write:public_key"
    READ_PUBLIC_KEY = "read:public_key"

    ADMIN_REPO_HOOK = "admin:repo_hook"
    WRITE_REPO_HOOK = "write:repo_hook"
    READ_REPO_HOOK = "read:repo_hook"

    ADMIN_ORG_HOOK = "admin:org_hook"
    GIST = "gist"
    NOTIFICATIONS = "notifications"

    USER = "user"
    READ_USER = "read:user"
    USER_EMAIL = "user:email"
    USER_FOLLOW = "user:follow"

    DELETE_REPO = "delete_repo"

    WRITE_DISCUSSION = "write:discussion"
    READ_DISCUSSION = "read:discussion"

    ADMIN_GPG_KEY = "admin:gpg_key"
    WRITE_GPG_KEY = "write:gpg_key"
    READ_GPG_KEY = "read:gpg_key"

    WORKFLOW = "workflow"


def parse_scopes(header: str | None) -> set[str]:
    """Split an `X-OAuth-Scopes` header (`"repo, user"`) into scope names."""
    if not header:
        return set()
    return {part.strip() for part in header.split(",") if part.strip()}
