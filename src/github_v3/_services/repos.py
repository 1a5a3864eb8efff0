"""Repository endpoint service.

See https://docs.github.com/rest/reference/repos
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from github_v3.models.commit import Branch, Commit, Tag
from github_v3.models.issue import Event, Issue
from github_v3.models.pull import Pull
from github_v3.models.release import Release, ReleaseAsset, ReleaseParams
from github_v3.models.repository import Permission, PermissionResponse, Repository
from github_v3.request import JSONBody

if TYPE_CHECKING:
    from os import PathLike

    from github_v3._base import ClientBase
    from github_v3.request import RequestContext
    from github_v3.response import Response

logger = structlog.get_logger()


def format_rfc3339(value: datetime) -> str:
    """Format a timestamp the way GitHub expects (`2020-10-20T19:59:59Z`). Naive means UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass(frozen=True)
class IssuesParams:
    """Optional filters for listing issues."""

    state: str = ""
    since: datetime | None = None


@dataclass(frozen=True)
class PullsParams:
    """Optional filters for listing pull requests."""

    state: str = ""


class RepoService:
    """Service providing endpoints for a single repository."""

    def __init__(self, client: ClientBase, owner: str, repo: str) -> None:
        self._client = client
        self.owner = owner
        self.repo = repo

    @property
    def client(self) -> ClientBase:
        return self._client

    @property
    def _prefix(self) -> str:
        return f"/repos/{self.owner}/{self.repo}"

    async def get(self, ctx: RequestContext | None) -> tuple[Repository, Response]:
        """Fetch the repository."""
        request = self._client.new_request(ctx, "GET", self._prefix)
        repository, response = await self._client.do(request, Repository)
        return repository or Repository(), response

    async def permission(
        self, ctx: RequestContext | None, username: str
    ) -> tuple[Permission, Response]:
        """Fetch the permission level of a collaborator."""
        request = self._client.new_request(
            ctx, "GET", f"{self._prefix}/collaborators/{username}/permission"
        )
        body, response = await self._client.do(request, PermissionResponse)
        if body is None:
            return Permission.NONE, response
        return body.permission, response

    async def commit(self, ctx: RequestContext | None, ref: str) -> tuple[Commit, Response]:
        """Fetch a commit by SHA, branch or tag name."""
        request = self._client.new_request(ctx, "GET", f"{self._prefix}/commits/{ref}")
        commit, response = await self._client.do(request, Commit)
        return commit or Commit(), response

    async def commits(
        self, ctx: RequestContext | None, page_size: int = 0, page_no: int = 0
    ) -> tuple[list[Commit], Response]:
        """List commits, one page at a time."""
        request = self._client.new_page_request(
            ctx, "GET", f"{self._prefix}/commits", page_size, page_no
        )
        commits, response = await self._client.do(request, list[Commit])
        return commits or [], response

    async def branch(self, ctx: RequestContext | None, name: str) -> tuple[Branch, Response]:
        """Fetch a branch by name."""
        request = self._client.new_request(ctx, "GET", f"{self._prefix}/branches/{name}")
        branch, response = await self._client.do(request, Branch)
        return branch or Branch(), response

    async def branch_protection(
        self, ctx: RequestContext | None, branch: str, enabled: bool
    ) -> Response:
        """Enable or disable enforcement of branch protection for administrators."""
        method = "POST" if enabled else "DELETE"
        request = self._client.new_request(
            ctx, method, f"{self._prefix}/branches/{branch}/protection/enforce_admins"
        )
        _, response = await self._client.do(request)
        return response

    async def tags(
        self, ctx: RequestContext | None, page_size: int = 0, page_no: int = 0
    ) -> tuple[list[Tag], Response]:
        """List tags, one page at a time."""
        request = self._client.new_page_request(
            ctx, "GET", f"{self._prefix}/tags", page_size, page_no
        )
        tags, response = await self._client.do(request, list[Tag])
        return tags or [], response

    async def issues(
        self,
        ctx: RequestContext | None,
        page_size: int = 0,
        page_no: int = 0,
        params: IssuesParams | None = None,
    ) -> tuple[list[Issue], Response]:
        """List issues (pull requests included), one page at a time."""
        params = params or IssuesParams()
        query: dict[str, str | int] = {}
        if params.state:
            query["state"] = params.state
        if params.since is not None:
            query["since"] = format_rfc3339(params.since)

        request = self._client.new_page_request(
            ctx, "GET", f"{self._prefix}/issues", page_size, page_no, params=query
        )
        issues, response = await self._client.do(request, list[Issue])
        return issues or [], response

    async def pull(self, ctx: RequestContext | None, number: int) -> tuple[Pull, Response]:
        """Fetch a pull request by number."""
        request = self._client.new_request(ctx, "GET", f"{self._prefix}/pulls/{number}")
        pull, response = await self._client.do(request, Pull)
        return pull or Pull(), response

    async def pulls(
        self,
        ctx: RequestContext | None,
        page_size: int = 0,
        page_no: int = 0,
        params: PullsParams | None = None,
    ) -> tuple[list[Pull], Response]:
        """List pull requests, one page at a time."""
        params = params or PullsParams()
        query: dict[str, str | int] = {}
        if params.state:
            query["state"] = params.state

        request = self._client.new_page_request(
            ctx, "GET", f"{self._prefix}/pulls", page_size, page_no, params=query
        )
        pulls, response = await self._client.do(request, list[Pull])
        return pulls or [], response

    async def events(
        self,
        ctx: RequestContext | None,
        number: int,
        page_size: int = 0,
        page_no: int = 0,
    ) -> tuple[list[Event], Response]:
        """List the events of an issue or pull request, one page at a time."""
        request = self._client.new_page_request(
            ctx, "GET", f"{self._prefix}/issues/{number}/events", page_size, page_no
        )
        events, response = await self._client.do(request, list[Event])
        return events or [], response

    async def latest_release(self, ctx: RequestContext | None) -> tuple[Release, Response]:
        """Fetch the most recent published release (not a draft or prerelease)."""
        request = self._client.new_request(ctx, "GET", f"{self._prefix}/releases/latest")
        release, response = await self._client.do(request, Release)
        return release or Release(), response

    async def create_release(
        self, ctx: RequestContext | None, params: ReleaseParams
    ) -> tuple[Release, Response]:
        """Create a release."""
        request = self._client.new_request(
            ctx, "POST", f"{self._prefix}/releases", JSONBody(params)
        )
        release, response = await self._client.do(request, Release)
        return release or Release(), response

    async def update_release(
        self, ctx: RequestContext | None, release_id: int, params: ReleaseParams
    ) -> tuple[Release, Response]:
        """Update an existing release."""
        request = self._client.new_request(
            ctx, "PATCH", f"{self._prefix}/releases/{release_id}", JSONBody(params)
        )
        release, response = await self._client.do(request, Release)
        return release or Release(), response

    async def upload_release_asset(
        self,
        ctx: RequestContext | None,
        release_id: int,
        asset_file: str | PathLike[str],
        asset_label: str = "",
    ) -> tuple[ReleaseAsset, Response]:
        """Upload a local file as an asset of a release.

        The asset is named after the file's base name.
        """
        query: dict[str, str | int] = {}
        if asset_name := Path(asset_file).name:
            query["name"] = asset_name
        if asset_label:
            query["label"] = asset_label

        request, handle = self._client.new_upload_request(
            ctx, f"{self._prefix}/releases/{release_id}/assets", asset_file, params=query
        )
        with handle:
            asset, response = await self._client.do(request, ReleaseAsset)

        logger.info("Uploaded release asset", release_id=release_id, name=query.get("name"))
        return asset or ReleaseAsset(), response

    async def download_release_asset(
        self,
        ctx: RequestContext | None,
        release_tag: str,
        asset_name: str,
        out_file: str | PathLike[str],
    ) -> Response:
        """Download a release asset by tag and name into `out_file`.

        The body is written to a sibling temp file that replaces `out_file` only once
        the download completes, so a failed call leaves any existing file untouched.
        """
        request = self._client.new_download_request(
            ctx, f"/{self.owner}/{self.repo}/releases/download/{release_tag}/{asset_name}"
        )
        out_path = Path(out_file)
        tmp_path = out_path.with_name(f".{out_path.name}.{uuid.uuid4().hex}.part")
        try:
            with tmp_path.open("wb") as f:
                _, response = await self._client.do(request, sink=f)
            tmp_path.replace(out_path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
        return response
