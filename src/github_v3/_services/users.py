"""Users endpoint service.

See https://docs.github.com/rest/reference/users
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from github_v3.models.user import User

if TYPE_CHECKING:
    from github_v3._base import ClientBase
    from github_v3.request import RequestContext
    from github_v3.response import Response


class UsersService:
    """Service providing user endpoints."""

    def __init__(self, client: ClientBase) -> None:
        self._client = client

    async def user(self, ctx: RequestContext | None) -> tuple[User, Response]:
        """Fetch the authenticated user."""
        request = self._client.new_request(ctx, "GET", "/user")
        user, response = await self._client.do(request, User)
        return user or User(), response

    async def get(self, ctx: RequestContext | None, username: str) -> tuple[User, Response]:
        """Fetch a user by login."""
        request = self._client.new_request(ctx, "GET", f"/users/{username}")
        user, response = await self._client.do(request, User)
        return user or User(), response
