"""Exceptions for GitHub API errors, and the mapping from HTTP responses to them."""

from __future__ import annotations

import math
from datetime import timedelta
from http import HTTPStatus
from typing import TYPE_CHECKING

from pydantic import ValidationError

from github_v3.models.error import ErrorBody
from github_v3.response import HEADER_RATE_REMAINING

if TYPE_CHECKING:
    import httpx

    from github_v3.response import Rate

HEADER_RETRY_AFTER = "Retry-After"

# documentation_url suffixes GitHub uses for abuse (now "secondary") rate limits
ABUSE_RATE_LIMIT_MARKERS = ("#abuse-rate-limits", "#secondary-rate-limits")


class GitHubError(Exception):
    """Base exception for this library."""


class ContextError(GitHubError):
    """A request was built without a request context."""

    def __init__(self) -> None:
        super().__init__("request context is required")


class InvalidURLError(GitHubError):
    """A base URL or request path could not be parsed."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"parse {url!r}: {reason}")


class BodyEncodeError(GitHubError):
    """A request body could not be serialized to JSON."""


class DecodeError(GitHubError):
    """A successful response body could not be decoded into the requested type."""


class MissingScopeError(GitHubError):
    """The access token lacks a required OAuth scope."""

    def __init__(self, scope: str) -> None:
        self.scope = scope
        super().__init__(f"access token does not have the scope: {scope}")


class GitHubAPIError(GitHubError):
    """Base class for errors reported by the GitHub API.

    `response_error` is the underlying generic error, when the failure came from an
    actual HTTP response. It is also chained as `__cause__`.
    """

    def __init__(self, message: str, response_error: ResponseError | None = None) -> None:
        super().__init__(message)
        self._response_error = response_error
        if response_error is not None:
            self.__cause__ = response_error

    @property
    def response_error(self) -> ResponseError | None:
        return self._response_error

    @property
    def status_code(self) -> int | None:
        err = self.response_error
        return err.status_code if err is not None else None


class ResponseError(GitHubAPIError):
    """Generic error for a non-success HTTP response."""

    def __init__(
        self,
        method: str,
        path: str,
        status_code: int,
        message: str = "",
        documentation_url: str = "",
        response: httpx.Response | None = None,
    ) -> None:
        self.method = method
        self.path = path
        self.message = message
        self.documentation_url = documentation_url
        self.response = response
        self._status_code = status_code
        super().__init__(f"{method} {path}: {status_code} {message}")

    @property
    def response_error(self) -> ResponseError:
        return self

    @property
    def status_code(self) -> int:
        return self._status_code


class AuthError(GitHubAPIError):
    """Authentication problem (HTTP 401)."""

    def __init__(self, response_error: ResponseError | None = None) -> None:
        message = str(response_error) if response_error is not None else "requires authentication"
        super().__init__(message, response_error)


class RateLimitError(GitHubAPIError):
    """No calls remain in the current rate limit window.

    Raised either from a 403 response or locally, before any request is sent, when
    the last observed rate for the request's group is already exhausted.
    """

    def __init__(
        self,
        method: str,
        path: str,
        rate: Rate,
        response_error: ResponseError | None = None,
    ) -> None:
        self.method = method
        self.path = path
        self.rate = rate
        super().__init__(
            f"{method} {path}: rate limit {rate.limit} used: "
            f"rate limit will reset at {rate.reset_clock()}",
            response_error,
        )


class RateLimitAbuseError(GitHubAPIError):
    """Abuse (secondary) rate limit triggered; retry after `retry_after`."""

    def __init__(
        self,
        rate: Rate,
        retry_after: timedelta,
        response_error: ResponseError | None = None,
    ) -> None:
        self.rate = rate
        self.retry_after = retry_after
        message = str(response_error) if response_error is not None else "rate limit is abused"
        super().__init__(message, response_error)


class NotFoundError(GitHubAPIError):
    """Resource not found (HTTP 404)."""

    def __init__(self, response_error: ResponseError | None = None) -> None:
        message = str(response_error) if response_error is not None else "resource not found"
        super().__init__(message, response_error)


def parse_retry_after(value: str | None) -> timedelta:
    """Parse a `Retry-After` header given in seconds. Anything else yields zero."""
    if not value:
        return timedelta(0)
    try:
        seconds = math.ceil(float(value.strip()))
    except (OverflowError, ValueError):
        return timedelta(0)
    return timedelta(seconds=max(0, seconds))


def _parse_error_body(content: bytes) -> ErrorBody:
    if not content:
        return ErrorBody()
    try:
        return ErrorBody.model_validate_json(content)
    except ValidationError:
        return ErrorBody()


def error_from_response(
    request: httpx.Request,
    response: httpx.Response,
    rate: Rate,
) -> GitHubAPIError:
    """Map a non-success response to a typed error.

    The response body must already be read. It is parsed best-effort for `message`
    and `documentation_url`.
    """
    body = _parse_error_body(response.content)
    err = ResponseError(
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        message=body.message,
        documentation_url=body.documentation_url,
        response=response,
    )

    status = response.status_code
    if status == HTTPStatus.UNAUTHORIZED:
        return AuthError(err)
    if status == HTTPStatus.NOT_FOUND:
        return NotFoundError(err)
    if status == HTTPStatus.FORBIDDEN:
        if response.headers.get(HEADER_RATE_REMAINING) == "0":
            return RateLimitError(request.method, request.url.path, rate, err)
        if body.documentation_url.endswith(ABUSE_RATE_LIMIT_MARKERS):
            return RateLimitAbuseError(
                rate,
                parse_retry_after(response.headers.get(HEADER_RETRY_AFTER)),
                err,
            )
    # 400, other 403s, and every other status
    return err
