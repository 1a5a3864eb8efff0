"""Base client infrastructure - request building, execution, rate tracking."""

from __future__ import annotations

import asyncio
import functools
import time
from pathlib import Path
from typing import TYPE_CHECKING, Any, BinaryIO

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from github_v3.config import GitHubConfig
from github_v3.exceptions import (
    BodyEncodeError,
    ContextError,
    DecodeError,
    InvalidURLError,
    RateLimitError,
    error_from_response,
)
from github_v3.rate_tracker import RateGroup, RateTracker
from github_v3.request import (
    SNIFF_LEN,
    Body,
    JSONBody,
    RawBody,
    RequestContext,
    UploadHandle,
    aiter_file,
    sniff_content_type,
)
from github_v3.response import Response

if TYPE_CHECKING:
    from collections.abc import AsyncIterable, Mapping
    from os import PathLike
    from types import TracebackType


logger = structlog.get_logger()

HEADER_AUTH = "Authorization"
HEADER_USER_AGENT = "User-Agent"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CONTENT_LENGTH = "Content-Length"
HEADER_ACCEPT = "Accept"

# https://docs.github.com/rest/overview/resources-in-the-rest-api#user-agent-required
USER_AGENT = "github-v3-python"

# https://docs.github.com/rest/overview/media-types
MEDIA_JSON = "application/json"
MEDIA_TYPE_V3 = "application/vnd.github.v3+json"

SUCCESS_STATUSES = frozenset({200, 201, 204})

# request extension holding the `RequestContext.deadline` the call must finish by
EXTENSION_DEADLINE = "github_v3.deadline"


def parse_base_url(raw: str) -> httpx.URL:
    """Validate an absolute http(s) base URL and normalize it to end with `/`."""
    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as e:
        raise InvalidURLError(raw, str(e)) from e
    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidURLError(raw, "missing protocol scheme")
    if not url.path.endswith("/"):
        url = url.copy_with(path=url.path + "/")
    return url


def resolve_url(base: httpx.URL, path: str) -> httpx.URL:
    """Resolve `path` against `base`, keeping the base path (e.g. `/api/v3/`).

    Absolute http(s) URLs are returned unchanged.
    """
    first_segment = path.split("/", 1)[0].split("?", 1)[0]
    if "://" not in path and ":" in first_segment:
        raise InvalidURLError(path, "missing protocol scheme")
    try:
        ref = httpx.URL(path)
    except httpx.InvalidURL as e:
        raise InvalidURLError(path, str(e)) from e

    if ref.is_absolute_url:
        if ref.scheme not in ("http", "https"):
            raise InvalidURLError(path, f"unsupported protocol scheme {ref.scheme!r}")
        return ref
    return base.join(path.lstrip("/"))


def encode_body(body: Body) -> tuple[bytes | AsyncIterable[bytes], str]:
    """Return request content and its media type."""
    match body:
        case RawBody(content=content, content_type=content_type):
            return content, content_type
        case JSONBody(value=value):
            try:
                return to_json(value), MEDIA_JSON
            except PydanticSerializationError as e:
                raise BodyEncodeError(f"json: unsupported type: {type(value).__name__}") from e
        case _:
            raise TypeError(f"body must be RawBody or JSONBody, got {type(body).__name__}")


@functools.cache
def _adapter(model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(model)


def decode_json(model: Any, content: bytes) -> Any:
    """Validate a JSON document into `model` (a model class or a type like `list[Commit]`)."""
    try:
        return _adapter(model).validate_json(content)
    except ValidationError as e:
        raise DecodeError(f"cannot decode response into {model!r}: {e}") from e


async def _drain_and_close(raw: httpx.Response, *, drain: bool) -> None:
    """Close the response.

    With `drain`, any part of the body nobody started reading is read first so the
    connection can be reused. A body whose iteration was interrupted (cancellation,
    deadline, a failing sink) is closed as is and its connection dropped.
    """
    try:
        if drain and not raw.is_stream_consumed:
            async for _ in raw.aiter_raw():
                pass
    except (httpx.HTTPError, httpx.StreamError) as e:
        # connection will not be reused; the call's outcome is already decided
        logger.debug("Discarding unreadable response body", error=str(e))
    finally:
        await raw.aclose()


class ClientBase:
    """
    Base class for GitHub API clients.

    Provides request construction, execution, rate-limit bookkeeping and error
    mapping. Endpoint wrappers build a request with one of the `new_*_request`
    methods and execute it with `do`.
    """

    _client: httpx.AsyncClient
    _rates: RateTracker

    def __init__(
        self,
        config: GitHubConfig,
        *,
        _transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_url = parse_base_url(config.api_url)
        self._upload_url = parse_base_url(config.upload_url)
        self._download_url = parse_base_url(config.download_url)
        self._access_token = config.access_token
        self._timeout = config.timeout_seconds
        self._rates = RateTracker()

        self._client = httpx.AsyncClient(
            timeout=config.timeout_seconds,
            follow_redirects=True,
            headers={HEADER_USER_AGENT: USER_AGENT},
            transport=_transport,
        )

    async def __aenter__(self) -> ClientBase:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    @property
    def api_url(self) -> httpx.URL:
        return self._api_url

    @property
    def upload_url(self) -> httpx.URL:
        return self._upload_url

    @property
    def download_url(self) -> httpx.URL:
        return self._download_url

    @property
    def rates(self) -> RateTracker:
        return self._rates

    def _timeout_for(self, ctx: RequestContext) -> float:
        return self._timeout if ctx.timeout is None else ctx.timeout

    def _with_deadline(self, ctx: RequestContext, request: httpx.Request) -> httpx.Request:
        if ctx.deadline is not None:
            request.extensions[EXTENSION_DEADLINE] = ctx.deadline
        return request

    def _authorize(self, headers: dict[str, str]) -> None:
        if self._access_token:
            headers[HEADER_AUTH] = f"token {self._access_token}"

    def new_request(
        self,
        ctx: RequestContext | None,
        method: str,
        path: str,
        body: Body | None = None,
        *,
        params: Mapping[str, str | int] | None = None,
    ) -> httpx.Request:
        """Build a request against the API base URL.

        Raises:
            ContextError: If `ctx` is None.
            InvalidURLError: If `path` cannot be resolved against the API base URL.
            BodyEncodeError: If a `JSONBody` value cannot be serialized.
        """
        if ctx is None:
            raise ContextError()
        url = resolve_url(self._api_url, path)

        headers = {HEADER_USER_AGENT: USER_AGENT, HEADER_ACCEPT: MEDIA_TYPE_V3}
        self._authorize(headers)

        content = None
        if body is not None:
            content, headers[HEADER_CONTENT_TYPE] = encode_body(body)

        request = self._client.build_request(
            method,
            url,
            params=params,
            content=content,
            headers=headers,
            timeout=self._timeout_for(ctx),
        )
        return self._with_deadline(ctx, request)

    def new_page_request(
        self,
        ctx: RequestContext | None,
        method: str,
        path: str,
        page_size: int = 0,
        page_no: int = 0,
        body: Body | None = None,
        *,
        params: Mapping[str, str | int] | None = None,
    ) -> httpx.Request:
        """Build a request with `per_page` / `page` query parameters (only when positive)."""
        query: dict[str, str | int] = dict(params or {})
        if page_size > 0:
            query["per_page"] = page_size
        if page_no > 0:
            query["page"] = page_no
        return self.new_request(ctx, method, path, body, params=query or None)

    def new_upload_request(
        self,
        ctx: RequestContext | None,
        path: str,
        filepath: str | PathLike[str],
        *,
        params: Mapping[str, str | int] | None = None,
    ) -> tuple[httpx.Request, UploadHandle]:
        """Build a POST request streaming a local file to the upload base URL.

        The content type is sniffed from the first bytes of the file. The returned
        handle owns the open file and must be closed after the request is executed.

        Raises:
            ContextError: If `ctx` is None.
            InvalidURLError: If `path` cannot be resolved against the upload base URL.
            FileNotFoundError: If `filepath` does not exist.
        """
        if ctx is None:
            raise ContextError()
        url = resolve_url(self._upload_url, path)

        file: BinaryIO = Path(filepath).open("rb")
        try:
            size = Path(filepath).stat().st_size
            media_type = sniff_content_type(file.read(SNIFF_LEN))
            file.seek(0)

            headers = {
                HEADER_USER_AGENT: USER_AGENT,
                HEADER_ACCEPT: MEDIA_TYPE_V3,
                HEADER_CONTENT_TYPE: media_type,
                HEADER_CONTENT_LENGTH: str(size),
            }
            self._authorize(headers)

            request = self._client.build_request(
                "POST",
                url,
                params=params,
                content=aiter_file(file),
                headers=headers,
                timeout=self._timeout_for(ctx),
            )
        except BaseException:
            file.close()
            raise

        return self._with_deadline(ctx, request), UploadHandle(file)

    def new_download_request(self, ctx: RequestContext | None, path: str) -> httpx.Request:
        """Build a GET request against the download base URL.

        Only `User-Agent` and `Authorization` are sent; the response is an opaque
        byte stream.
        """
        if ctx is None:
            raise ContextError()
        url = resolve_url(self._download_url, path)

        headers = {HEADER_USER_AGENT: USER_AGENT}
        self._authorize(headers)

        request = self._client.build_request(
            "GET", url, headers=headers, timeout=self._timeout_for(ctx)
        )
        if HEADER_ACCEPT in request.headers:
            del request.headers[HEADER_ACCEPT]
        return self._with_deadline(ctx, request)

    async def do(
        self,
        request: httpx.Request,
        model: Any = None,
        *,
        sink: BinaryIO | None = None,
    ) -> tuple[Any, Response]:
        """
        Execute a request and decode its response.

        With `sink`, the body of a successful response is copied into it. Otherwise,
        with `model`, the body is JSON-decoded into that type; an empty body decodes to
        None.

        Returns:
            The decoded value (or None) and the response envelope.

        Raises:
            RateLimitError: Locally, when the last known rate for the request's group is
                exhausted and has not reset yet (no request is sent).
            GitHubAPIError: For any non-success response (see `error_from_response`).
            DecodeError: If the body does not match `model`.
            TimeoutError: If the request context's deadline passes before the call,
                body included, completes.
            httpx.TransportError: Connection, TLS or timeout failures, unchanged.
        """
        deadline = request.extensions.get(EXTENSION_DEADLINE)
        delay = None if deadline is None else max(0.0, deadline - time.monotonic())
        async with asyncio.timeout(delay):
            return await self._execute(request, model, sink)

    async def _execute(
        self,
        request: httpx.Request,
        model: Any,
        sink: BinaryIO | None,
    ) -> tuple[Any, Response]:
        path = request.url.path
        group = RateGroup.for_path(path, self._api_url.path)

        exhausted = await self._rates.blocked(group)
        if exhausted is not None:
            raise RateLimitError(request.method, path, exhausted)

        logger.debug("GitHub request", method=request.method, path=path, group=group.value)
        raw = await self._client.send(request, stream=True)

        finished = False
        try:
            response = Response.from_httpx(raw)
            await self._rates.update(group, response.rate)

            if raw.status_code not in SUCCESS_STATUSES:
                await raw.aread()
                finished = True
                error = error_from_response(request, raw, response.rate)
                logger.info(
                    "GitHub API error",
                    method=request.method,
                    path=path,
                    status_code=raw.status_code,
                    error=type(error).__name__,
                )
                raise error

            value = None
            if sink is not None:
                async for chunk in raw.aiter_bytes():
                    sink.write(chunk)
            else:
                content = await raw.aread()
                if model is not None and content.strip():
                    value = decode_json(model, content)
            finished = True
            return value, response
        finally:
            await _drain_and_close(raw, drain=finished)
