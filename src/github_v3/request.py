"""Request-side building blocks: request context, body variants, upload handles."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, BinaryIO

if TYPE_CHECKING:
    from collections.abc import AsyncIterable, AsyncIterator
    from types import TracebackType

DEFAULT_CONTENT_TYPE = "application/octet-stream"
SNIFF_LEN = 512
UPLOAD_CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class RequestContext:
    """Deadline carrier for a single API call.

    Every request builder requires one. `timeout` (seconds) bounds each phase of the
    HTTP exchange; `None` keeps the client's configured timeout. `deadline` is a
    `time.monotonic()` instant by which the whole call (send, classification and
    body decoding) must finish. Cancellation is ordinary asyncio task cancellation.
    """

    timeout: float | None = None
    deadline: float | None = None

    @classmethod
    def background(cls) -> RequestContext:
        """A context with no deadline of its own."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> RequestContext:
        """A context whose deadline is `seconds` from now."""
        return cls(timeout=seconds, deadline=time.monotonic() + seconds)

    def remaining(self) -> float | None:
        """Seconds left until the deadline (never negative), or None without one."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())


@dataclass(frozen=True)
class RawBody:
    """Request body sent verbatim."""

    content: bytes | AsyncIterable[bytes]
    content_type: str = "application/json"


@dataclass(frozen=True)
class JSONBody:
    """Request body serialized to JSON (pydantic models, dicts, lists, scalars)."""

    value: Any


Body = RawBody | JSONBody


class UploadHandle:
    """Owns the file opened for an upload request.

    Close it once the request has been executed, whatever the outcome. It can also be
    used as a context manager.
    """

    def __init__(self, file: BinaryIO) -> None:
        self._file = file

    @property
    def closed(self) -> bool:
        return self._file.closed

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> UploadHandle:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()


async def aiter_file(file: BinaryIO, chunk_size: int = UPLOAD_CHUNK_SIZE) -> AsyncIterator[bytes]:
    """Stream an open binary file in chunks."""
    while chunk := file.read(chunk_size):
        yield chunk


# (signature, media type) checked in order against the start of the content
_SIGNATURES: tuple[tuple[bytes, str], ...] = (
    (b"%PDF-", "application/pdf"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"BM", "image/bmp"),
    (b"PK\x03\x04", "application/zip"),
    (b"\x1f\x8b\x08", "application/x-gzip"),
    (b"Rar!\x1a\x07", "application/x-rar-compressed"),
    (b"7z\xbc\xaf\x27\x1c", "application/x-7z-compressed"),
    (b"%!PS-Adobe-", "application/postscript"),
    (b"\x00asm", "application/wasm"),
)

_HTML_PREFIXES = (b"<!doctype html", b"<html", b"<head", b"<body")


def sniff_content_type(head: bytes) -> str:
    """Guess a media type from the first bytes of a file.

    Recognizes common binary signatures, byte order marks, HTML and XML. Content
    free of binary control bytes is `text/plain; charset=utf-8` whatever its
    encoding (Latin-1 included); anything else is `application/octet-stream`.
    """
    for signature, media_type in _SIGNATURES:
        if head.startswith(signature):
            return media_type

    if head.startswith(b"\xfe\xff"):
        return "text/plain; charset=utf-16be"
    if head.startswith(b"\xff\xfe"):
        return "text/plain; charset=utf-16le"
    if head.startswith(b"\xef\xbb\xbf"):
        return "text/plain; charset=utf-8"

    stripped = head.lstrip(b"\t\n\x0c\r ").lower()
    if stripped.startswith(_HTML_PREFIXES):
        return "text/html; charset=utf-8"
    if stripped.startswith(b"<?xml"):
        return "text/xml; charset=utf-8"

    if any(byte < 0x20 and byte not in b"\t\n\x0c\r\x1b" for byte in head):
        return DEFAULT_CONTENT_TYPE
    return "text/plain; charset=utf-8"
