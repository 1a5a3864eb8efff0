"""Response envelope: pagination and rate-limit metadata derived from headers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

import httpx
from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from collections.abc import Mapping

HEADER_LINK = "Link"
HEADER_RATE_LIMIT = "X-RateLimit-Limit"
HEADER_RATE_USED = "X-RateLimit-Used"
HEADER_RATE_REMAINING = "X-RateLimit-Remaining"
HEADER_RATE_RESET = "X-RateLimit-Reset"

_PAGE_RELATIONS = ("first", "prev", "next", "last")
_LINK_SPLIT_RE = re.compile(r",\s*(?=<)")


class Pages(BaseModel):
    """Pagination information from a `Link` header (0 means no such link)."""

    model_config = ConfigDict(frozen=True)

    first: int = 0
    prev: int = 0
    next: int = 0
    last: int = 0


class Rate(BaseModel):
    """Rate limit status for the current token and rate group."""

    model_config = ConfigDict(frozen=True)

    limit: int = 0
    """The number of requests per hour."""
    used: int = 0
    """The number of requests used in the current hour."""
    remaining: int = 0
    """The number of requests remaining in the current hour."""
    reset: int = 0
    """Epoch seconds at which the current window resets."""

    @property
    def reset_at(self) -> datetime:
        """Reset time as a local datetime."""
        return datetime.fromtimestamp(self.reset)

    def reset_clock(self) -> str:
        """Reset time formatted as local `HH:MM:SS`."""
        return self.reset_at.strftime("%H:%M:%S")


def _page_from_url(url: str) -> int:
    try:
        raw = httpx.URL(url).params.get("page")
    except httpx.InvalidURL:
        return 0
    if raw is None or not raw.isdigit():
        return 0
    return int(raw)


def parse_pages(link: str | None) -> Pages:
    """Parse an RFC 5988 `Link` header into page numbers.

    Entries look like `<https://api.github.com/...?page=2>; rel="next"`. Each entry is
    handled on its own, so the order of relations in the header does not matter.
    Anything that cannot be parsed is ignored.
    """
    if not link:
        return Pages()

    found: dict[str, int] = {}
    for entry in _LINK_SPLIT_RE.split(link):
        target, _, params = entry.strip().partition(";")
        target = target.strip()
        if not (target.startswith("<") and target.endswith(">")):
            continue

        for param in params.split(";"):
            key, _, value = param.strip().partition("=")
            if key.strip() != "rel":
                continue
            for rel in value.strip().strip('"').split():
                if rel in _PAGE_RELATIONS and rel not in found:
                    found[rel] = _page_from_url(target[1:-1])

    return Pages(**found)


def _int_header(headers: Mapping[str, str], name: str) -> int:
    value = headers.get(name)
    if value is None:
        return 0
    try:
        return int(value.strip())
    except ValueError:
        return 0


def parse_rate(headers: Mapping[str, str]) -> Rate:
    """Parse `X-RateLimit-*` headers. Missing or non-numeric values become 0."""
    return Rate(
        limit=_int_header(headers, HEADER_RATE_LIMIT),
        used=_int_header(headers, HEADER_RATE_USED),
        remaining=_int_header(headers, HEADER_RATE_REMAINING),
        reset=_int_header(headers, HEADER_RATE_RESET),
    )


@dataclass
class Response:
    """An HTTP response from the GitHub API plus its pagination and rate metadata.

    The underlying body has already been consumed and closed by the time callers see
    this object; `raw.content` is only populated for JSON responses.
    """

    raw: httpx.Response
    pages: Pages
    rate: Rate

    @classmethod
    def from_httpx(cls, raw: httpx.Response) -> Response:
        return cls(
            raw=raw,
            pages=parse_pages(raw.headers.get(HEADER_LINK)),
            rate=parse_rate(raw.headers),
        )

    @property
    def status_code(self) -> int:
        return self.raw.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.raw.headers
