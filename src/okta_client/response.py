"""Response metadata parsing: pagination links, rate limits and request id.

Parsing here is lenient: malformed Link entries or rate headers degrade
to empty values and never raise.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

import httpx
from pydantic import BaseModel, ConfigDict, Field

from .rate_limit.schemas import RateLimit

HEADER_LINK = "Link"
HEADER_REQUEST_ID = "X-Okta-Request-Id"


class Pagination(BaseModel):
    """Pagination links from the Link header of one response.

    Values are opaque absolute URLs and are only meaningful for the
    response that produced them. Missing relations are empty strings.
    """

    model_config = ConfigDict(populate_by_name=True)

    prev: str = Field(default="", description="URL of the previous page")
    next: str = Field(default="", description="URL of the next page")
    self_link: str = Field(default="", alias="self", description="URL of this page")

    @property
    def has_next(self) -> bool:
        return bool(self.next)


def _split_links(value: str) -> list[str]:
    """Split one header value on the commas that separate links.

    A comma only continues the previous link while its `<` is still open
    and the next piece does not start a new `<...>` reference.
    """
    links: list[str] = []
    for piece in value.split(","):
        if links and _is_open(links[-1]) and not piece.lstrip().startswith("<"):
            links[-1] = f"{links[-1]},{piece}"
        else:
            links.append(piece)
    return links


def _is_open(link: str) -> bool:
    return link.rfind("<") > link.rfind(">")


def _link_values(headers: httpx.Headers) -> list[str]:
    values: list[str] = []
    for raw in headers.get_list(HEADER_LINK):
        values.extend(_split_links(raw))
    return values


def parse_pagination(headers: httpx.Headers | Mapping[str, str]) -> Pagination:
    """Parse RFC 5988 style Link headers into a Pagination.

    Each link is `<url>; rel="..."`. Entries with fewer than two segments
    or without an angle-bracketed URL are skipped. Relations are matched
    exactly; when a relation appears more than once the last one wins.
    """
    if not isinstance(headers, httpx.Headers):
        headers = httpx.Headers(headers)

    found: dict[str, str] = {}
    for link in _link_values(headers):
        segments = link.strip().split(";")
        if len(segments) < 2:
            continue

        href = segments[0].strip()
        if not href.startswith("<") or not href.endswith(">"):
            continue
        url = href[1:-1]

        for segment in segments[1:]:
            match segment.strip():
                case 'rel="next"':
                    found["next"] = url
                case 'rel="prev"':
                    found["prev"] = url
                case 'rel="self"':
                    found["self_link"] = url

    return Pagination(**found)


def parse_rate(headers: httpx.Headers | Mapping[str, str]) -> RateLimit:
    """Parse the X-Rate-Limit-* headers of a response."""
    return RateLimit.from_headers(headers)


def parse_request_id(headers: httpx.Headers | Mapping[str, str]) -> str:
    """Return the X-Okta-Request-Id header, or an empty string."""
    if not isinstance(headers, httpx.Headers):
        headers = httpx.Headers(headers)
    return headers.get(HEADER_REQUEST_ID, "")


@dataclass
class OktaResponse:
    """An HTTP response from the Okta API plus the metadata parsed from it.

    Returned with every successful call and attached to response errors
    (OktaResponseError.response) so rate and pagination stay reachable.
    """

    http_response: httpx.Response
    rate: RateLimit = field(default_factory=RateLimit)
    pagination: Pagination = field(default_factory=Pagination)
    request_id: str = ""

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http_response.headers

    @classmethod
    def from_http_response(cls, http_response: httpx.Response) -> OktaResponse:
        """Build from a raw response, parsing rate, pagination and request id."""
        headers = http_response.headers
        return cls(
            http_response=http_response,
            rate=parse_rate(headers),
            pagination=parse_pagination(headers),
            request_id=parse_request_id(headers),
        )
