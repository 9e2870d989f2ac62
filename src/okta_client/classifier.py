"""Classification of non-2xx Okta responses into typed exceptions."""

from __future__ import annotations

import httpx

from .exceptions import OktaAPIError, OktaRateLimitError, OktaResponseError
from .rate_limit.schemas import HEADER_RATE_REMAINING, RateLimit
from .schemas.error import ErrorPayload


def _read_body(http_response: httpx.Response) -> bytes:
    try:
        return http_response.content
    except httpx.ResponseNotRead:
        return b""


def is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299


def classify_response(http_response: httpx.Response) -> OktaResponseError | None:
    """Map a response to the exception it represents.

    Returns None for 2xx responses. A 403 whose X-Rate-Limit-Remaining is
    exactly "0" is a rate limit error; every other status becomes an
    OktaAPIError populated from the error body when it parses.

    The classification itself never fails: an unreadable or malformed
    body leaves the error fields empty.
    """
    if is_success(http_response.status_code):
        return None

    payload = ErrorPayload.from_body(_read_body(http_response))

    if (
        http_response.status_code == httpx.codes.FORBIDDEN
        and http_response.headers.get(HEADER_RATE_REMAINING) == "0"
    ):
        return OktaRateLimitError(
            rate=RateLimit.from_headers(http_response.headers),
            http_response=http_response,
        )

    return OktaAPIError(http_response, payload)
