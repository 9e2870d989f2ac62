"""Okta client exceptions."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from .rate_limit.schemas import RateLimit
    from .response import OktaResponse
    from .schemas.error import ErrorCause, ErrorPayload


def format_rate_reset(delta: timedelta) -> str:
    """Render a time-to-reset like "[rate reset in 2s]" or "[rate reset in 87m02s]".

    Negative durations render as "[rate limit was reset 87m02s ago]".
    """
    seconds_float = delta.total_seconds()
    is_negative = seconds_float < 0
    seconds_total = int(0.5 + abs(seconds_float))
    minutes, seconds = divmod(seconds_total, 60)

    time_string = f"{minutes}m{seconds:02d}s" if minutes > 0 else f"{seconds}s"

    if is_negative:
        return f"[rate limit was reset {time_string} ago]"
    return f"[rate reset in {time_string}]"


def _describe_request(http_response: httpx.Response) -> tuple[str, str]:
    try:
        request = http_response.request
    except RuntimeError:
        return "", ""
    return request.method, str(request.url)


class OktaClientError(Exception):
    """Base exception for Okta client errors."""

    pass


class OktaValidationError(OktaClientError):
    """Raised when the client or a request is constructed with invalid input."""

    pass


class OktaCancelledError(OktaClientError):
    """Raised when the caller's deadline expires while a request is in flight."""

    pass


class OktaTransportError(OktaClientError):
    """Raised when a request fails below HTTP (network, DNS, TLS or body decoding).

    The URL is sanitized: credentials and sensitive query values are removed.
    """

    def __init__(self, method: str, url: str, cause: Exception) -> None:
        super().__init__(f"{method} {url}: {cause}")
        self.method = method
        self.url = url
        self.cause = cause


class OktaResponseError(OktaClientError):
    """Base class for errors derived from an HTTP response.

    Attributes:
        http_response: The raw httpx response (synthetic for preempted calls)
        response: Parsed response metadata (rate, pagination, request id),
            attached by the client so callers can inspect it on failure
    """

    def __init__(self, message: str, http_response: httpx.Response) -> None:
        super().__init__(message)
        self.http_response = http_response
        self.response: OktaResponse | None = None
        self.method, self.url = _describe_request(http_response)

    @property
    def status_code(self) -> int:
        return self.http_response.status_code


class OktaRateLimitError(OktaResponseError):
    """Raised when the rate limit for a category is exhausted (403 with remaining 0)."""

    def __init__(
        self,
        rate: RateLimit,
        http_response: httpx.Response,
        message: str = "API rate limit exceeded",
    ) -> None:
        super().__init__(message, http_response)
        self.rate = rate
        self.message = message

    @property
    def reset_at(self) -> datetime | None:
        return self.rate.reset_at

    def __str__(self) -> str:
        if self.rate.reset_at is None:
            reset = "[rate reset unknown]"
        else:
            reset = format_rate_reset(self.rate.reset_at - datetime.now(UTC))
        return f"{self.method} {self.url}: {self.status_code} {self.message} {reset}"


class OktaAPIError(OktaResponseError):
    """Raised for any other non-2xx response, carrying Okta's error body."""

    def __init__(self, http_response: httpx.Response, payload: ErrorPayload) -> None:
        super().__init__(payload.summary or "Okta API error", http_response)
        self.payload = payload

    @property
    def code(self) -> str:
        return self.payload.code

    @property
    def summary(self) -> str:
        return self.payload.summary

    @property
    def link(self) -> str:
        return self.payload.link

    @property
    def error_id(self) -> str:
        return self.payload.error_id

    @property
    def causes(self) -> list[ErrorCause]:
        return self.payload.causes

    def __str__(self) -> str:
        causes = ", ".join(str(cause) for cause in self.causes)
        return (
            f"{self.method} {self.url}: ({self.status_code}) "
            f"{self.code} - {self.summary} - {self.error_id} [{causes}]"
        )
