"""Pydantic schemas for Okta API rate limit data.

Okta reports the state of the rate-limit bucket an endpoint belongs to
on every response through the x-rate-limit-* headers.
See: https://developer.okta.com/docs/reference/rl-global-mgmt/
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from enum import StrEnum
from typing import Self

import httpx
from pydantic import BaseModel, ConfigDict, Field

HEADER_RATE_LIMIT = "X-Rate-Limit-Limit"
HEADER_RATE_REMAINING = "X-Rate-Limit-Remaining"
HEADER_RATE_RESET = "X-Rate-Limit-Reset"


class RateLimitCategory(StrEnum):
    """Okta rate limit categories.

    Each category groups the endpoints that share one counter. Most
    management calls without a dedicated bucket fall under 'core'.
    """

    CORE = "core"
    APPS_CREATE_LIST = "apps_create_list"
    APPS_GET_UPDATE_DELETE = "apps_get_update_delete"
    AUTHN = "authn"
    GROUPS_CREATE_LIST = "groups_create_list"
    GROUPS_GET_UPDATE_DELETE = "groups_get_update_delete"
    LOGS = "logs"
    SESSIONS = "sessions"
    USERS_CREATE_LIST = "users_create_list"
    USERS_GET_BY_ID = "users_get_by_id"
    USERS_GET_BY_LOGIN_NAME = "users_get_by_login_name"
    USERS_CREATE_UPDATE_DELETE_BY_ID = "users_create_update_delete_by_id"


def _header_int(headers: httpx.Headers, name: str) -> int:
    value = headers.get(name, "")
    try:
        return int(value)
    except ValueError:
        return 0


class RateLimit(BaseModel):
    """Last known rate limit state for one category.

    The zero value (limit=0, remaining=0, reset_at=None) means nothing
    is known yet. It never triggers preemption because there is no
    reset time to wait for.
    """

    model_config = ConfigDict(frozen=True)

    limit: int = Field(default=0, description="Maximum requests allowed in the window")
    remaining: int = Field(default=0, description="Requests remaining in current window")
    reset_at: datetime | None = Field(
        default=None, description="UTC datetime when the window resets (None if unknown)"
    )

    @property
    def seconds_until_reset(self) -> int:
        """Seconds until rate limit resets (0 if unknown or already past)."""
        if self.reset_at is None:
            return 0
        delta = self.reset_at - datetime.now(UTC)
        return max(0, int(delta.total_seconds()))

    def is_exhausted(self, now: datetime | None = None) -> bool:
        """Whether the window is used up and has not reset yet.

        Args:
            now: Reference time (defaults to the current UTC time)

        Returns:
            True if remaining is 0 and the reset time is still ahead
        """
        if self.remaining != 0 or self.reset_at is None:
            return False
        return (now or datetime.now(UTC)) < self.reset_at

    @classmethod
    def from_headers(cls, headers: httpx.Headers | Mapping[str, str]) -> Self:
        """Parse from HTTP response headers.

        Okta includes rate limit info on every response:
        - X-Rate-Limit-Limit
        - X-Rate-Limit-Remaining
        - X-Rate-Limit-Reset (Unix seconds)

        Missing or non-numeric values parse as 0; a reset of 0 means
        no reset time is known.

        Args:
            headers: HTTP response headers

        Returns:
            RateLimit instance
        """
        if not isinstance(headers, httpx.Headers):
            headers = httpx.Headers(headers)

        reset_at: datetime | None = None
        if reset_ts := _header_int(headers, HEADER_RATE_RESET):
            try:
                reset_at = datetime.fromtimestamp(reset_ts, tz=UTC)
            except (OverflowError, OSError, ValueError):
                reset_at = None

        return cls(
            limit=_header_int(headers, HEADER_RATE_LIMIT),
            remaining=_header_int(headers, HEADER_RATE_REMAINING),
            reset_at=reset_at,
        )
