"""Test fixtures for the Okta client."""

from .okta_responses import (
    OKTA_APP_RESPONSE,
    OKTA_ERROR_RESPONSE,
    OKTA_GROUP_RESPONSE,
    OKTA_RATE_LIMIT_ERROR_RESPONSE,
    OKTA_USER_RESPONSE,
    future_reset_timestamp,
    make_rate_limit_headers,
)

__all__ = [
    "OKTA_APP_RESPONSE",
    "OKTA_ERROR_RESPONSE",
    "OKTA_GROUP_RESPONSE",
    "OKTA_RATE_LIMIT_ERROR_RESPONSE",
    "OKTA_USER_RESPONSE",
    "future_reset_timestamp",
    "make_rate_limit_headers",
]
