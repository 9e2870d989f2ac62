"""Async client for the Okta identity management API.

This package provides:
- OktaClient: Shared request pipeline with rate limit tracking
- Resource services: users, groups, apps
- Typed exceptions: OktaAPIError, OktaRateLimitError, ...
"""

__version__ = "0.1.0"

from .client import OktaClient  # noqa: E402
from .exceptions import (  # noqa: E402
    OktaAPIError,
    OktaCancelledError,
    OktaClientError,
    OktaRateLimitError,
    OktaResponseError,
    OktaTransportError,
    OktaValidationError,
)
from .rate_limit import RateLimit, RateLimitCategory, RateLimitTracker  # noqa: E402
from .response import OktaResponse, Pagination  # noqa: E402

__all__ = [
    "__version__",
    # Client
    "OktaClient",
    "OktaResponse",
    "Pagination",
    # Rate limits
    "RateLimit",
    "RateLimitCategory",
    "RateLimitTracker",
    # Exceptions
    "OktaAPIError",
    "OktaCancelledError",
    "OktaClientError",
    "OktaRateLimitError",
    "OktaResponseError",
    "OktaTransportError",
    "OktaValidationError",
]
