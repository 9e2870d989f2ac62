"""Rate limit tracking for the Okta API.

Okta reports rate limit state per category in response headers. The
client records it here and uses it to skip calls that are known to fail.
"""

from .schemas import (
    HEADER_RATE_LIMIT,
    HEADER_RATE_REMAINING,
    HEADER_RATE_RESET,
    RateLimit,
    RateLimitCategory,
)
from .tracker import RateLimitTracker

__all__ = [
    "HEADER_RATE_LIMIT",
    "HEADER_RATE_REMAINING",
    "HEADER_RATE_RESET",
    "RateLimit",
    "RateLimitCategory",
    "RateLimitTracker",
]
