"""Per-category rate limit tracking for the Okta API client.

The tracker keeps the most recent rate limit state reported by the API
for every category. It is owned by a single OktaClient and shared by
every call made through it, from any thread or task.
"""

from __future__ import annotations

import threading
from datetime import datetime

from okta_client.logging import get_logger

from .schemas import RateLimit, RateLimitCategory

logger = get_logger(__name__)


class RateLimitTracker:
    """Thread-safe table of the last known RateLimit per category.

    One entry exists per RateLimitCategory from construction onward,
    starting at the zero value. A single lock guards the whole table and
    is only held for the dictionary access itself, never across I/O.

    Usage:
        tracker = RateLimitTracker()
        tracker.set(RateLimitCategory.CORE, RateLimit.from_headers(resp.headers))

        if tracker.get(RateLimitCategory.CORE).is_exhausted():
            ...
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._limits: dict[RateLimitCategory, RateLimit] = {
            category: RateLimit() for category in RateLimitCategory
        }

    def get(self, category: RateLimitCategory | str) -> RateLimit:
        """Get the last known rate limit for a category.

        Args:
            category: Rate limit category (enum member or its value)

        Returns:
            RateLimit (zero value if nothing was recorded yet)

        Raises:
            ValueError: If category is not a known RateLimitCategory
        """
        category = RateLimitCategory(category)
        with self._lock:
            return self._limits[category]

    def set(self, category: RateLimitCategory | str, rate: RateLimit) -> None:
        """Record the rate limit reported for a category (last writer wins).

        Raises:
            ValueError: If category is not a known RateLimitCategory
        """
        category = RateLimitCategory(category)
        with self._lock:
            self._limits[category] = rate

        if rate.remaining == 0 and rate.reset_at is not None:
            logger.debug("Rate limit exhausted for {} until {}", category.value, rate.reset_at)

    def snapshot(self) -> dict[RateLimitCategory, RateLimit]:
        """Copy of the whole table, taken under the lock."""
        with self._lock:
            return dict(self._limits)

    def is_exhausted(
        self,
        category: RateLimitCategory | str,
        now: datetime | None = None,
    ) -> bool:
        """Whether a call in this category is known to fail right now."""
        return self.get(category).is_exhausted(now)
