"""Shared base for resource services."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:
    from okta_client.client import OktaClient


def path_segment(value: str) -> str:
    """Percent-encode a value for use as a single path segment."""
    return quote(value, safe="")


class BaseService:
    """A thin caller of the client pipeline for one resource type."""

    def __init__(self, client: OktaClient) -> None:
        self._client = client
