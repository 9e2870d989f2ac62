"""Pytest configuration and shared fixtures.

Usage Guide:
- For pipeline tests: use `make_client(handler)`; handler is a callable
  receiving an httpx.Request and returning an httpx.Response
  (tests.fixtures.transport.RecordingHandler covers most cases)
- For payloads and headers: import from tests.fixtures
"""

from collections.abc import AsyncIterator, Callable, Iterator
from typing import Any

import httpx
import pytest

from okta_client.client import OktaClient
from okta_client.config import get_settings
from tests.fixtures.transport import API_TOKEN, BASE_URL


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    """Settings are cached; clear them so env changes in tests take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# -----------------------------------------------------------------------------
# Client Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
async def make_client() -> AsyncIterator[Callable[..., OktaClient]]:
    """Factory for OktaClient instances backed by an httpx.MockTransport.

    All created transports are closed after the test.
    """
    http_clients: list[httpx.AsyncClient] = []

    def _make(handler: Callable[[httpx.Request], Any], **kwargs: Any) -> OktaClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_clients.append(http_client)
        return OktaClient(
            api_token=API_TOKEN,
            base_url=BASE_URL,
            http_client=http_client,
            **kwargs,
        )

    yield _make

    for http_client in http_clients:
        await http_client.aclose()
