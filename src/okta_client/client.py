"""Async Okta API client built on httpx.

This module owns the shared request pipeline every resource service goes
through: request construction, SSWS token injection, preemptive rate
limit checks, the network call, response metadata parsing and error
classification.
"""

from __future__ import annotations

import asyncio
import json
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Literal
from urllib.parse import urlsplit

import httpx
from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError, to_jsonable_python

from okta_client.config import get_settings
from okta_client.logging import bind_request, get_logger

from .classifier import classify_response
from .dump import dump_request, dump_response
from .exceptions import (
    OktaCancelledError,
    OktaRateLimitError,
    OktaTransportError,
    OktaValidationError,
)
from .rate_limit.schemas import RateLimit, RateLimitCategory
from .rate_limit.tracker import RateLimitTracker
from .response import OktaResponse
from .services import AppsService, GroupsService, UsersService

if TYPE_CHECKING:
    from types import TracebackType

logger = get_logger(__name__)

HTTPMethod = Literal["GET", "POST", "PUT", "DELETE"]

AUTH_SCHEME = "SSWS"
SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})
SENSITIVE_QUERY_PARAMS = frozenset(
    {"token", "access_token", "api_key", "apikey", "password", "secret", "client_secret"}
)
REDACTED = "REDACTED"


def sanitize_url(url: httpx.URL | str) -> str:
    """Strip userinfo and redact sensitive query values from a URL."""
    url = httpx.URL(url)
    if url.userinfo:
        url = url.copy_with(userinfo=b"")
    if url.query:
        url = url.copy_with(
            params=[
                (key, REDACTED if key.lower() in SENSITIVE_QUERY_PARAMS else value)
                for key, value in url.params.multi_items()
            ]
        )
    return str(url)


def encode_body(body: Any) -> bytes:
    """Serialize a request body to JSON bytes.

    Pydantic models are dumped by alias without None fields. Non-ASCII
    and HTML-sensitive characters are written literally.

    Raises:
        OktaValidationError: If the body is not JSON serializable
    """
    try:
        payload = to_jsonable_python(body, by_alias=True, exclude_none=True)
    except PydanticSerializationError as e:
        raise OktaValidationError(f"Request body is not JSON serializable: {e}") from e
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


@lru_cache(maxsize=128)
def _adapter_for(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


class OktaClient:
    """Async Okta API client.

    Usage:
        async with OktaClient() as client:
            user, response = await client.users.get_by_id("00ub0oNGTSWTBKOLGLNR")
            print(user.profile.login, response.rate.remaining)

    Or with the low-level pipeline:
        request = client.build_request("GET", "groups/00g1emaKYZTWRYYRRTSK")
        group, response = await client.do(
            request,
            category=RateLimitCategory.GROUPS_GET_UPDATE_DELETE,
            decode=Group,
        )

    A single instance is safe to share between concurrent tasks and
    threads. Its only shared mutable state is the rate limit table.
    """

    def __init__(
        self,
        api_token: str | None = None,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        *,
        user_agent: str | None = None,
        debug: bool | None = None,
    ) -> None:
        """Initialize the Okta client.

        Args:
            api_token: Static API token. If not provided, uses OKTA_API_TOKEN.
            base_url: API base URL ending in '/'. If not provided, uses OKTA_BASE_URL.
            http_client: Optional httpx.AsyncClient used as transport. The caller
                         keeps ownership; close() only closes a client created here.
            user_agent: User-Agent header value (defaults to settings.user_agent)
            debug: Dump requests/responses to the log (defaults to OKTA_DEBUG)

        Raises:
            OktaValidationError: If the token or base URL is missing, or the
                base URL path does not end with '/'.
        """
        settings = get_settings()

        self._token = api_token or settings.okta_api_token
        if not self._token:
            raise OktaValidationError("API token is not present. Set OKTA_API_TOKEN.")

        raw_base_url = base_url or settings.okta_base_url
        if not raw_base_url:
            raise OktaValidationError("Base URL is not present. Set OKTA_BASE_URL.")
        if not urlsplit(raw_base_url).path.endswith("/"):
            raise OktaValidationError(
                f"Base URL must have a trailing slash, but {raw_base_url!r} does not"
            )
        try:
            self._base_url = httpx.URL(raw_base_url)
        except httpx.InvalidURL as e:
            raise OktaValidationError(f"Base URL {raw_base_url!r} is invalid: {e}") from e

        self.user_agent = settings.user_agent if user_agent is None else user_agent
        self._debug = settings.okta_debug if debug is None else debug

        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=settings.request_timeout)

        self._rate_limits = RateLimitTracker()

        self.users = UsersService(self)
        self.groups = GroupsService(self)
        self.apps = AppsService(self)

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    @property
    def rate_limits(self) -> RateLimitTracker:
        """Per-category rate limit state for this client."""
        return self._rate_limits

    def rate_limit(self, category: RateLimitCategory | str = RateLimitCategory.CORE) -> RateLimit:
        """Last known rate limit for a category."""
        return self._rate_limits.get(category)

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def __aenter__(self) -> OktaClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    # -------------------------------------------------------------------------
    # Request Construction
    # -------------------------------------------------------------------------
    def build_request(
        self,
        method: HTTPMethod | str,
        path: str,
        body: Any = None,
    ) -> httpx.Request:
        """Build a request for a path relative to the base URL.

        Absolute URLs (e.g. pagination links) are used as-is. No I/O happens here.

        Args:
            method: GET, POST, PUT or DELETE
            path: Path relative to the base URL, may include a query string
            body: Optional JSON body (pydantic model, dict, list, ...)

        Returns:
            httpx.Request ready for do()

        Raises:
            OktaValidationError: For unsupported methods or unserializable bodies
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise OktaValidationError(f"Unsupported HTTP method: {method}")

        url = self._base_url.join(path)

        headers = {"Accept": "application/json"}
        content: bytes | None = None
        if body is not None:
            content = encode_body(body)
            headers["Content-Type"] = "application/json"
        if self.user_agent:
            headers["User-Agent"] = self.user_agent

        return self._http_client.build_request(method, url, content=content, headers=headers)

    # -------------------------------------------------------------------------
    # Execution Pipeline
    # -------------------------------------------------------------------------
    async def execute(
        self,
        method: HTTPMethod | str,
        path: str,
        *,
        body: Any = None,
        category: RateLimitCategory | str = RateLimitCategory.CORE,
        decode: Any = None,
        timeout: float | None = None,
    ) -> tuple[Any, OktaResponse]:
        """Build and send a request in one step. See do() for the contract."""
        request = self.build_request(method, path, body)
        return await self.do(request, category=category, decode=decode, timeout=timeout)

    async def do(
        self,
        request: httpx.Request,
        *,
        category: RateLimitCategory | str = RateLimitCategory.CORE,
        decode: Any = None,
        timeout: float | None = None,
    ) -> tuple[Any, OktaResponse]:
        """Send a built request and decode the response.

        Args:
            request: Request from build_request()
            category: Rate limit category the endpoint belongs to
            decode: Optional decode target. A writable binary stream receives
                the raw body; any other value is treated as a type and the
                JSON body is validated into it (e.g. User, list[Group]).
            timeout: Optional deadline in seconds for the network call

        Returns:
            Tuple of (decoded value or None, OktaResponse)

        Raises:
            OktaRateLimitError: Limit known to be exhausted, or a 403 with remaining 0
            OktaAPIError: Any other non-2xx response
            OktaCancelledError: The deadline expired while the request was in flight
            OktaTransportError: The request failed below HTTP (network, TLS, body decoding)
        """
        category = RateLimitCategory(category)

        if self._debug:
            logger.info("Request:\n{}", dump_request(request))

        request = self._authorize(request)

        self._check_rate_limit_before_do(request, category)

        http_response = await self._send(request, timeout)

        if self._debug:
            logger.info("Response:\n{}", dump_response(http_response))

        response = OktaResponse.from_http_response(http_response)
        self._rate_limits.set(category, response.rate)

        error = classify_response(http_response)
        if error is not None:
            error.response = response
            bind_request(request.method, sanitize_url(request.url)).debug(
                "Request failed with {} (request_id={})",
                http_response.status_code,
                response.request_id,
            )
            raise error

        return self._decode(http_response, decode), response

    def _authorize(self, request: httpx.Request) -> httpx.Request:
        """Return a copy of the request carrying the Authorization header.

        The caller's request is left untouched so it can be dumped or sent again.
        """
        headers = request.headers.copy()
        headers["Authorization"] = f"{AUTH_SCHEME} {self._token}"
        return httpx.Request(
            request.method,
            request.url,
            headers=headers,
            stream=request.stream,
            extensions=request.extensions,
        )

    def _check_rate_limit_before_do(
        self,
        request: httpx.Request,
        category: RateLimitCategory,
    ) -> None:
        """Raise OktaRateLimitError without a network call if the limit is known exhausted.

        Uses the last known state only, which may be stale if another call
        in the same category has completed since.
        """
        rate = self._rate_limits.get(category)
        if not rate.is_exhausted():
            return

        http_response = httpx.Response(httpx.codes.FORBIDDEN, request=request)
        error = OktaRateLimitError(
            rate=rate,
            http_response=http_response,
            message=(
                f"API rate limit of {rate.limit} still exceeded until {rate.reset_at}, "
                "not making remote request."
            ),
        )
        error.response = OktaResponse(http_response=http_response, rate=rate)
        bind_request(request.method, sanitize_url(request.url)).warning(
            "Rate limit for {} still in effect until {}, skipping request",
            category.value,
            rate.reset_at,
        )
        raise error

    async def _send(self, request: httpx.Request, timeout: float | None) -> httpx.Response:
        """Send the request, translating deadline and transport failures."""
        deadline = asyncio.timeout(timeout)
        try:
            async with deadline:
                return await self._http_client.send(request)
        except TimeoutError as e:
            if not deadline.expired():
                raise
            raise OktaCancelledError(
                f"{request.method} {sanitize_url(request.url)}: deadline of {timeout}s exceeded"
            ) from e
        except httpx.RequestError as e:
            # A passed deadline takes precedence over the transport failure
            if _deadline_passed(deadline):
                raise OktaCancelledError(
                    f"{request.method} {sanitize_url(request.url)}: deadline of {timeout}s exceeded"
                ) from e
            raise OktaTransportError(request.method, sanitize_url(request.url), e) from e

    @staticmethod
    def _decode(http_response: httpx.Response, decode: Any) -> Any:
        if decode is None:
            return None

        if hasattr(decode, "write") and not isinstance(decode, type):
            decode.write(http_response.content)
            return decode

        # An empty body is not an error
        if not http_response.content.strip():
            return None
        return _adapter_for(decode).validate_json(http_response.content)


def _deadline_passed(deadline: asyncio.Timeout) -> bool:
    when = deadline.when()
    if when is None:
        return False
    return deadline.expired() or asyncio.get_running_loop().time() >= when
