"""Text dumps of requests and responses for OKTA_DEBUG mode."""

import httpx

REDACTED_HEADERS = frozenset({"authorization"})


def _format_headers(headers: httpx.Headers) -> str:
    return "\n".join(
        f"{name}: {'REDACTED' if name.lower() in REDACTED_HEADERS else value}"
        for name, value in headers.multi_items()
    )


def _format_body(content: bytes) -> str:
    return content.decode("utf-8", errors="replace")


def dump_request(request: httpx.Request) -> str:
    """Render a request as HTTP/1.1 text (request line, headers, body)."""
    target = request.url.raw_path.decode("ascii")
    text = f"{request.method} {target} HTTP/1.1\n{_format_headers(request.headers)}"
    try:
        body = _format_body(request.content)
    except httpx.RequestNotRead:
        body = "<streaming body>"
    return f"{text}\n\n{body}"


def dump_response(response: httpx.Response) -> str:
    """Render a response as HTTP/1.1 text (status line, headers, body)."""
    status = f"{response.http_version} {response.status_code} {response.reason_phrase}"
    text = f"{status}\n{_format_headers(response.headers)}"
    try:
        body = _format_body(response.content)
    except httpx.ResponseNotRead:
        body = "<body not read>"
    return f"{text}\n\n{body}"
