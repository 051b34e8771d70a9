"""httpx wrapper.

- Standardizes headers and timeouts for every request.
- Accepts an injected transport so tests can swap in `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from rocket_launch_live.core.config import AppSettings


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the package defaults.

    Without `http_timeout_seconds` the httpx default timeout applies.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)

    kwargs: dict[str, object] = {}
    if settings.http_timeout_seconds is not None:
        kwargs["timeout"] = httpx.Timeout(settings.http_timeout_seconds)
    if transport is not None:
        kwargs["transport"] = transport

    return httpx.AsyncClient(
        follow_redirects=True,
        headers=headers,
        **kwargs,
    )
