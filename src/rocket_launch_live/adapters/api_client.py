"""Asynchronous RocketLaunch.Live API client.

One coroutine per endpoint. Each call:
- renders the optional `Params` into the query string,
- sends `GET {base_url}/json/{endpoint}` with the API key as a Bearer token,
- decodes the body into `Response[T]` for the endpoint's record type.

The client keeps no state across calls besides its configuration; a fresh
`httpx.AsyncClient` is opened for every request.
"""

from __future__ import annotations

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from rocket_launch_live.adapters.http_client import build_async_client
from rocket_launch_live.core.config import AppSettings
from rocket_launch_live.core.domain.models import (
    Company,
    Launch,
    Location,
    Mission,
    Pad,
    Response,
    Tag,
    Vehicle,
)
from rocket_launch_live.core.domain.params import Params
from rocket_launch_live.core.errors import (
    APIStatusError,
    ConfigurationError,
    DecodeError,
    TransportError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def _error_message(response: httpx.Response) -> str | None:
    """Best-effort extraction of the server's error message."""

    try:
        data = response.json()
    except ValueError:
        text = response.text.strip()
        return text[:200] or None

    if isinstance(data, dict):
        errors = data.get("errors")
        if isinstance(errors, list) and errors:
            return "; ".join(str(e) for e in errors)
        for key in ("message", "error"):
            if isinstance(data.get(key), str):
                return data[key]
    return None


class RocketLaunchLive:
    """Client for the RocketLaunch.Live API.

    The API key defaults to `AppSettings.api_key` (`RLL_API_KEY`). `transport`
    is handed to every `httpx.AsyncClient` the client opens.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        settings: AppSettings | None = None,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        key = api_key or self._settings.api_key
        if not key:
            raise ConfigurationError(
                "No API key configured. Pass api_key or set RLL_API_KEY.",
                context={"setting": "api_key"},
            )
        self._key = key
        self._url = (base_url or self._settings.base_url).rstrip("/")
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._url

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self._url!r})"

    async def _request(self, endpoint: str, model: type[T], params: Params | None) -> Response[T]:
        url = f"{self._url}/json/{endpoint}"
        query = params.as_query() if params else []
        headers = {"Authorization": f"Bearer {self._key}"}

        logger.debug("GET %s params=%s", url, query)
        try:
            async with build_async_client(
                self._settings, extra_headers=headers, transport=self._transport
            ) as client:
                response = await client.get(url, params=query)
        except httpx.HTTPError as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            raise TransportError(f"Request to {endpoint} failed: {exc}", url=url, original_exception=exc) from exc

        if response.is_error:
            message = _error_message(response)
            logger.warning("GET %s returned HTTP %s", url, response.status_code)
            raise APIStatusError(response.status_code, message, url=url)

        try:
            return Response[model].model_validate_json(response.content)
        except ValidationError as exc:
            logger.warning("Could not decode %s response: %s", endpoint, exc.error_count())
            raise DecodeError(
                f"Could not decode {endpoint} response", url=url, original_exception=exc
            ) from exc

    async def companies(self, params: Params | None = None) -> Response[Company]:
        """Retrieve companies, optionally filtered by `params`."""
        return await self._request("companies", Company, params)

    async def launches(self, params: Params | None = None) -> Response[Launch]:
        """Retrieve launches, optionally filtered by `params`."""
        return await self._request("launches", Launch, params)

    async def locations(self, params: Params | None = None) -> Response[Location]:
        """Retrieve locations, optionally filtered by `params`."""
        return await self._request("locations", Location, params)

    async def missions(self, params: Params | None = None) -> Response[Mission]:
        """Retrieve missions, optionally filtered by `params`."""
        return await self._request("missions", Mission, params)

    async def pads(self, params: Params | None = None) -> Response[Pad]:
        """Retrieve pads, optionally filtered by `params`."""
        return await self._request("pads", Pad, params)

    async def tags(self, params: Params | None = None) -> Response[Tag]:
        """Retrieve tags, optionally filtered by `params`."""
        return await self._request("tags", Tag, params)

    async def vehicles(self, params: Params | None = None) -> Response[Vehicle]:
        """Retrieve vehicles, optionally filtered by `params`."""
        return await self._request("vehicles", Vehicle, params)

