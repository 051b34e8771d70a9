"""Exceptions raised by the client.

Every error derives from `RocketLaunchLiveError`, so callers can catch the
whole family at once or a single kind:

- `ConfigurationError`: the client cannot be built (missing API key).
- `InvalidParamsError`: a filter value was rejected before any request.
- `TransportError`: the HTTP request could not complete.
- `APIStatusError`: the server answered with a 4xx/5xx status.
- `DecodeError`: the body is not JSON or does not match the expected model.
"""

from __future__ import annotations

from typing import Any


class RocketLaunchLiveError(Exception):
    """Base exception for every error raised by this package."""

    def __init__(
        self,
        detail: str = "Unexpected RocketLaunch.Live client error",
        code: str = "client_error",
        context: dict[str, Any] | None = None,
    ) -> None:
        self.detail = detail
        self.code = code
        self.context = context or {}
        super().__init__(self.detail)

    def to_dict(self) -> dict[str, Any]:
        """Convert the exception to a dictionary (CLI JSON output, logs)."""
        return {
            "error": {
                "code": self.code,
                "message": self.detail,
                "context": self.context,
            }
        }


class ConfigurationError(RocketLaunchLiveError):
    def __init__(self, detail: str = "Invalid client configuration", context: dict[str, Any] | None = None) -> None:
        super().__init__(detail=detail, code="configuration_error", context=context)


class InvalidParamsError(RocketLaunchLiveError):
    """Raised by the parameter builders when a filter value is rejected."""

    def __init__(
        self,
        detail: str = "Invalid parameters",
        field: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        merged_context: dict[str, Any] = {"field": field} if field else {}
        if context:
            merged_context.update(context)
        super().__init__(detail=detail, code="validation_error", context=merged_context)
        self.field = field


class TransportError(RocketLaunchLiveError):
    """Raised when the request never produced an HTTP response."""

    def __init__(
        self,
        detail: str = "Request to RocketLaunch.Live failed",
        url: str | None = None,
        original_exception: Exception | None = None,
    ) -> None:
        context: dict[str, Any] = {}
        if url:
            context["url"] = url
        if original_exception is not None:
            context["original_error"] = str(original_exception)
        super().__init__(detail=detail, code="transport_error", context=context)
        self.original_exception = original_exception


class APIStatusError(RocketLaunchLiveError):
    """Raised when the server answers with an error status."""

    def __init__(self, status_code: int, message: str | None = None, url: str | None = None) -> None:
        detail = f"HTTP {status_code}"
        if message:
            detail = f"{detail}: {message}"
        context: dict[str, Any] = {"status_code": status_code}
        if url:
            context["url"] = url
        code = "client_status_error" if status_code < 500 else "server_status_error"
        super().__init__(detail=detail, code=code, context=context)
        self.status_code = status_code
        self.message = message

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return self.status_code >= 500


class DecodeError(RocketLaunchLiveError):
    """Raised when a response body cannot be decoded into the expected model."""

    def __init__(
        self,
        detail: str = "Could not decode response body",
        url: str | None = None,
        original_exception: Exception | None = None,
    ) -> None:
        context: dict[str, Any] = {}
        if url:
            context["url"] = url
        if original_exception is not None:
            context["original_error"] = str(original_exception)
        super().__init__(detail=detail, code="decode_error", context=context)
        self.original_exception = original_exception
