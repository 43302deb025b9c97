"""Exceptions raised by the ajax adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .transport.base import Response


class AjaxError(Exception):
    """Base error for all adapter failures."""

    def __init__(self, message: str, *, context: Any | None = None) -> None:
        super().__init__(message)
        self.context = context


class URLFormatError(AjaxError, ValueError):
    """Raised before any network activity when the URL is not absolute."""


class RequestError(AjaxError):
    """Raised when a response arrived but did not report success.

    ``response`` is the transport response and ``response_data`` its body,
    parsed with the same policy as a successful response.
    """

    def __init__(
        self,
        message: str,
        *,
        response: Response,
        response_data: Any | None = None,
        context: Any | None = None,
    ) -> None:
        super().__init__(message, context=context)
        self.response = response
        self.response_data = response_data

    @property
    def status(self) -> int:
        return self.response.status

    @property
    def status_text(self) -> str:
        return self.response.status_text


class ParseError(AjaxError, ValueError):
    """Raised when a JSON response body cannot be decoded."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class TransportError(AjaxError, ConnectionError):
    """Raised by the bundled transport when no response could be obtained."""


__all__ = [
    "AjaxError",
    "ParseError",
    "RequestError",
    "TransportError",
    "URLFormatError",
]
