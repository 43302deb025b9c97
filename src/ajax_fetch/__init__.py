"""Public surface for the ajax adapter."""

from .builder import build_request
from .client import AjaxClient, ajax, ajax_safe
from .errors import (
    AjaxError,
    ParseError,
    RequestError,
    TransportError,
    URLFormatError,
)
from .options import EffectiveRequest, RequestOptions
from .transport import HttpxTransport, Transport, TransportResponse
from .types import AjaxResult
from .version import __version__

__all__ = [
    "__version__",
    "AjaxClient",
    "AjaxError",
    "AjaxResult",
    "EffectiveRequest",
    "HttpxTransport",
    "ParseError",
    "RequestError",
    "RequestOptions",
    "Transport",
    "TransportError",
    "TransportResponse",
    "URLFormatError",
    "ajax",
    "ajax_safe",
    "build_request",
]
