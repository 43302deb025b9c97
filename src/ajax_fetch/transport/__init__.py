"""Transport implementations exposed to users."""

from .base import FetchRequest, Response, Transport, TransportResponse
from .http import HttpxTransport

__all__ = [
    "FetchRequest",
    "HttpxTransport",
    "Response",
    "Transport",
    "TransportResponse",
]
