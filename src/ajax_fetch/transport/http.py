"""HTTP transport built on top of httpx."""

from __future__ import annotations

import httpx

from ..errors import TransportError
from ..logger import BoundLogger, create_logger
from .base import FetchRequest, TransportResponse

DEFAULT_METHOD = "GET"


class HttpxTransport:
    def __init__(
        self,
        *,
        read_timeout: float = 60.0,
        client: httpx.AsyncClient | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        self._read_timeout = read_timeout
        self._client = client or httpx.AsyncClient(timeout=httpx.Timeout(read_timeout))
        self._owns_client = client is None
        self._logger = (logger or create_logger()).child("http")

    async def fetch(self, url: str, request: FetchRequest) -> TransportResponse:
        method = request.method or DEFAULT_METHOD
        try:
            self._logger.debug("HTTP %s %s", method, url)
            response = await self._client.request(
                method,
                url,
                content=request.body,
                headers=dict(request.headers),
            )
            body = response.content
            self._logger.debug(
                "HTTP <- %s status=%s bytes=%d",
                url,
                response.status_code,
                len(body),
            )
            return TransportResponse(
                status=response.status_code,
                body=body,
                headers={k.lower(): v for k, v in response.headers.items()},
                status_text=response.reason_phrase,
            )
        except httpx.TimeoutException as exc:
            raise TransportError(f"HTTP request timeout after {self._read_timeout}s") from exc
        except httpx.RequestError as exc:
            raise TransportError(f"Cannot connect to {url}: {exc}") from exc

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


__all__ = ["HttpxTransport"]
