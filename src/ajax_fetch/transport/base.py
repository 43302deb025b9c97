"""Common transport abstractions."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any, Mapping, Protocol, runtime_checkable


class FetchRequest(Protocol):
    """Request descriptor handed to a transport alongside the URL."""

    @property
    def method(self) -> str | None: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    @property
    def body(self) -> Any: ...


class Response(Protocol):
    """Minimal response shape the resolver relies on."""

    @property
    def ok(self) -> bool: ...

    @property
    def status(self) -> int: ...

    @property
    def status_text(self) -> str: ...

    async def json(self) -> Any: ...

    async def text(self) -> str: ...


@dataclass
class TransportResponse:
    status: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)
    status_text: str = ""

    def __post_init__(self) -> None:
        if not self.status_text:
            try:
                self.status_text = HTTPStatus(self.status).phrase
            except ValueError:
                self.status_text = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status <= 299

    async def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    async def json(self) -> Any:
        return json.loads(await self.text())


@runtime_checkable
class Transport(Protocol):
    async def fetch(self, url: str, request: FetchRequest) -> Response: ...

    async def aclose(self) -> None: ...


__all__ = ["FetchRequest", "Response", "Transport", "TransportResponse"]
