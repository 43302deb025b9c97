"""Request options accepted by ``ajax`` and the request derived from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Literal, Mapping

from .errors import RequestError, URLFormatError

DataType = Literal["json", "text"]


@dataclass
class RequestOptions:
    url: str
    type: str | None = None
    data: Mapping[str, Any] | str | bytes | None = None
    headers: Mapping[str, str] | None = None
    data_type: DataType | None = None
    success: Callable[[Any], Any] | None = None
    error: Callable[[RequestError], Any] | None = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "RequestOptions":
        """Build options from a jQuery-style mapping (``dataType``, ``type``...)."""
        url = options.get("url")
        if not isinstance(url, str):
            raise URLFormatError(f"Missing or non-string url: {url!r}")
        return cls(
            url=url,
            type=options.get("type", options.get("method")),
            data=options.get("data"),
            headers=options.get("headers"),
            data_type=options.get("dataType", options.get("data_type")),
            success=options.get("success"),
            error=options.get("error"),
        )


@dataclass(frozen=True)
class EffectiveRequest:
    method: str | None
    url: str
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    body: Any = None

    @property
    def is_head(self) -> bool:
        return self.method == "HEAD"


__all__ = ["DataType", "EffectiveRequest", "RequestOptions"]
