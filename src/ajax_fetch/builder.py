"""Derives the outgoing request from ajax options."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping
from urllib.parse import urlencode, urlsplit, urlunsplit

from .errors import URLFormatError
from .options import EffectiveRequest, RequestOptions

DEFAULT_HEADERS: Mapping[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


def build_request(options: RequestOptions) -> EffectiveRequest:
    method = options.type.upper() if options.type else None
    url = validate_url(options.url)
    body = options.data

    if method == "GET" and isinstance(options.data, Mapping):
        url = stringify_get_params(url, options.data)
        body = None

    return EffectiveRequest(
        method=method,
        url=url,
        headers=MappingProxyType(resolve_headers(options.headers)),
        body=body,
    )


def validate_url(url: str) -> str:
    try:
        parts = urlsplit(url)
        # Accessing port raises for non-numeric or out of range values
        parts.port
    except (TypeError, ValueError) as exc:
        raise URLFormatError(f"Invalid URL: {url!r}") from exc
    if not parts.scheme or not parts.netloc:
        raise URLFormatError(f"Invalid URL: {url!r}")
    return url


def stringify_get_params(url: str, data: Mapping[str, Any]) -> str:
    """Append the non-None entries of ``data`` to the query string of ``url``."""
    pairs = [(str(key), _query_value(value)) for key, value in data.items() if value is not None]
    if not pairs:
        return url

    parts = urlsplit(url)
    query = urlencode(pairs)
    if parts.query:
        query = f"{parts.query}&{query}"
    return urlunsplit((parts.scheme, parts.netloc, parts.path or "/", query, parts.fragment))


def resolve_headers(headers: Mapping[str, str] | None) -> dict[str, str]:
    merged = dict(headers or {})
    present = {name.lower() for name in merged}
    for name, value in DEFAULT_HEADERS.items():
        if name.lower() not in present:
            merged[name] = value
    return merged


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


__all__ = ["DEFAULT_HEADERS", "build_request", "resolve_headers", "stringify_get_params", "validate_url"]
