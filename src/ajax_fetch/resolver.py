"""Reads and classifies transport responses."""

from __future__ import annotations

from typing import Any

from .errors import ParseError, RequestError
from .logger import BoundLogger, create_logger
from .options import EffectiveRequest, RequestOptions
from .transport.base import Response

NO_CONTENT = 204


async def read_body(request: EffectiveRequest, response: Response, options: RequestOptions) -> Any:
    """Read the body the way ``options.data_type`` asks for.

    HEAD responses and 204 responses to JSON requests carry no body and are
    never read. Undecodable JSON raises ``ParseError``.
    """
    if request.is_head:
        return None
    if options.data_type != "json":
        return await response.text()
    if response.status == NO_CONTENT:
        return None
    try:
        return await response.json()
    except ValueError as exc:
        raise ParseError(f"Invalid JSON response: {exc}", cause=exc) from exc


async def resolve_response(
    request: EffectiveRequest,
    response: Response,
    options: RequestOptions,
    logger: BoundLogger | None = None,
) -> Any:
    logger = logger or create_logger()
    try:
        data = await read_body(request, response, options)
    except ParseError:
        logger.body_unparseable(request, response.status)
        raise

    if response.ok:
        return data

    error = RequestError(response.status_text, response=response, response_data=data)
    logger.request_failed(request, response.status)
    if options.error:
        options.error(error)
    raise error


__all__ = ["read_body", "resolve_response"]
