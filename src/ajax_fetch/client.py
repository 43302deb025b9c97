"""jQuery-style ``ajax`` entry points on top of a fetch-like transport."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Coroutine, Mapping, Union

from .builder import build_request
from .logger import LogLevel, create_logger
from .options import EffectiveRequest, RequestOptions
from .resolver import resolve_response
from .transport import HttpxTransport, Transport
from .types import AjaxResult

OptionsLike = Union[RequestOptions, Mapping[str, Any]]


@dataclass
class ClientOptions:
    transport: Transport | None = None
    read_timeout: float = 60.0
    logger: object | None = None
    log_level: LogLevel = "info"


class AjaxClient:
    """Issues ajax requests through a single transport.

    Without an explicit transport the client creates an ``HttpxTransport``
    and closes it in ``aclose``.
    """

    def __init__(
        self,
        *,
        transport: Transport | None = None,
        read_timeout: float = 60.0,
        logger: object | None = None,
        log_level: LogLevel = "info",
    ) -> None:
        options = ClientOptions(
            transport=transport,
            read_timeout=read_timeout,
            logger=logger,
            log_level=log_level,
        )
        self._logger = create_logger(logger=options.logger, level=options.log_level)
        self._transport = options.transport or HttpxTransport(
            read_timeout=options.read_timeout, logger=self._logger
        )
        self._owns_transport = options.transport is None

    def ajax(self, options: OptionsLike) -> Coroutine[Any, Any, Any]:
        """Build the request now and return a coroutine that sends it.

        URL problems surface as ``URLFormatError`` from this call, before
        anything is awaited.
        """
        resolved = coerce_options(options)
        request = build_request(resolved)
        return self._send(request, resolved)

    async def ajax_safe(self, options: OptionsLike) -> AjaxResult[Any]:
        """Like ``ajax`` but request failures come back as ``AjaxResult``.

        Errors raised by the ``success`` callback still propagate.
        """
        try:
            resolved = coerce_options(options)
            request = build_request(resolved)
            data = await self._fetch(request, resolved)
        except Exception as exc:
            return AjaxResult(ok=False, error=exc)
        _notify_success(resolved, data)
        return AjaxResult(ok=True, data=data)

    async def aclose(self) -> None:
        if self._owns_transport:
            await self._transport.aclose()

    async def __aenter__(self) -> "AjaxClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _send(self, request: EffectiveRequest, options: RequestOptions) -> Any:
        data = await self._fetch(request, options)
        _notify_success(options, data)
        return data

    async def _fetch(self, request: EffectiveRequest, options: RequestOptions) -> Any:
        self._logger.request_sent(request)
        response = await self._transport.fetch(request.url, request)
        self._logger.response_received(request, response.status)
        return await resolve_response(request, response, options, self._logger)


def _notify_success(options: RequestOptions, data: Any) -> None:
    # Callback errors propagate untouched
    if options.success:
        options.success(data)


def coerce_options(options: OptionsLike) -> RequestOptions:
    if isinstance(options, RequestOptions):
        return options
    return RequestOptions.from_mapping(options)


def ajax(
    options: OptionsLike,
    *,
    transport: Transport | None = None,
    logger: object | None = None,
    log_level: LogLevel = "info",
) -> Coroutine[Any, Any, Any]:
    """Send one request described by jQuery-style ``options``.

    Resolves with the parsed body. Rejects with ``RequestError`` for
    non-2xx responses, ``ParseError`` for undecodable JSON, and whatever the
    transport raised when no response was received.
    """
    resolved = coerce_options(options)
    request = build_request(resolved)
    return _send_once(request, resolved, transport, logger, log_level)


async def ajax_safe(
    options: OptionsLike,
    *,
    transport: Transport | None = None,
    logger: object | None = None,
    log_level: LogLevel = "info",
) -> AjaxResult[Any]:
    async with AjaxClient(transport=transport, logger=logger, log_level=log_level) as client:
        return await client.ajax_safe(options)


async def _send_once(
    request: EffectiveRequest,
    options: RequestOptions,
    transport: Transport | None,
    logger: object | None,
    log_level: LogLevel,
) -> Any:
    async with AjaxClient(transport=transport, logger=logger, log_level=log_level) as client:
        return await client._send(request, options)


__all__ = ["AjaxClient", "ClientOptions", "ajax", "ajax_safe", "coerce_options"]
