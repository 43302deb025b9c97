"""Request lifecycle logging for the adapter.

Messages go to a ``logging.Logger`` (``ajax_fetch`` by default, silenced with
a ``NullHandler``) or to any object exposing ``debug``/``info``/``warn``/
``error`` methods.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from .options import EffectiveRequest

LogLevel = Literal["debug", "info", "warn", "error"]

LOG_LEVELS: dict[LogLevel, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class BoundLogger:
    """Filters by ``level`` and names the events of one ajax call."""

    def __init__(self, logger: Any | None = None, *, level: LogLevel = "info") -> None:
        self._logger = logger or _default_logger()
        self._level = level

    def debug(self, msg: str, *args: Any) -> None:
        self._emit("debug", msg, *args)

    def info(self, msg: str, *args: Any) -> None:
        self._emit("info", msg, *args)

    def warn(self, msg: str, *args: Any) -> None:
        self._emit("warn", msg, *args)

    def error(self, msg: str, *args: Any) -> None:
        self._emit("error", msg, *args)

    def request_sent(self, request: EffectiveRequest) -> None:
        self.debug("ajax %s %s", request.method or "(default)", request.url)

    def response_received(self, request: EffectiveRequest, status: int) -> None:
        self.debug("ajax <- %s status=%s", request.url, status)

    def request_failed(self, request: EffectiveRequest, status: int) -> None:
        self.info("HTTP %s %s failed status=%s", request.method or "-", request.url, status)

    def body_unparseable(self, request: EffectiveRequest, status: int) -> None:
        self.warn("Unparseable %s response from %s", status, request.url)

    def child(self, name: str) -> "BoundLogger":
        if isinstance(self._logger, logging.Logger):
            return BoundLogger(self._logger.getChild(name), level=self._level)
        return BoundLogger(self._logger, level=self._level)

    def _emit(self, level: LogLevel, msg: str, *args: Any) -> None:
        if LOG_LEVELS[level] < LOG_LEVELS[self._level]:
            return
        try:
            if isinstance(self._logger, logging.Logger):
                self._logger.log(LOG_LEVELS[level], msg, *args)
                return
            handler = getattr(self._logger, level, None)
            if handler:
                handler(msg, *args)
        except Exception:
            # Logging failures must never change the outcome of a request
            pass


def _default_logger() -> logging.Logger:
    logger = logging.getLogger("ajax_fetch")
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger


def create_logger(*, logger: Any | None = None, level: LogLevel = "info") -> BoundLogger:
    if isinstance(logger, BoundLogger):
        return logger
    return BoundLogger(logger, level=level)


__all__ = ["BoundLogger", "LogLevel", "create_logger"]
