"""
Logging setup for Augure.

Every record gets a ``request_id`` attribute (``-`` outside a request)
through ``RequestIdFilter``, so both the JSON and the console format can
print it.
"""

import json
import logging
import sys
from contextvars import ContextVar, Token
from typing import Any, Optional
from uuid import uuid4

request_id_ctx: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

CONSOLE_FORMAT = "%(asctime)s | %(levelname)-8s | %(request_id)s | %(name)s | %(message)s"

NOISY_LOGGERS = ("asyncio", "httpx", "httpcore", "aiosqlite")

# LogRecord attributes that are not user-supplied extras
_RECORD_ATTRS = set(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime", "request_id", "service"}


class RequestIdFilter(logging.Filter):
    """Stamp records with the current request id and service name."""

    def __init__(self, service: str = "augure"):
        super().__init__()
        self.service = service

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_ctx.get() or "-"
        record.service = self.service
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "service": getattr(record, "service", None),
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }

        request_id = getattr(record, "request_id", "-")
        if request_id != "-":
            payload["request_id"] = request_id

        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if extras:
            payload["extra"] = extras

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def setup_logging(
    level: str = "INFO", json_logs: bool = True, service: str = "augure"
) -> None:
    """
    Configure the root logger with a single stdout handler.

    Args:
        level: Logging level name
        json_logs: JSON lines when True, console format otherwise
        service: Value of the ``service`` field on every record
    """
    numeric_level = logging.getLevelName(level.upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIdFilter(service))
    if json_logs:
        handler.setFormatter(JSONFormatter(datefmt="%Y-%m-%dT%H:%M:%S"))
    else:
        handler.setFormatter(
            logging.Formatter(CONSOLE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def set_request_id(request_id: Optional[str] = None) -> Token:
    """
    Bind a request id (a fresh uuid4 when None) to the current context.

    Returns:
        Token for ``reset_request_id``
    """
    return request_id_ctx.set(request_id or str(uuid4()))


def reset_request_id(token: Token) -> None:
    request_id_ctx.reset(token)


def get_request_id() -> Optional[str]:
    return request_id_ctx.get()
