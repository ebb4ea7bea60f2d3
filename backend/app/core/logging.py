"""Loguru setup: JSON records tagged with the request and the running operation."""

from __future__ import annotations

import logging
from contextvars import ContextVar
from sys import stdout
from typing import Any

from loguru import logger

from app.core.config import settings

request_id_ctx_var: ContextVar[str] = ContextVar("request_id", default="-")
# Name of the catalog operation being executed (``add_country``, ...), set by run_operation.
operation_ctx_var: ContextVar[str] = ContextVar("operation", default="-")

# Chatty libraries whose INFO output would drown the access log.
_QUIET_LOGGERS = ("sqlalchemy.engine", "aiomysql", "urllib3.connectionpool")


def _patch_record(record: dict[str, Any]) -> None:
    extra = record["extra"]
    extra.setdefault("request_id", request_id_ctx_var.get())
    extra.setdefault("operation", operation_ctx_var.get())
    extra.setdefault("env", settings.ENV)


def setup_logging() -> None:
    """Configure the standard logging module and Loguru sinks.

    Records are serialized to JSON on stdout unless ``DEBUG`` is on, in which
    case the plain coloured format is easier to read in a terminal.
    """

    logging.basicConfig(level=settings.LOG_LEVEL)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logger.remove()
    logger.configure(patcher=_patch_record)
    logger.add(
        stdout,
        level=settings.LOG_LEVEL,
        enqueue=True,
        backtrace=False,
        diagnose=False,
        serialize=not settings.DEBUG,
    )
