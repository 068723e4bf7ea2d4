"""
Structured Logging Configuration
structlog on top of the ``formcraft`` stdlib logger.

The engine is embedded in a host application, so only the ``formcraft``
logger hierarchy is configured; the root logger is left to the host.
"""

import logging
import sys
from typing import Any, TextIO

import structlog
from pythonjsonlogger import jsonlogger

ROOT_LOGGER = "formcraft"

_HANDLER_MARK = "_formcraft_handler"


def _build_handler(json_logs: bool, stream: TextIO) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    if json_logs:
        handler.setFormatter(jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    setattr(handler, _HANDLER_MARK, True)
    return handler


def configure_logging(level: str = "INFO", json_logs: bool = False, stream: TextIO | None = None) -> None:
    """
    Configure structured logging for the engine.

    Safe to call repeatedly: the handler installed by a previous call is
    replaced, never duplicated.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Use JSON formatter for machine-readable logs
        stream: Output stream (stdout by default)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    engine_logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(engine_logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            engine_logger.removeHandler(handler)
    engine_logger.addHandler(_build_handler(json_logs, stream or sys.stdout))
    engine_logger.setLevel(log_level)
    engine_logger.propagate = False

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(colors=False),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Structured logger for a ``formcraft.*`` module (pass ``__name__``)."""
    return structlog.get_logger(name)


class LogContext:
    """
    Bind key/value pairs to every log event emitted inside the block.

    Values bound by an enclosing block are restored on exit.
    """

    def __init__(self, **kwargs: Any):
        self.context = kwargs
        self._bound: Any = None

    def __enter__(self) -> "LogContext":
        self._bound = structlog.contextvars.bound_contextvars(**self.context)
        self._bound.__enter__()
        return self

    def __exit__(self, *args: Any) -> None:
        self._bound.__exit__(*args)
