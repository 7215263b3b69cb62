"""
Logging configuration using structlog for structured, JSON-based logging.

Also provides the severity dispatcher used to route messages either to a task
host (so they end up in the build log) or to the module logger, and
``log_error`` for callers that want to downgrade a failure to a diagnostic.
"""

from __future__ import annotations

import traceback
from typing import TYPE_CHECKING, Any

import structlog

from packaging_common.enums import LogType

if TYPE_CHECKING:
    from packaging_common.host.base import TaskHost

log_ = structlog.get_logger(__name__)


def configure_logging(log_level: str = "INFO", json_output: bool = True) -> None:
    """Configure structured logging.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Render JSON lines; console rendering otherwise
    """
    renderer: Any = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level.upper()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    """Get a logger instance.

    Example:
        >>> log = get_logger(__name__)
        >>> log.info("npmrc_saved", path="/agent/_work/1/npm/.npmrc")
    """
    return structlog.get_logger(name)


def log(message: str, log_type: LogType = LogType.DEBUG, host: TaskHost | None = None) -> None:
    """Write ``message`` at ``log_type`` to the host, or to structlog without one."""
    if host is not None:
        host.log(message, log_type)
    elif log_type == LogType.WARNING:
        log_.warning(message)
    elif log_type == LogType.ERROR:
        log_.error(message)
    else:
        log_.debug(message)


def log_error(error: object, log_type: LogType = LogType.DEBUG, host: TaskHost | None = None) -> None:
    """Log ``error`` instead of raising it.

    The message of an exception goes out at ``log_type``; its traceback, when
    there is one, always goes out at debug. Anything that is not an exception
    is logged as ``Error: <value>``.
    """
    if isinstance(error, BaseException):
        message = str(error)
        if message:
            log(message, log_type, host)
        if error.__traceback__ is not None:
            stack = "".join(traceback.format_exception(type(error), error, error.__traceback__))
            log(stack, LogType.DEBUG, host)
    else:
        log(f"Error: {error}", log_type, host)
