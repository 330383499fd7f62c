"""
Centralized logging configuration for the delegate demos.

This module provides standardized logging configuration using structlog
for all components. Log records go to stderr by default so that the
demo output written to stdout stays exactly as specified.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever sys.stderr is at emit time."""

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self) -> TextIO:  # type: ignore[override]
        return sys.stderr


_handler: Optional[logging.Handler] = None


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
        stream: Destination stream, stderr when omitted
    """
    global _handler

    log_level = getattr(logging, level.upper())

    # Replace only the handler installed by a previous call
    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler(stream) if stream is not None else _StderrHandler()
    _handler.setFormatter(logging.Formatter("%(message)s"))  # structlog will handle formatting
    root.addHandler(_handler)
    root.setLevel(log_level)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_callback_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for delegate composition and invocation.

    Binding happens on first call, so call this after configure_logging()
    rather than at import time.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structlog logger bound to the callbacks subsystem
    """
    return get_logger(name).bind(subsystem="callbacks")


def log_invocation(
    logger: FilteringBoundLogger,
    delegate_name: str,
    target_count: int,
    argument: Any,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a delegate invocation with standardized format.

    Args:
        logger: Structlog logger instance
        delegate_name: Name the caller uses for the delegate (e.g. "c")
        target_count: Number of targets the delegate will call
        argument: Argument passed to every target
        context: Additional context data
    """
    bound_logger = logger.bind(
        delegate=delegate_name,
        target_count=target_count,
        argument=argument,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if target_count:
        bound_logger.debug("Invoking delegate")
    else:
        bound_logger.debug("Invoking empty delegate")
