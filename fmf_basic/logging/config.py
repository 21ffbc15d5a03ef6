"""
Centralized logging configuration for the fmf_basic utilities.

This module provides standardized logging configuration using structlog.
The utilities themselves only emit DEBUG events for completed transfers;
failures are raised to the caller and never logged here.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the library and the host application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

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


def configure_logging_from_config(config: dict[str, Any]) -> None:
    """
    Configure logging from a merged configuration dictionary.

    Args:
        config: Output of ConfigLoader.merge_config; only the "logging"
            section is read, missing keys keep configure_logging defaults
    """
    params = config.get("logging", {})
    configure_logging(
        level=params.get("level", "WARNING"),
        format_json=params.get("format_json", False),
        include_timestamp=params.get("include_timestamp", True),
        include_caller=params.get("include_caller", False),
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


def get_stream_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the stream subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for stream transfers
    """
    return get_logger(name).bind(subsystem="streams")


def log_copy_summary(
    logger: FilteringBoundLogger,
    bytes_copied: int,
    chunks: int,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a completed stream copy with standardized format.

    Args:
        logger: Structlog logger instance
        bytes_copied: Total bytes moved from source to sink
        chunks: Number of buffer-sized reads that returned data
        context: Additional context data
    """
    bound_logger = logger.bind(
        bytes_copied=bytes_copied,
        chunks=chunks,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Stream copy complete")
