"""
Logging configuration and utilities for fmf_basic.
"""
from .config import (
    configure_logging,
    configure_logging_from_config,
    get_logger,
    get_stream_logger,
)

__all__ = [
    "configure_logging",
    "configure_logging_from_config",
    "get_logger",
    "get_stream_logger",
]
