"""
fmf_basic - Byte stream and string utilities

Small stateless helpers for copying byte streams, converting between
streams and text, and handling None-tolerant string operations.
"""

from .utils.streams import (
    copy,
    read_bytes,
    read_string,
    write_bytes,
    write_slice,
    write_string,
)
from .utils.strings import (
    is_blank,
    is_blank_or_whitespace,
    is_not_blank,
    join,
    or_empty,
    split_non_empty,
)

__version__ = "0.1.0"
__author__ = "FMF Team"

__all__ = [
    "copy",
    "read_bytes",
    "read_string",
    "write_bytes",
    "write_slice",
    "write_string",
    "is_blank",
    "is_blank_or_whitespace",
    "is_not_blank",
    "join",
    "or_empty",
    "split_non_empty",
]
