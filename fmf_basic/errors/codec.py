"""
Errors raised while preparing data for a stream.

Both classes also derive from the builtin exception a Python caller would
expect for the same situation, so existing ``except LookupError`` or
``except IndexError`` handlers keep working.
"""

from typing import Optional

from .recovery import RecoverableError


class UnsupportedEncodingError(RecoverableError, LookupError):
    """The requested encoding is unknown or is not a text encoding."""

    def __init__(self, message: str, encoding: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.encoding = encoding


class SliceBoundsError(RecoverableError, IndexError):
    """A requested byte range falls outside the supplied buffer."""

    def __init__(self, message: str, offset: Optional[int] = None,
                 length: Optional[int] = None, size: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.offset = offset
        self.length = length
        self.size = size
