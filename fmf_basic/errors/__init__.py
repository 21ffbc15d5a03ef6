"""
Error classification for the stream and string utilities.

I/O failures are not wrapped: the ``OSError`` raised by the underlying
stream reaches the caller unchanged.
"""

from .recovery import (
    RecoverableError,
    UnrecoverableError,
)
from .contract import (
    PreconditionError,
    require,
)
from .codec import (
    UnsupportedEncodingError,
    SliceBoundsError,
)

__all__ = [
    # Recovery Categories
    "RecoverableError",
    "UnrecoverableError",
    # Contract Violations
    "PreconditionError",
    "require",
    # Input Errors
    "UnsupportedEncodingError",
    "SliceBoundsError",
]
