"""
Recovery classifications for error handling.

These mixins tell a caller whether an error points at bad input it can
correct and retry with, or at a programming error in the calling code.
"""

from typing import Optional, Dict, Any


class RecoverableError(Exception):
    """Mixin for errors a caller can recover from by supplying different input."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None, **kwargs):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class UnrecoverableError(Exception):
    """Mixin for errors that indicate a bug in the calling code."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None, **kwargs):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False
