"""
Contract violation errors.

Raised synchronously before any work is done when a caller breaks the
argument contract of a utility function.
"""

from typing import Any, Optional

from .recovery import UnrecoverableError


class PreconditionError(UnrecoverableError, ValueError):
    """A required argument was missing or None."""

    def __init__(self, message: str, argument: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.argument = argument


def require(value: Any, argument: str) -> Any:
    """
    Fail fast when a required argument is None.

    Args:
        value: Argument value supplied by the caller
        argument: Parameter name, used in the error message

    Returns:
        The value unchanged

    Raises:
        PreconditionError: If value is None
    """
    if value is None:
        raise PreconditionError(f"'{argument}' must not be None", argument=argument)
    return value
