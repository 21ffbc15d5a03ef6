"""
String helpers that tolerate None.

"Blank" here means None or the empty string; is_blank_or_whitespace also
treats whitespace-only text as blank.
"""

import re
from typing import Any, Iterable, Optional, Union

Pattern = Union[str, "re.Pattern[str]"]


def is_blank(value: Optional[str]) -> bool:
    """Return True if value is None or empty."""
    return value is None or len(value) == 0


def is_blank_or_whitespace(value: Optional[str]) -> bool:
    """
    Return True if value is None or empty after stripping whitespace.

    str.strip() removes all Unicode whitespace, so text made only of
    characters such as U+00A0 (no-break space) counts as blank. A trim that
    only drops control characters and spaces would keep them.
    """
    return value is None or len(value.strip()) == 0


def is_not_blank(value: Optional[str]) -> bool:
    """Return True if value is neither None nor empty."""
    return not is_blank(value)


def or_empty(value: Optional[str]) -> str:
    """Return value, or the empty string if value is None."""
    return "" if value is None else value


def split_non_empty(value: Optional[str], pattern: Pattern) -> list[str]:
    """
    Split text on a regular expression and keep only the non-blank parts.

    Each segment between two matches is stripped of surrounding whitespace;
    segments that end up empty are dropped. Unlike re.split, capture groups
    in the pattern never add segments of their own.
    Stripping uses str.strip(), so Unicode whitespace such as U+00A0 is
    removed from segment ends as well.

    Args:
        value: Text to split, may be None
        pattern: Regular expression as a string or compiled pattern

    Returns:
        Stripped segments in order of appearance
    """
    if is_blank(value):
        return []

    segments = []
    start = 0
    for match in re.finditer(pattern, value):
        segments.append(value[start:match.start()])
        start = match.end()
    segments.append(value[start:])

    result = []
    for segment in segments:
        trimmed = segment.strip()
        if trimmed:
            result.append(trimmed)
    return result


def join(delimiter: str, elements: Optional[Iterable[Any]]) -> str:
    """
    Join the text form of each element with a delimiter between them.

    None elements are rendered as "null". Other elements use str(), so
    booleans come out as "True" and "False" rather than lowercase.

    Args:
        delimiter: Text placed between consecutive elements
        elements: Elements to join, may be None

    Returns:
        Joined text, empty if elements is None or has no members
    """
    if elements is None:
        return ""

    return delimiter.join("null" if element is None else str(element) for element in elements)
