"""Namespace parsing for eventqueues.

A namespace is a dotted string such as ``"user.login.audit"``.  The first
segment is the *main namespace*; the remaining segments are
*sub-namespaces*.  Every main namespace also owns a reserved ``PRIMARY``
queue, which no user-supplied segment can name.
"""

import enum
import re
from functools import lru_cache

from eventqueues.exceptions import InvalidNamespaceError


class Primary(enum.Enum):
    """Reserved sub-namespace key.

    Being an enum member rather than a ``str``, it can never collide with
    a segment parsed out of a user-supplied name.
    """

    PRIMARY = "primary"

    def __repr__(self) -> str:
        return "PRIMARY"


PRIMARY = Primary.PRIMARY


@lru_cache(maxsize=32)
def _separator_run(separator: str) -> re.Pattern[str]:
    """Compile a pattern matching one or more consecutive separators."""
    return re.compile(f"(?:{re.escape(separator)})+")


def parse_namespace(raw: str, separator: str = ".") -> list[str]:
    """Split a raw dotted name into canonical namespace segments.

    Surrounding whitespace is trimmed, runs of separators collapse into
    one, a single leading/trailing separator is dropped and every segment
    is stripped.  ``" .a..b. "`` therefore parses to ``["a", "b"]``.

    Args:
        raw: Raw namespace string.
        separator: Segment separator, matched literally.

    Returns:
        Ordered list of segments; element 0 is the main namespace.

    Raises:
        TypeError: If raw is not a string.
        InvalidNamespaceError: If any segment is empty after trimming.
    """
    if not isinstance(raw, str):
        raise TypeError(f"namespace must be str, got {type(raw).__name__}")

    collapsed = _separator_run(separator).sub(separator, raw.strip())
    if collapsed.startswith(separator):
        collapsed = collapsed[len(separator) :]
    if collapsed.endswith(separator):
        collapsed = collapsed[: -len(separator)]

    segments = [segment.strip() for segment in collapsed.split(separator)]
    if not all(segments):
        raise InvalidNamespaceError(
            f"invalid namespace {raw!r}: empty segment (separator {separator!r})"
        )
    return segments
