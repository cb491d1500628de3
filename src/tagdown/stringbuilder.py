"""StringBuilder for O(n) string accumulation.

Appends to a list and joins once at the end, instead of repeated string
concatenation while walking nested tags.

Thread Safety:
StringBuilder instances are local to each transform() call.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
        >>> sb = StringBuilder()
        >>> sb.append("<p>").append("hi").append("</p>").build()
        '<p>hi</p>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped); returns self."""
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)
