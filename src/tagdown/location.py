"""Source location tracking for error messages and debugging.

Provides SourceLocation dataclass for tracking positions in source text.
Used by tokens, AST nodes and errors.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    Line and column are 1-indexed and count characters. Offsets are
    0-indexed: byte offsets when the source was given as bytes, character
    offsets when it was given as text.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in source
        end_offset: Absolute end offset in source (exclusive)
        source_file: Source file path (optional)

    Examples:
        >>> loc = SourceLocation(lineno=3, col_offset=5, source_file="page.td")
        >>> str(loc)
        'page.td:3:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.td:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a new location spanning from this location to end."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col_offset,
            offset=self.offset,
            end_offset=end.end_offset or end.offset,
            source_file=self.source_file,
        )

    @classmethod
    def from_offset(
        cls, source: str, offset: int, source_file: str | None = None
    ) -> SourceLocation:
        """Compute line and column for an offset into source.

        Offsets past the end of source are clamped to the end.
        """
        offset = max(0, min(offset, len(source)))
        lineno = source.count("\n", 0, offset) + 1
        line_start = source.rfind("\n", 0, offset) + 1
        return cls(
            lineno=lineno,
            col_offset=offset - line_start + 1,
            offset=offset,
            end_offset=offset,
            source_file=source_file,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create an unknown/placeholder location.

        Use for AST nodes created synthetically or when location is unavailable.
        """
        return cls(lineno=0, col_offset=0)
