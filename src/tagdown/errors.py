"""Exception classes for tagdown.

Lexing and parsing failures share one channel: every lexer error derives
from ParseError, so callers of ``parse()`` catch a single type.

Hierarchy:
TagdownError
├── ParseError
│   ├── LexError
│   │   ├── UnrecognizedCharacterError
│   │   ├── UnclosedStringLiteralError
│   │   ├── NumberOverflowError
│   │   └── SourceEncodingError
│   ├── UnexpectedTokenError
│   ├── ExpectedTokenError
│   ├── DuplicateAttributeError
│   └── SourceTooLargeError
└── RenderError
    └── UnknownTagError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tagdown.location import SourceLocation
    from tagdown.tokens import Token


class TagdownError(Exception):
    """Base exception for all tagdown errors."""

    pass


class ParseError(TagdownError):
    """Error while turning source text into an AST.

    Carries the source offset of the failure plus line and column when
    known.
    """

    def __init__(
        self,
        message: str,
        position: int | None = None,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize parse error with optional location.

        Args:
            message: Error description
            position: Offset into the source where the error occurred
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.position = position
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")

    @staticmethod
    def _where(location: SourceLocation | None) -> dict[str, int | str | None]:
        if location is None:
            return {}
        return {
            "lineno": location.lineno,
            "col_offset": location.col_offset,
            "source_file": location.source_file,
        }


class LexError(ParseError):
    """Error during tokenization. Lexing stops at the first one."""

    pass


class UnrecognizedCharacterError(LexError):
    """A character outside the token grammar."""

    def __init__(
        self, character: str, position: int, location: SourceLocation | None = None
    ) -> None:
        self.character = character
        super().__init__(
            f"Unrecognized character {character!r} at position {position}",
            position,
            **self._where(location),
        )


class UnclosedStringLiteralError(LexError):
    """A string literal reached end of input without its closing quote."""

    def __init__(
        self, start: int, end: int, location: SourceLocation | None = None
    ) -> None:
        self.start = start
        self.end = end
        super().__init__(
            f"Unclosed string literal at start: {start} end: {end}",
            start,
            **self._where(location),
        )


class NumberOverflowError(LexError):
    """A number literal does not fit in an unsigned 32-bit integer."""

    def __init__(
        self, lexeme: str, start: int, end: int, location: SourceLocation | None = None
    ) -> None:
        self.lexeme = lexeme
        self.start = start
        self.end = end
        super().__init__(
            f"Number {lexeme} does not fit in 32 bits",
            start,
            **self._where(location),
        )


class SourceEncodingError(LexError):
    """Byte input is not valid UTF-8."""

    def __init__(self, position: int, reason: str = "invalid utf-8") -> None:
        self.reason = reason
        super().__init__(f"Source is not valid UTF-8 at byte {position}: {reason}", position)


class UnexpectedTokenError(ParseError):
    """A token that cannot start a node, attribute or literal."""

    def __init__(self, at: int, token: Token) -> None:
        self.at = at
        self.token = token
        super().__init__(
            f"Unexpected token {token} at {at}. "
            "Expected an identifier, a literal or a string",
            at,
            **self._where(token.location),
        )


class ExpectedTokenError(ParseError):
    """A specific delimiter was required and something else was found."""

    def __init__(self, at: int, expected: Token, got: Token) -> None:
        self.at = at
        self.expected = expected
        self.got = got
        super().__init__(
            f"Expected token {expected} and got {got} at {at}",
            at,
            **self._where(got.location),
        )


class DuplicateAttributeError(ParseError):
    """An attribute name repeated on one tag (strict attributes only)."""

    def __init__(
        self, name: str, tag: str, at: int, location: SourceLocation | None = None
    ) -> None:
        self.name = name
        self.tag = tag
        self.at = at
        super().__init__(
            f"Duplicate attribute {name!r} on tag {tag!r}",
            at,
            **self._where(location),
        )


class SourceTooLargeError(ParseError):
    """Source longer than the configured ``max_source_length``."""

    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(f"Source length {length} exceeds limit of {limit}")


class RenderError(TagdownError):
    """Error while transforming an AST into output.

    Raised when a transformer is given a tree it refuses to render.
    """

    pass


class UnknownTagError(RenderError):
    """A tag outside the transformer's allow-list."""

    def __init__(self, name: str, location: SourceLocation | None = None) -> None:
        self.name = name
        self.location = location
        where = f" at {location}" if location is not None and location.lineno else ""
        super().__init__(f"Unknown tag {name!r}{where}")
