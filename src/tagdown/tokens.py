"""Token and TokenType definitions for the tagdown lexer.

The lexer produces a list of Token objects that the parser consumes.
Each Token has a type, a value and its position in the source.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from tagdown.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer."""

    # Document structure
    EOF = auto()

    # Payload-carrying tokens
    IDENTIFIER = auto()  # code-block, lang
    STRING = auto()  # "text"
    NUMBER = auto()  # 42

    # Delimiters
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACKET = auto()  # [
    RIGHT_BRACKET = auto()  # ]
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }

    # Separators
    DOUBLE_DOT = auto()  # ..
    DOT = auto()  # .
    COMMA = auto()  # ,
    COLON = auto()  # :


# Fixed lexemes for punctuation tokens, used for display and error messages
PUNCTUATION: dict[TokenType, str] = {
    TokenType.LEFT_PAREN: "(",
    TokenType.RIGHT_PAREN: ")",
    TokenType.LEFT_BRACKET: "[",
    TokenType.RIGHT_BRACKET: "]",
    TokenType.LEFT_BRACE: "{",
    TokenType.RIGHT_BRACE: "}",
    TokenType.DOUBLE_DOT: "..",
    TokenType.DOT: ".",
    TokenType.COMMA: ",",
    TokenType.COLON: ":",
}


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Equality compares ``type`` and ``value`` only, so tokens scanned from
    different positions of a source compare equal when they spell the same
    thing.

    Attributes:
        type: The token type
        value: Identifier or string text, the ``int`` for numbers,
            the lexeme for punctuation, ``""`` for EOF
        start: Start offset in source
        end: End offset in source (exclusive)
        lineno: Start line number (1-indexed)
        col: Start column (1-indexed)
        source_file: Optional source file path

    """

    type: TokenType
    value: str | int
    start: int = field(default=0, compare=False)
    end: int = field(default=0, compare=False)
    lineno: int = field(default=1, compare=False)
    col: int = field(default=1, compare=False)
    source_file: str | None = field(default=None, compare=False, repr=False)

    @classmethod
    def of_type(cls, token_type: TokenType) -> Token:
        """Build a position-less token of a fixed-lexeme type (for expectations)."""
        return cls(token_type, PUNCTUATION.get(token_type, ""))

    @property
    def location(self) -> SourceLocation:
        """Source location of this token."""
        return SourceLocation(
            lineno=self.lineno,
            col_offset=self.col,
            offset=self.start,
            end_offset=self.end,
            source_file=self.source_file,
        )

    def __str__(self) -> str:
        """Display the token the way it is spelled in source."""
        match self.type:
            case TokenType.EOF:
                return "end of input"
            case TokenType.STRING:
                return f'"{self.value}"'
            case TokenType.IDENTIFIER | TokenType.NUMBER:
                return str(self.value)
            case _:
                return f"`{self.value}`"

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if isinstance(val, str) and len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self.lineno}:{self.col})"
