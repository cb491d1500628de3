"""Single-pass lexer producing the complete token list.

Scans left to right with one character of lookahead. Whitespace is
skipped, punctuation is dispatched on a single character, and strings,
identifiers and numbers are handed to their scanner mixins.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

import codecs
from collections.abc import Iterator
from itertools import accumulate

from tagdown.errors import SourceEncodingError, UnrecognizedCharacterError
from tagdown.lexer.scanners import (
    IdentifierScannerMixin,
    NumberScannerMixin,
    StringScannerMixin,
)
from tagdown.lexer.scanners.identifier import is_identifier_start
from tagdown.lexer.scanners.number import is_digit
from tagdown.location import SourceLocation
from tagdown.tokens import Token, TokenType
from tagdown.utils.logger import get_logger

logger = get_logger(__name__)

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
}


def decode_source(source: str | bytes | bytearray | memoryview) -> str:
    """Return source as text, decoding byte input as UTF-8.

    A leading byte order mark is dropped.

    Raises:
        SourceEncodingError: Byte input is not valid UTF-8. The position
            counts from the first byte of the input, BOM included.
    """
    if isinstance(source, str):
        return source
    data = bytes(source)
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        # utf-8-sig reports positions after the stripped BOM
        bom = len(codecs.BOM_UTF8) if data.startswith(codecs.BOM_UTF8) else 0
        raise SourceEncodingError(exc.start + bom, exc.reason) from exc


def _utf8_width(char: str) -> int:
    code = ord(char)
    if code < 0x80:
        return 1
    if code < 0x800:
        return 2
    if code < 0x10000:
        return 3
    return 4


def byte_offset_table(
    source: str | bytes | bytearray | memoryview, text: str
) -> list[int] | None:
    """Map character indexes of ``text`` to byte offsets into ``source``.

    Entry ``i`` is the byte offset of character ``i``; the extra last entry
    is the byte length. Returns None when offsets need no translation
    (text input, or ASCII bytes without a BOM).

    Example:
        >>> byte_offset_table('"é"'.encode(), '"é"')
        [0, 1, 3, 4]
    """
    if isinstance(source, str):
        return None
    base = len(codecs.BOM_UTF8) if bytes(source[:3]) == codecs.BOM_UTF8 else 0
    if not base and text.isascii():
        return None
    return list(accumulate(map(_utf8_width, text), initial=base))


class Lexer(
    StringScannerMixin,
    IdentifierScannerMixin,
    NumberScannerMixin,
):
    """Tokenizer for tagdown source.

    Usage:
        >>> Lexer("row(gap: 1..3) {}").scan_tokens()[:2]
        [Token(IDENTIFIER, 'row', 1:1), Token(LEFT_PAREN, '(', 1:4)]

    Errors:
        The first lexical error stops scanning; there is no recovery.
        Errors carry the source offset plus line and column.

    Offsets:
        Token and error offsets are byte offsets into the input when it is
        given as bytes (a BOM counts), character offsets when it is text.
        Columns always count characters.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source)
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_saved_pos",
        "_saved_lineno",
        "_saved_col",
        "_byte_offsets",  # Char index -> byte offset, None when identical
    )

    def __init__(
        self,
        source: str | bytes,
        source_file: str | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Source text, or UTF-8 bytes
            source_file: Optional source file path for error messages
        """
        self._source = decode_source(source)
        self._source_len = len(self._source)
        self._byte_offsets = byte_offset_table(source, self._source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file

        # Location of the token being scanned
        self._saved_pos = 0
        self._saved_lineno = 1
        self._saved_col = 1

    @property
    def source(self) -> str:
        """The decoded source text."""
        return self._source

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source into a list of tokens.

        Returns:
            All tokens, terminated by exactly one EOF token.

        Raises:
            LexError: On the first lexical error.
        """
        tokens = list(self.tokenize())
        logger.debug("Scanned %d tokens from %d characters", len(tokens), self._source_len)
        return tokens

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream.

        Yields:
            Token objects one at a time, EOF last.

        Complexity: O(n) where n = len(source)
        """
        while True:
            self._skip_whitespace()
            if self._pos >= self._source_len:
                break
            yield self._scan_token()

        self._save_location()
        yield self._make_token(TokenType.EOF, "", self._pos)

    def _scan_token(self) -> Token:
        """Scan one token starting at a non-whitespace character."""
        self._save_location()
        start = self._pos
        char = self._source[start]

        token_type = _SINGLE_CHAR_TOKENS.get(char)
        if token_type is not None:
            self._advance()
            return self._make_token(token_type, char, start)

        if char == ".":
            self._advance()
            if self._peek() == ".":
                self._advance()
                return self._make_token(TokenType.DOUBLE_DOT, "..", start)
            return self._make_token(TokenType.DOT, ".", start)

        if char == '"':
            return self._scan_string()
        if is_digit(char):
            return self._scan_number()
        if is_identifier_start(char):
            return self._scan_identifier()

        raise UnrecognizedCharacterError(char, self._offset(start), self._saved_location())

    # =========================================================================
    # Character navigation helpers
    # =========================================================================

    def _skip_whitespace(self) -> None:
        """Advance past whitespace, tracking lines."""
        source = self._source
        source_len = self._source_len
        while self._pos < source_len and source[self._pos].isspace():
            self._advance()

    def _peek(self) -> str:
        """Peek at current character without advancing.

        Returns:
            Current character or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""
        return self._source[self._pos]

    def _advance(self) -> str:
        """Advance position by one character.

        Updates line/column tracking.

        Returns:
            The consumed character, or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""

        char = self._source[self._pos]
        self._pos += 1

        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        return char

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Save current location as the start of the next token."""
        self._saved_pos = self._pos
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _saved_location(self) -> SourceLocation:
        """Location of the token currently being scanned."""
        return SourceLocation(
            lineno=self._saved_lineno,
            col_offset=self._saved_col,
            offset=self._offset(self._saved_pos),
            end_offset=self._offset(self._pos),
            source_file=self._source_file,
        )

    def _make_token(self, token_type: TokenType, value: str | int, start_pos: int) -> Token:
        """Create a Token from start_pos to the current position."""
        return Token(
            type=token_type,
            value=value,
            start=self._offset(start_pos),
            end=self._offset(self._pos),
            lineno=self._saved_lineno,
            col=self._saved_col,
            source_file=self._source_file,
        )

    def _offset(self, pos: int) -> int:
        """Reported offset of character index ``pos``.

        Byte offsets into the original input when it was given as bytes,
        character offsets otherwise.
        """
        if self._byte_offsets is None:
            return pos
        return self._byte_offsets[pos]
