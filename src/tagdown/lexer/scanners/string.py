"""String literal scanner mixin."""

from tagdown.errors import UnclosedStringLiteralError
from tagdown.location import SourceLocation
from tagdown.tokens import Token, TokenType


class StringScannerMixin:
    """Mixin providing double-quoted string scanning.

    Strings have no escape sequences and may span lines. The closing
    quote is mandatory.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int

    def _advance(self) -> str:
        """Advance one character. Implemented by Lexer."""
        raise NotImplementedError

    def _offset(self, pos: int) -> int:
        """Reported offset of a character index. Implemented by Lexer."""
        raise NotImplementedError

    def _saved_location(self) -> SourceLocation:
        """Location saved at token start. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str | int, start_pos: int) -> Token:
        """Create token at saved location. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_string(self) -> Token:
        """Scan a string literal starting at the opening quote.

        Returns:
            STRING token whose value excludes the quotes.

        Raises:
            UnclosedStringLiteralError: End of input before the closing quote.
        """
        start = self._pos
        self._advance()  # opening quote

        close = self._source.find('"', self._pos)
        if close == -1:
            # Consume the rest so the reported end is where scanning stopped
            while self._pos < self._source_len:
                self._advance()
            raise UnclosedStringLiteralError(
                self._offset(start), self._offset(self._pos), self._saved_location()
            )

        while self._pos < close:
            self._advance()
        value = self._source[start + 1 : close]
        self._advance()  # closing quote
        return self._make_token(TokenType.STRING, value, start)
