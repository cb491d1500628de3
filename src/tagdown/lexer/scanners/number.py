"""Number literal scanner mixin."""

from tagdown.errors import NumberOverflowError
from tagdown.location import SourceLocation
from tagdown.tokens import Token, TokenType

# Numbers are unsigned 32-bit
MAX_NUMBER = 2**32 - 1
MAX_DIGITS = len(str(MAX_NUMBER))


def is_digit(char: str) -> bool:
    """ASCII decimal digit check (str.isdigit also accepts superscripts)."""
    return "0" <= char <= "9"


class NumberScannerMixin:
    """Mixin providing decimal number scanning."""

    _source: str
    _source_len: int
    _pos: int
    _col: int

    def _offset(self, pos: int) -> int:
        """Reported offset of a character index. Implemented by Lexer."""
        raise NotImplementedError

    def _saved_location(self) -> SourceLocation:
        """Location saved at token start. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str | int, start_pos: int) -> Token:
        """Create token at saved location. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_number(self) -> Token:
        """Scan a maximal run of decimal digits.

        Raises:
            NumberOverflowError: The value does not fit in 32 bits.
        """
        start = self._pos
        end = start
        source = self._source
        source_len = self._source_len
        while end < source_len and is_digit(source[end]):
            end += 1
        lexeme = source[start:end]
        # Long runs are rejected before int() to stay clear of its digit limit
        significant = lexeme.lstrip("0") or "0"
        if len(significant) > MAX_DIGITS or int(significant) > MAX_NUMBER:
            raise NumberOverflowError(
                lexeme, self._offset(start), self._offset(end), self._saved_location()
            )
        self._col += end - start
        self._pos = end
        return self._make_token(TokenType.NUMBER, int(significant), start)
