"""Identifier scanner mixin."""

from tagdown.tokens import Token, TokenType


def is_identifier_start(char: str) -> bool:
    """Identifiers start with an alphabetic character."""
    return char.isalpha()


def is_identifier_char(char: str) -> bool:
    """Identifiers continue with letters, digits, underscores and hyphens."""
    return char.isalnum() or char == "_" or char == "-"


class IdentifierScannerMixin:
    """Mixin providing identifier scanning.

    Hyphens are allowed after the first character so kebab-case names
    such as ``code-block`` are single identifiers.

    """

    _source: str
    _source_len: int
    _pos: int
    _col: int

    def _make_token(self, token_type: TokenType, value: str | int, start_pos: int) -> Token:
        """Create token at saved location. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_identifier(self) -> Token:
        """Scan a maximal identifier run starting at the current position."""
        start = self._pos
        end = start + 1
        source = self._source
        source_len = self._source_len
        while end < source_len and is_identifier_char(source[end]):
            end += 1
        # Identifiers never contain newlines, so the column moves in one step
        self._col += end - start
        self._pos = end
        return self._make_token(TokenType.IDENTIFIER, source[start:end], start)

