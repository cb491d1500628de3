"""Token navigation utilities for the tagdown parser.

Provides mixin for token list navigation and the shared shape of
bracketed, comma-separated sequences.
"""

from collections.abc import Callable, Sequence

from tagdown.errors import ExpectedTokenError, UnexpectedTokenError
from tagdown.tokens import Token, TokenType


class TokenNavigationMixin:
    """Mixin providing token list navigation methods.

    Required Host Attributes:
        - _tokens: Sequence[Token] (always ends with EOF)
        - _tokens_len: int
        - _pos: int
        - _current: Token

    The parser never moves past the EOF token, so ``_current`` is always
    a real token.

    """

    _tokens: Sequence[Token]
    _tokens_len: int
    _pos: int
    _current: Token

    def _at_end(self) -> bool:
        """Check if at end of token list."""
        return self._current.type == TokenType.EOF

    def _check(self, token_type: TokenType) -> bool:
        """Whether the current token has the given type."""
        return self._current.type == token_type

    def _advance(self) -> Token:
        """Consume the current token and return it."""
        token = self._current
        if self._pos < self._tokens_len - 1:
            self._pos += 1
            self._current = self._tokens[self._pos]
        return token

    def _peek(self, offset: int = 1) -> Token:
        """Peek at token at offset from current position (EOF past the end)."""
        pos = min(self._pos + offset, self._tokens_len - 1)
        return self._tokens[pos]

    def _consume(self, token_type: TokenType) -> Token:
        """Consume a required punctuation token.

        Raises:
            ExpectedTokenError: The current token has another type.
        """
        if self._current.type != token_type:
            raise ExpectedTokenError(
                at=self._current.start,
                expected=Token.of_type(token_type),
                got=self._current,
            )
        return self._advance()

    def _unexpected(self) -> UnexpectedTokenError:
        """Build the error for a token that starts no production here."""
        return UnexpectedTokenError(at=self._current.start, token=self._current)

    def _parse_delimited[T](
        self,
        open_type: TokenType,
        close_type: TokenType,
        parse_item: Callable[[], T],
    ) -> tuple[list[T], Token, Token]:
        """Parse ``open (item (',' item)*)? close``.

        Shared by attribute lists and literal lists. Zero items are allowed;
        an item after a comma is mandatory.

        Returns:
            (items, open token, close token)
        """
        open_token = self._consume(open_type)
        items: list[T] = []
        if not self._check(close_type):
            items.append(parse_item())
            while self._check(TokenType.COMMA):
                self._advance()
                items.append(parse_item())
        close_token = self._consume(close_type)
        return items, open_token, close_token
