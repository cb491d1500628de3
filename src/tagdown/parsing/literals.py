"""Literal parsing for the tagdown parser.

Grammar:
    literal      := Number range-suffix? | String | list
    list         := '[' (literal (',' literal)*)? ']'
    range-suffix := '..' Number?
"""

from collections.abc import Callable

from tagdown.errors import UnexpectedTokenError
from tagdown.nodes import List, Literal, Number, Range, String
from tagdown.tokens import Token, TokenType


class LiteralParsingMixin:
    """Mixin for parsing attribute values.

    Required Host Attributes:
        - _current: Token

    Required Host Methods:
        - _advance, _peek, _check, _consume, _unexpected, _parse_delimited

    """

    _current: Token

    def _advance(self) -> Token:
        raise NotImplementedError

    def _peek(self, offset: int = 1) -> Token:
        raise NotImplementedError

    def _check(self, token_type: TokenType) -> bool:
        raise NotImplementedError

    def _consume(self, token_type: TokenType) -> Token:
        raise NotImplementedError

    def _unexpected(self) -> UnexpectedTokenError:
        raise NotImplementedError

    def _parse_delimited[T](
        self,
        open_type: TokenType,
        close_type: TokenType,
        parse_item: Callable[[], T],
    ) -> tuple[list[T], Token, Token]:
        raise NotImplementedError

    def _parse_literal(self) -> Literal:
        """Parse a number, range, string or list."""
        token = self._current
        match token.type:
            case TokenType.NUMBER:
                # One token of lookahead separates a number from a range start
                if self._peek().type == TokenType.DOUBLE_DOT:
                    return self._parse_range()
                self._advance()
                return Number(token.value, location=token.location)  # type: ignore[arg-type]
            case TokenType.STRING:
                self._advance()
                return String(token.value, location=token.location)  # type: ignore[arg-type]
            case TokenType.LEFT_BRACKET:
                return self._parse_list()
            case _:
                raise self._unexpected()

    def _parse_list(self) -> List:
        """Parse a bracketed, comma-separated list of literals."""
        items, open_token, close_token = self._parse_delimited(
            TokenType.LEFT_BRACKET, TokenType.RIGHT_BRACKET, self._parse_literal
        )
        return List(tuple(items), location=open_token.location.span_to(close_token.location))

    def _parse_range(self) -> Range:
        """Parse ``Number '..' Number?``."""
        if not self._check(TokenType.NUMBER):
            raise self._unexpected()
        start_token = self._advance()
        dots = self._consume(TokenType.DOUBLE_DOT)

        if self._check(TokenType.NUMBER):
            end_token = self._advance()
            return Range(
                start_token.value,  # type: ignore[arg-type]
                end_token.value,  # type: ignore[arg-type]
                location=start_token.location.span_to(end_token.location),
            )
        return Range(
            start_token.value,  # type: ignore[arg-type]
            location=start_token.location.span_to(dots.location),
        )
