"""Node, tag and attribute parsing for the tagdown parser.

Grammar:
    node       := String | tag
    tag        := Identifier attributes? '{' node* '}'
    attributes := '(' (attribute (',' attribute)*)? ')'
    attribute  := Identifier ':' literal
"""

from collections.abc import Callable

from tagdown.config import ParseConfig
from tagdown.errors import DuplicateAttributeError, UnexpectedTokenError
from tagdown.nodes import Attribute, Literal, Markup, Tag, Text
from tagdown.tokens import Token, TokenType


class MarkupParsingMixin:
    """Mixin for parsing markup nodes.

    Required Host Attributes:
        - _current: Token
        - _config: ParseConfig

    Required Host Methods:
        - _advance, _check, _consume, _unexpected, _parse_delimited,
          _parse_literal

    """

    _current: Token

    @property
    def _config(self) -> ParseConfig:
        raise NotImplementedError

    def _advance(self) -> Token:
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
        raise NotImplementedError

    def _parse_node(self) -> Markup:
        """Parse a string node or a tag."""
        token = self._current
        match token.type:
            case TokenType.STRING:
                self._advance()
                return Text(token.value, location=token.location)  # type: ignore[arg-type]
            case TokenType.IDENTIFIER:
                return self._parse_tag()
            case _:
                raise self._unexpected()

    def _parse_tag(self) -> Tag:
        """Parse ``Identifier attributes? '{' node* '}'``."""
        if not self._check(TokenType.IDENTIFIER):
            raise self._unexpected()
        name_token = self._advance()
        name: str = name_token.value  # type: ignore[assignment]

        attributes: tuple[Attribute, ...] = ()
        if self._check(TokenType.LEFT_PAREN):
            attributes = self._parse_attributes(name)

        self._consume(TokenType.LEFT_BRACE)
        children: list[Markup] = []
        # EOF inside a body falls through to _consume, which names '}'
        while not self._check(TokenType.RIGHT_BRACE) and not self._check(TokenType.EOF):
            children.append(self._parse_node())
        close = self._consume(TokenType.RIGHT_BRACE)

        return Tag(
            name,
            attributes,
            tuple(children),
            location=name_token.location.span_to(close.location),
        )

    def _parse_attributes(self, tag_name: str) -> tuple[Attribute, ...]:
        """Parse a parenthesized attribute list."""
        attributes, _, _ = self._parse_delimited(
            TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN, self._parse_attribute
        )
        if self._config.strict_attributes:
            seen: set[str] = set()
            for attribute in attributes:
                if attribute.name in seen:
                    raise DuplicateAttributeError(
                        attribute.name,
                        tag_name,
                        attribute.location.offset,
                        attribute.location,
                    )
                seen.add(attribute.name)
        return tuple(attributes)

    def _parse_attribute(self) -> Attribute:
        """Parse ``Identifier ':' literal``."""
        if not self._check(TokenType.IDENTIFIER):
            raise self._unexpected()
        name_token = self._advance()
        self._consume(TokenType.COLON)
        value = self._parse_literal()
        return Attribute(
            name_token.value,  # type: ignore[arg-type]
            value,
            location=name_token.location.span_to(value.location),
        )
