"""Recursive descent parser producing typed AST.

Consumes the token list from Lexer and builds typed AST nodes.
Produces immutable (frozen) dataclass nodes for thread-safety.

Architecture:
The parser uses a mixin-based design, one mixin per syntactic layer:
- `TokenNavigationMixin`: Token list traversal and delimited sequences
- `LiteralParsingMixin`: literal, list, range
- `MarkupParsingMixin`: node, tag, attributes, attribute

Grammar:
    document     := node* EOF
    node         := String | tag
    tag          := Identifier attributes? '{' node* '}'
    attributes   := '(' (attribute (',' attribute)*)? ')'
    attribute    := Identifier ':' literal
    literal      := Number range-suffix? | String | list
    list         := '[' (literal (',' literal)*)? ']'
    range-suffix := '..' Number?

Thread Safety:
- Parser produces immutable AST (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)

"""

from __future__ import annotations

from tagdown.config import ParseConfig, get_parse_config
from tagdown.errors import SourceTooLargeError
from tagdown.lexer import Lexer
from tagdown.nodes import Attribute, Literal, Markup
from tagdown.parsing import (
    LiteralParsingMixin,
    MarkupParsingMixin,
    TokenNavigationMixin,
)
from tagdown.tokens import Token, TokenType
from tagdown.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    TokenNavigationMixin,
    LiteralParsingMixin,
    MarkupParsingMixin,
):
    """Recursive descent parser for tagdown.

    The whole source is tokenized before parsing starts. Parsing uses one
    token of lookahead and never backtracks. The first error aborts the
    parse; no partial tree is returned.

    Usage:
        >>> Parser('div { "hello" }').parse()
        [Tag(name='div', attributes=(), children=(Text(content='hello'),))]

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local).
        The resulting AST is immutable and thread-safe.

    """

    __slots__ = (
        "_lexer",
        "_source",
        "_source_file",
        "_tokens",
        "_tokens_len",
        "_pos",
        "_current",
    )

    def __init__(
        self,
        source: str | bytes,
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before parsing
        if you need non-default configuration.

        Args:
            source: Source text, or UTF-8 bytes
            source_file: Optional source file path for error messages

        """
        self._lexer = Lexer(source, source_file=source_file)
        self._source = self._lexer.source
        self._source_file = source_file
        self._tokens: list[Token] = []
        self._tokens_len = 0
        self._pos = 0
        self._current = Token(TokenType.EOF, "")

    @property
    def source(self) -> str:
        """The decoded source text."""
        return self._source

    @property
    def end_offset(self) -> int:
        """Offset just past the source, in the units tokens use.

        Byte length for bytes input, character length for text.
        """
        if self._tokens:
            return self._tokens[-1].end
        return len(self._source)

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (thread-local)."""
        return get_parse_config()

    def parse(self) -> list[Markup]:
        """Parse source into top-level markup nodes.

        Returns:
            Top-level nodes in source order.

        Raises:
            ParseError: On the first lexing or syntax error.

        """
        self._scan()
        nodes: list[Markup] = []
        while not self._at_end():
            nodes.append(self._parse_node())
        logger.debug("Parsed %d top-level nodes", len(nodes))
        return nodes

    def parse_literal(self) -> Literal:
        """Parse source holding exactly one literal, e.g. ``[1, 3..5]``."""
        self._scan()
        literal = self._parse_literal()
        self._consume(TokenType.EOF)
        return literal

    def parse_attribute(self) -> Attribute:
        """Parse source holding exactly one attribute, e.g. ``lang: "ts"``."""
        self._scan()
        attribute = self._parse_attribute()
        self._consume(TokenType.EOF)
        return attribute

    def _scan(self) -> None:
        """Tokenize the whole source and position on the first token."""
        limit = self._config.max_source_length
        if limit is not None and len(self._source) > limit:
            raise SourceTooLargeError(len(self._source), limit)

        self._tokens = self._lexer.scan_tokens()
        self._tokens_len = len(self._tokens)
        self._pos = 0
        self._current = self._tokens[0]
