"""
tagdown — a small markup language of nested tags with typed attributes.

Source is a sequence of string nodes and tags. Tags carry optional
attributes whose values are numbers, strings, lists or numeric ranges:

    code-block(highlights: [1, 3..5], lang: "ts") {
        "source text"
    }

Quick Start:
    >>> from tagdown import parse, render
    >>> doc = parse('div { div {"item1"} div {"item2"} }')
    >>> render(doc)
    '<div><div>item1</div><div>item2</div></div>'

    >>> # Or use the high-level Tagdown class
    >>> from tagdown import Tagdown
    >>> td = Tagdown(emit_attributes=True)
    >>> td('a(href: "/") { "home" }')
    '<a href="/">home</a>'

Installation:
    pip install tagdown              # Core (zero deps)
    pip install tagdown[syntax]      # + Syntax highlighting via Rosettes
"""

from collections.abc import Iterable

from tagdown.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from tagdown.errors import (
    DuplicateAttributeError,
    ExpectedTokenError,
    LexError,
    NumberOverflowError,
    ParseError,
    RenderError,
    SourceEncodingError,
    SourceTooLargeError,
    TagdownError,
    UnclosedStringLiteralError,
    UnexpectedTokenError,
    UnknownTagError,
    UnrecognizedCharacterError,
)
from tagdown.lexer import Lexer
from tagdown.location import SourceLocation
from tagdown.nodes import (
    Attribute,
    Document,
    List,
    Literal,
    Markup,
    Node,
    Number,
    Range,
    String,
    Tag,
    Text,
)
from tagdown.parser import Parser
from tagdown.renderers.html import HtmlTransformer
from tagdown.renderers.json import JsonTransformer
from tagdown.renderers.protocol import Transformer
from tagdown.renderers.text import TextTransformer
from tagdown.serialization import from_dict, from_json, to_dict, to_json
from tagdown.tokens import Token, TokenType
from tagdown.visitor import BaseVisitor, rewrite

__version__ = "0.1.0"


def _parse_document(source: str | bytes, source_file: str | None) -> Document:
    """Parse with whatever config is active and wrap in a Document."""
    parser = Parser(source, source_file=source_file)
    children = tuple(parser.parse())
    loc = SourceLocation(
        lineno=1,
        col_offset=1,
        offset=0,
        end_offset=parser.end_offset,
        source_file=source_file,
    )
    return Document(children, location=loc)


def parse(
    source: str | bytes,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Document:
    """Parse tagdown source into a typed AST.

    Args:
        source: Source text, or UTF-8 bytes
        source_file: Optional source file path for error messages
        config: Parse configuration for this call. When None, the config
            active in the current context applies (see parse_config_context)

    Returns:
        Document holding the top-level nodes in source order

    Raises:
        ParseError: On the first lexing or syntax error.

    Example:
        >>> parse('"abc"').children
        (Text(content='abc'),)
    """
    if config is None:
        return _parse_document(source, source_file)
    with parse_config_context(config):
        return _parse_document(source, source_file)


def render(
    doc: Document,
    *,
    escape: bool = True,
    emit_attributes: bool = False,
    highlight: bool = False,
) -> str:
    """Render an AST Document to HTML.

    Args:
        doc: Document AST to render
        escape: HTML-escape text and attribute values
        emit_attributes: Render tag attributes as HTML attributes
        highlight: Enable syntax highlighting for code blocks

    Returns:
        HTML string
    """
    transformer = HtmlTransformer(
        escape=escape, emit_attributes=emit_attributes, highlight=highlight
    )
    return transformer.transform(doc)


class Tagdown:
    """High-level processor combining parser and HTML transformer.

    Usage:
        >>> td = Tagdown()
        >>> td('p { "Hello" }')
        '<p>Hello</p>'

        >>> doc = td.parse('row(gap: 2) {}')
        >>> doc.children[0].get("gap")
        Number(value=2)

    Thread Safety:
        Uses ContextVar for configuration. Safe to use multiple Tagdown
        instances concurrently from different threads.

    """

    __slots__ = ("_config", "_transformer")

    def __init__(
        self,
        *,
        escape: bool = True,
        emit_attributes: bool = False,
        highlight: bool = False,
        strict_attributes: bool = False,
        max_source_length: int | None = None,
        allowed_tags: Iterable[str] | None = None,
    ) -> None:
        """Initialize processor.

        Args:
            escape: HTML-escape text and attribute values
            emit_attributes: Render tag attributes as HTML attributes
            highlight: Enable syntax highlighting for code blocks
            strict_attributes: Reject repeated attribute names on a tag
            max_source_length: Reject longer sources (None = unlimited)
            allowed_tags: Restrict generic tags to this set when rendering
        """
        # Build immutable config once (reused across calls)
        self._config = ParseConfig(
            strict_attributes=strict_attributes,
            max_source_length=max_source_length,
        )
        self._transformer = HtmlTransformer(
            escape=escape,
            emit_attributes=emit_attributes,
            highlight=highlight,
            allowed_tags=allowed_tags,
        )

    def __call__(self, source: str | bytes) -> str:
        """Parse and render in one call."""
        return self.render(self.parse(source))

    def parse(self, source: str | bytes, *, source_file: str | None = None) -> Document:
        """Parse source into a Document using this processor's config."""
        with parse_config_context(self._config):
            return _parse_document(source, source_file)

    def parse_many(
        self,
        sources: Iterable[str | bytes],
        *,
        source_file: str | None = None,
    ) -> list[Document]:
        """Parse several sources, setting the config once.

        Example:
            >>> td = Tagdown()
            >>> docs = td.parse_many(['"a"', 'p {}'])
        """
        with parse_config_context(self._config):
            return [_parse_document(source, source_file) for source in sources]

    def render(self, doc: Document) -> str:
        """Render a Document to HTML."""
        return self._transformer.transform(doc)


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse",
    "render",
    "Tagdown",
    # Nodes
    "Node",
    "Document",
    "Markup",
    "Text",
    "Tag",
    "Attribute",
    "Literal",
    "Number",
    "String",
    "List",
    "Range",
    # Pipeline components
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "SourceLocation",
    # Transformers
    "Transformer",
    "HtmlTransformer",
    "TextTransformer",
    "JsonTransformer",
    # Visitor
    "BaseVisitor",
    "rewrite",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "TagdownError",
    "ParseError",
    "LexError",
    "UnrecognizedCharacterError",
    "UnclosedStringLiteralError",
    "NumberOverflowError",
    "SourceEncodingError",
    "UnexpectedTokenError",
    "ExpectedTokenError",
    "DuplicateAttributeError",
    "SourceTooLargeError",
    "RenderError",
    "UnknownTagError",
]
