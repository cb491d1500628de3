"""Plain-text transformer.

Drops tag boundaries and keeps text content in document order.
``code-block`` content is dedented the same way the HTML transformer
does it. No escaping.

Example:
    >>> from tagdown import parse
    >>> TextTransformer().transform(parse('p { "a" b { "b" } }'))
    'ab'
"""

from collections.abc import Sequence

from tagdown.nodes import Document, Markup, Tag, Text
from tagdown.renderers.html import CODE_BLOCK
from tagdown.renderers.protocol import top_level
from tagdown.stringbuilder import StringBuilder
from tagdown.utils.text import dedent_code


class TextTransformer:
    """Render AST to plain text."""

    __slots__ = ()

    def transform(self, nodes: Document | Sequence[Markup]) -> str:
        """Render text content in document order."""
        sb = StringBuilder()
        for node in top_level(nodes):
            self._render_node(node, sb)
        return sb.build()

    def _render_node(self, node: Markup, sb: StringBuilder) -> None:
        match node:
            case Text():
                sb.append(node.content)
            case Tag(name=name) if name == CODE_BLOCK:
                inner = StringBuilder()
                for child in node.children:
                    self._render_node(child, inner)
                sb.append(dedent_code(inner.build()))
            case Tag():
                for child in node.children:
                    self._render_node(child, sb)
