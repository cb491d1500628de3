"""HTML transformer using StringBuilder pattern.

Renders typed AST to HTML. Tags become generic elements, text becomes
(escaped) text, and a per-tag dispatch table holds the special rules:
``code-block`` renders as a dedented ``<pre><code>`` block.

Thread Safety:
All per-render state lives in locals of transform(). Multiple threads can
share one HtmlTransformer instance.
"""

from collections.abc import Callable, Iterable, Sequence

from tagdown.errors import UnknownTagError
from tagdown.highlighting import has_highlighter, highlight
from tagdown.nodes import (
    Attribute,
    Document,
    List,
    Literal,
    Markup,
    Number,
    Range,
    String,
    Tag,
    Text,
)
from tagdown.renderers.protocol import top_level
from tagdown.stringbuilder import StringBuilder
from tagdown.utils.logger import get_logger
from tagdown.utils.text import dedent_code, escape_attribute, html_escape

logger = get_logger(__name__)

CODE_BLOCK = "code-block"

type TagRenderer = Callable[[Tag, StringBuilder], None]


def highlight_lines(literal: Literal | None, line_count: int) -> list[int]:
    """Collect 1-indexed line numbers selected by a ``highlights`` value.

    Numbers select one line, ranges are inclusive and open ranges run to the
    last line. Lists are flattened. Lines outside the code are dropped.

    Example:
        >>> highlight_lines(List((Number(1), Range(3, 5))), 10)
        [1, 3, 4, 5]
    """
    lines: set[int] = set()

    def collect(value: Literal) -> None:
        match value:
            case Number():
                lines.add(value.value)
            case Range():
                lines.update(value.to_range(line_count))
            case List():
                for item in value.items:
                    collect(item)
            case String():
                pass

    if literal is not None:
        collect(literal)
    return sorted(line for line in lines if 1 <= line <= line_count)


class HtmlTransformer:
    """Render AST to HTML.

    Usage:
        >>> from tagdown import parse
        >>> HtmlTransformer().transform(parse('div { div {"a"} div {"b"} }'))
        '<div><div>a</div><div>b</div></div>'

    Options:
        escape: HTML-escape text and attribute values (default True)
        emit_attributes: Render tag attributes as ``name="value"``
        highlight: Send ``code-block`` content with a ``lang`` attribute
            through the syntax highlighter
        allowed_tags: When given, raise UnknownTagError for generic tags
            not in this set

    """

    __slots__ = (
        "_escape",
        "_emit_attributes",
        "_highlight",
        "_allowed_tags",
        "_tag_renderers",
    )

    def __init__(
        self,
        *,
        escape: bool = True,
        emit_attributes: bool = False,
        highlight: bool = False,
        allowed_tags: Iterable[str] | None = None,
    ) -> None:
        self._escape = escape
        self._emit_attributes = emit_attributes
        self._highlight = highlight
        self._allowed_tags = frozenset(allowed_tags) if allowed_tags is not None else None
        self._tag_renderers: dict[str, TagRenderer] = {
            CODE_BLOCK: self._render_code_block,
        }

    def transform(self, nodes: Document | Sequence[Markup]) -> str:
        """Render a document (or its top-level nodes) to an HTML string.

        Raises:
            UnknownTagError: A tag outside ``allowed_tags``.
        """
        sb = StringBuilder()
        for node in top_level(nodes):
            self._render_node(node, sb)
        return sb.build()

    def _render_node(self, node: Markup, sb: StringBuilder) -> None:
        match node:
            case Text():
                sb.append(self._text(node.content))
            case Tag():
                self._render_tag(node, sb)

    def _render_tag(self, tag: Tag, sb: StringBuilder) -> None:
        """Dispatch special tags, render the rest as generic elements."""
        renderer = self._tag_renderers.get(tag.name)
        if renderer is not None:
            renderer(tag, sb)
            return

        if self._allowed_tags is not None and tag.name not in self._allowed_tags:
            raise UnknownTagError(tag.name, tag.location)

        attributes = self._render_attributes(tag.attributes) if self._emit_attributes else ""
        sb.append(f"<{tag.name}{attributes}>")
        for child in tag.children:
            self._render_node(child, sb)
        sb.append(f"</{tag.name}>")

    def _render_attributes(self, attributes: Sequence[Attribute]) -> str:
        """Render attributes as ``name="value"`` pairs, last value wins."""
        values: dict[str, str] = {}
        for attribute in attributes:
            values[attribute.name] = str(attribute.value)
        if not values:
            return ""
        pairs = (f'{name}="{self._attribute_value(value)}"' for name, value in values.items())
        return " " + " ".join(pairs)

    def _render_code_block(self, tag: Tag, sb: StringBuilder) -> None:
        """Render a dedented ``<pre><code>`` block.

        Only an installed highlighter takes the block; highlighter output is
        always escaped. Otherwise the plain block below honours ``escape``.
        """
        lang = tag.get("lang")
        language = lang.value if isinstance(lang, String) and lang.value else None

        if (
            self._highlight
            and language
            and all(isinstance(c, Text) for c in tag.children)
            and has_highlighter()
        ):
            code = dedent_code("".join(c.content for c in tag.children))  # type: ignore[union-attr]
            hl_lines = highlight_lines(tag.get("highlights"), code.count("\n") + 1)
            try:
                sb.append(highlight(code, language, hl_lines=hl_lines))
                return
            except Exception:
                # Highlighter failure falls back to the plain block below
                logger.debug("Syntax highlighting failed for language %r", language, exc_info=True)

        inner = StringBuilder()
        for child in tag.children:
            self._render_node(child, inner)

        lang_class = f' class="language-{self._attribute_value(language)}"' if language else ""
        sb.append(f"<pre><code{lang_class}>")
        sb.append(dedent_code(inner.build()))
        sb.append("</code></pre>")

    def _text(self, content: str) -> str:
        return html_escape(content) if self._escape else content

    def _attribute_value(self, value: str) -> str:
        return escape_attribute(value) if self._escape else value
