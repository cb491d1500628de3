"""Transformer protocol — stable interface for AST renderers.

Any object with ``transform(nodes) -> item`` conforms to this protocol.
The built-in ``HtmlTransformer`` is the reference implementation;
alternative renderers can be substituted without touching the parser.

Example:
    from tagdown.renderers.protocol import Transformer

    def render_page(transformer: Transformer[str], doc: Document) -> str:
        return transformer.transform(doc)

"""

from collections.abc import Sequence
from typing import Protocol

from tagdown.nodes import Document, Markup


class Transformer[T](Protocol):
    """Protocol for AST transformers.

    Implementations accept a Document (or its top-level nodes) and return
    a renderer-defined item. They only read the tree.

    """

    def transform(self, nodes: Document | Sequence[Markup]) -> T:
        """Render a parsed document.

        Args:
            nodes: The document, or its top-level nodes in order.

        Returns:
            Rendered output.

        """
        ...


def top_level(nodes: Document | Sequence[Markup]) -> Sequence[Markup]:
    """Top-level nodes of whatever a transformer was handed."""
    if isinstance(nodes, Document):
        return nodes.children
    return nodes
