"""JSON transformer — the structured-document serializer behind the
Transformer contract.

Example:
    >>> from tagdown import parse
    >>> JsonTransformer().transform(parse('"hi"'))[:30]
    '{"_type": "Document", "childre'
"""

from collections.abc import Sequence

from tagdown.nodes import Document, Markup
from tagdown.serialization import to_json


class JsonTransformer:
    """Render the tree as deterministic JSON (see tagdown.serialization)."""

    __slots__ = ("_indent",)

    def __init__(self, *, indent: int | None = None) -> None:
        self._indent = indent

    def transform(self, nodes: Document | Sequence[Markup]) -> str:
        """Serialize a document; bare node sequences are wrapped in one."""
        doc = nodes if isinstance(nodes, Document) else Document(tuple(nodes))
        return to_json(doc, indent=self._indent)
