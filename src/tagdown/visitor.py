"""AST Visitor and rewrite helper for tagdown.

Provides a base visitor class with match-based dispatch and an immutable
rewrite function for frozen ASTs.

Example — collect tag names:

    class TagNames(BaseVisitor[None]):
        def __init__(self) -> None:
            self.names: list[str] = []

        def visit_tag(self, node: Tag) -> None:
            self.names.append(node.name)

    collector = TagNames()
    collector.visit(doc)

Example — rename a tag:

    def headings(node: Node) -> Node:
        if isinstance(node, Tag) and node.name == "title":
            return dataclasses.replace(node, name="h1")
        return node

    new_doc = rewrite(doc, headings)

Thread Safety:
    Visitors may accumulate mutable state; create one per thread. The
    rewrite function is pure — safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable

from tagdown.nodes import (
    Attribute,
    Document,
    List,
    Node,
    Number,
    Range,
    String,
    Tag,
    Text,
)


class BaseVisitor[T]:
    """Base AST visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Attributes and
    children are walked automatically after the ``visit_*`` call; list
    items are walked inside attribute values.

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method."""
        return None  # type: ignore[return-value]

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_tag(self, node: Tag) -> T:
        return self.visit_default(node)

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_attribute(self, node: Attribute) -> T:
        return self.visit_default(node)

    def visit_number(self, node: Number) -> T:
        return self.visit_default(node)

    def visit_string(self, node: String) -> T:
        return self.visit_default(node)

    def visit_list(self, node: List) -> T:
        return self.visit_default(node)

    def visit_range(self, node: Range) -> T:
        return self.visit_default(node)

    def _dispatch(self, node: Node) -> T:
        """Match-based dispatch to visit_* methods."""
        match node:
            case Document():
                return self.visit_document(node)
            case Tag():
                return self.visit_tag(node)
            case Text():
                return self.visit_text(node)
            case Attribute():
                return self.visit_attribute(node)
            case Number():
                return self.visit_number(node)
            case String():
                return self.visit_string(node)
            case List():
                return self.visit_list(node)
            case Range():
                return self.visit_range(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        """Visit nested nodes in source order."""
        match node:
            case Document():
                for child in node.children:
                    self.visit(child)
            case Tag():
                for attribute in node.attributes:
                    self.visit(attribute)
                for child in node.children:
                    self.visit(child)
            case Attribute():
                self.visit(node.value)
            case List():
                for item in node.items:
                    self.visit(item)


def rewrite[N: Node](node: N, fn: Callable[[Node], Node]) -> N:
    """Rebuild a tree bottom-up, applying ``fn`` to every node.

    Nested nodes are rewritten first, then ``fn`` sees the node with its
    rewritten children. Nodes whose nested nodes did not change are passed
    to ``fn`` as-is (no copy).

    Args:
        node: Root of the tree to rewrite.
        fn: Returns a replacement node, or its argument unchanged.

    Returns:
        The rewritten root.

    """
    match node:
        case Document():
            children = tuple(rewrite(child, fn) for child in node.children)
            if _changed(children, node.children):
                node = dataclasses.replace(node, children=children)
        case Tag():
            attributes = tuple(rewrite(a, fn) for a in node.attributes)
            children = tuple(rewrite(child, fn) for child in node.children)
            if _changed(attributes, node.attributes) or _changed(children, node.children):
                node = dataclasses.replace(node, attributes=attributes, children=children)
        case Attribute():
            value = rewrite(node.value, fn)
            if value is not node.value:
                node = dataclasses.replace(node, value=value)
        case List():
            items = tuple(rewrite(item, fn) for item in node.items)
            if _changed(items, node.items):
                node = dataclasses.replace(node, items=items)
    return fn(node)  # type: ignore[return-value]


def _changed(new: tuple[Node, ...], old: tuple[Node, ...]) -> bool:
    """Identity comparison; equality ignores locations, identity does not."""
    return len(new) != len(old) or any(a is not b for a, b in zip(new, old, strict=True))
