"""AST serialization — JSON round-trip for tagdown AST nodes.

Converts typed AST nodes to/from JSON-compatible dicts. Useful for:
- Handing the tree to tools in other languages
- Caching parsed documents to disk
- Debugging and inspection

All output is deterministic (sorted keys).

Example:
    from tagdown import parse
    from tagdown.serialization import to_json, from_json

    doc = parse('code-block(lang: "ts") { "let x = 1;" }')
    restored = from_json(to_json(doc))
    assert doc == restored

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from tagdown.location import SourceLocation
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

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type[Node]] = {
    "Document": Document,
    "Tag": Tag,
    "Text": Text,
    "Attribute": Attribute,
    "Number": Number,
    "String": String,
    "List": List,
    "Range": Range,
}


def to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.
    Recursively serializes child nodes and SourceLocation objects.

    Args:
        node: Any tagdown AST node.

    Returns:
        Dict with ``_type`` and all node fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, Node):
        return to_dict(value)
    if isinstance(value, SourceLocation):
        return {
            "_type": "SourceLocation",
            "lineno": value.lineno,
            "col_offset": value.col_offset,
            "offset": value.offset,
            "end_offset": value.end_offset,
            "source_file": value.source_file,
        }
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, None
    return value


def from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a typed AST node from a dict.

    Uses the ``_type`` discriminator to determine the node class.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed AST node (frozen dataclass).

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(data[f.name])

    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        type_name = value.get("_type")
        if type_name == "SourceLocation":
            return SourceLocation(
                lineno=value["lineno"],
                col_offset=value["col_offset"],
                offset=value.get("offset", 0),
                end_offset=value.get("end_offset", 0),
                source_file=value.get("source_file"),
            )
        if type_name is not None:
            return from_dict(value)
        return value
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document AST to a JSON string.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string with sorted keys.

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> Document:
    """Deserialize a Document AST from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a Document.

    """
    raw = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object, got {type(raw).__name__}"
        raise ValueError(msg)
    node = from_dict(raw)
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise ValueError(msg)
    return node
