"""Typed AST nodes for tagdown.

All AST nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Pattern matching: match statements work naturally

Node Hierarchy:
Node (base)
├── Document          ordered forest of top-level markup
├── Markup
│   ├── Text          "string content"
│   └── Tag           name(attr: value, ...) { children }
├── Attribute         name: literal
└── Literal
    ├── Number        42
    ├── String        "text"
    ├── List          [literal, ...]
    └── Range         1..3 or 1..

Every node carries a keyword-only ``location`` that is excluded from
equality and repr, so two trees parsed from differently formatted
sources compare equal when they have the same structure.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from tagdown.location import SourceLocation

_UNKNOWN_LOCATION = SourceLocation.unknown()


# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes.

    All nodes track their source location for error messages and debugging.

    """

    location: SourceLocation = field(
        default=_UNKNOWN_LOCATION, compare=False, repr=False, kw_only=True
    )


# =============================================================================
# Literal Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Number(Node):
    """Unsigned 32-bit integer literal.

    Source: 42

    """

    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class String(Node):
    """String literal. May span lines; no escapes.

    Source: "text"

    """

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class List(Node):
    """Bracketed list of literals, possibly nested.

    Source: [1, 2..4, "x", [5]]

    """

    items: tuple[Literal, ...] = ()

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self.items) + "]"


@dataclass(frozen=True, slots=True)
class Range(Node):
    """Numeric range with a mandatory start and optional end.

    Source: 1..3 (both endpoints) or 1.. (open-ended)

    The grammar only fixes the endpoints. Consumers in this package read
    ranges as inclusive, see ``to_range``.

    """

    start: int
    end: int | None = None

    @property
    def bounded(self) -> bool:
        """Whether the range has an end."""
        return self.end is not None

    def to_range(self, limit: int) -> range:
        """Map onto an inclusive Python range.

        Args:
            limit: Inclusive end used when the range is open, and an upper
                clamp when it is not.

        Example:
            >>> list(Range(2, 4).to_range(10))
            [2, 3, 4]
            >>> list(Range(8).to_range(10))
            [8, 9, 10]
        """
        end = limit if self.end is None else min(self.end, limit)
        return range(self.start, end + 1)

    def __str__(self) -> str:
        if self.end is None:
            return f"{self.start}.."
        return f"{self.start}..{self.end}"


# =============================================================================
# Markup Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Attribute(Node):
    """Named literal on a tag.

    Source: lang: "ts"

    """

    name: str
    value: Literal


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Literal text content.

    Source: "content"
    HTML: content (escaped)

    """

    content: str


@dataclass(frozen=True, slots=True)
class Tag(Node):
    """Named element with attributes and children.

    Source: name(attr: literal, ...) { child* }
    HTML: <name>children</name>

    Attributes and children keep source order. Attribute names may repeat
    unless the parser runs with strict attributes.

    """

    name: str
    attributes: tuple[Attribute, ...] = ()
    children: tuple[Markup, ...] = ()

    def get(self, name: str, default: Literal | None = None) -> Literal | None:
        """Value of the last attribute called ``name``, or ``default``."""
        for attribute in reversed(self.attributes):
            if attribute.name == name:
                return attribute.value
        return default


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root of a parsed source.

    Holds the top-level markup in source order. No wrapping tag is
    required in source.

    """

    children: tuple[Markup, ...] = ()


# PEP 695 type aliases for the closed variant sets
type Literal = Number | String | List | Range
type Markup = Text | Tag
