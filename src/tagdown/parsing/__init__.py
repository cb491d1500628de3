"""Parsing mixins for the tagdown parser.

The Parser class composes these mixins, one per syntactic layer:

- TokenNavigationMixin: token access, lookahead, consume, delimited lists
- LiteralParsingMixin: literal, list, range
- MarkupParsingMixin: node, tag, attributes, attribute
"""

from tagdown.parsing.literals import LiteralParsingMixin
from tagdown.parsing.markup import MarkupParsingMixin
from tagdown.parsing.token_nav import TokenNavigationMixin

__all__ = [
    "LiteralParsingMixin",
    "MarkupParsingMixin",
    "TokenNavigationMixin",
]
