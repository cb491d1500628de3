"""Category-specific scanners for the tagdown lexer.

Each scanner is a mixin that scans one multi-character token category
(strings, identifiers, numbers). Single-character punctuation is
dispatched directly by the Lexer.
"""

from __future__ import annotations

from tagdown.lexer.scanners.identifier import IdentifierScannerMixin
from tagdown.lexer.scanners.number import NumberScannerMixin
from tagdown.lexer.scanners.string import StringScannerMixin

__all__ = [
    "IdentifierScannerMixin",
    "NumberScannerMixin",
    "StringScannerMixin",
]
