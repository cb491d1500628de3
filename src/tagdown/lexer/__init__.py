"""Single-pass lexer for tagdown markup.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (dispatch, navigation, punctuation)
└── scanners/            # Multi-character token scanners
    ├── string.py        # "double quoted" strings
    ├── identifier.py    # kebab-case identifiers
    └── number.py        # unsigned 32-bit numbers

Usage:
    >>> from tagdown.lexer import Lexer
    >>> for token in Lexer('p { "hi" }').tokenize():
    ...     print(repr(token))
    Token(IDENTIFIER, 'p', 1:1)
    Token(LEFT_BRACE, '{', 1:3)
    Token(STRING, 'hi', 1:5)
    Token(RIGHT_BRACE, '}', 1:10)
    Token(EOF, '', 1:11)

"""

from tagdown.lexer.core import Lexer, decode_source

__all__ = ["Lexer", "decode_source"]
