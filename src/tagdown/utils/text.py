"""Text processing utilities for tagdown renderers.

Example:
    >>> from tagdown.utils.text import html_escape
    >>> html_escape('<b class="x">')
    '&lt;b class=&quot;x&quot;&gt;'
"""

from __future__ import annotations

import html as html_module
import textwrap


def html_escape(text: str) -> str:
    """Escape HTML special characters in text content.

    Escapes <, >, &, " but not single quotes, matching what element
    content and double-quoted attribute values need.
    """
    if not text:
        return ""
    return html_module.escape(text, quote=False).replace('"', "&quot;")


def escape_attribute(text: str) -> str:
    """Escape a value for a double-quoted HTML attribute.

    Also escapes single quotes so the value is safe in either quoting.

    Examples:
        >>> escape_attribute("it's <x>")
        'it&#x27;s &lt;x&gt;'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=True)


def dedent_code(text: str) -> str:
    """Remove common leading whitespace from an embedded code string.

    Blank lines around the code are dropped, so a string that starts on
    the line after its opening quote and ends on the closing quote's line
    yields just the code.

    Examples:
        >>> dedent_code("\\n    def f():\\n        pass\\n    ")
        'def f():\\n    pass'
    """
    return textwrap.dedent(text).strip("\n").rstrip()
