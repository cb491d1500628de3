"""Pluggable syntax highlighting for ``code-block`` tags.

The HTML transformer hands a code block to ``highlight()`` when it runs with
``highlight=True`` and the block has a ``lang`` attribute. What happens next
depends on the installed highlighter:

- one set with ``set_highlighter()`` (an object implementing ``Highlighter``
  or a plain ``(code, language) -> html`` callable);
- otherwise Rosettes, loaded on first use when tagdown[syntax] is installed;
- otherwise an escaped ``<pre><code>`` block.

Usage:
    from tagdown.highlighting import set_highlighter

    set_highlighter(lambda code, language: f"<pre data-lang={language!r}>{code}</pre>")
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol

from tagdown.utils.logger import get_logger
from tagdown.utils.text import escape_attribute, html_escape

logger = get_logger(__name__)


class Highlighter(Protocol):
    """Object-style highlighter.

    Implementations escape the code themselves and may be called from
    several render threads at once.
    """

    def highlight(self, code: str, language: str, *, hl_lines: Sequence[int] = ()) -> str:
        """Return HTML for ``code``, emphasizing the 1-indexed ``hl_lines``."""
        ...

    def supports_language(self, language: str) -> bool:
        ...


type HighlightFunction = Callable[[str, str], str]
type AnyHighlighter = Highlighter | HighlightFunction

_highlighter: AnyHighlighter | None = None
_rosettes_loaded = False


class RosettesHighlighter:
    """Adapter from the Rosettes module API to ``Highlighter``."""

    __slots__ = ("_rosettes",)

    def __init__(self, module: object) -> None:
        self._rosettes = module

    def highlight(self, code: str, language: str, *, hl_lines: Sequence[int] = ()) -> str:
        if not self.supports_language(language):
            return plain_code_block(code, language)
        result: str = self._rosettes.highlight(  # type: ignore[attr-defined]
            code,
            language=language,
            hl_lines=set(hl_lines) or None,
            show_linenos=False,
        )
        return result

    def supports_language(self, language: str) -> bool:
        return bool(self._rosettes.supports_language(language))  # type: ignore[attr-defined]


def _load_rosettes() -> None:
    """Install Rosettes as the highlighter if it is importable (once)."""
    global _highlighter, _rosettes_loaded
    if _rosettes_loaded:
        return
    _rosettes_loaded = True
    try:
        import rosettes  # type: ignore[import-not-found]
    except ImportError:
        logger.debug("rosettes not installed; code blocks stay unhighlighted")
        return
    if _highlighter is None:
        _highlighter = RosettesHighlighter(rosettes)


def set_highlighter(highlighter: AnyHighlighter | None) -> None:
    """Install a highlighter for all threads. ``None`` removes it."""
    global _highlighter
    _highlighter = highlighter


def get_highlighter() -> AnyHighlighter | None:
    """The active highlighter, loading Rosettes on first use."""
    if _highlighter is None:
        _load_rosettes()
    return _highlighter


def has_highlighter() -> bool:
    return get_highlighter() is not None


def plain_code_block(code: str, language: str | None) -> str:
    """Escaped, unhighlighted ``<pre><code>`` block."""
    lang_class = f' class="language-{escape_attribute(language)}"' if language else ""
    return f"<pre><code{lang_class}>{html_escape(code)}</code></pre>"


def highlight(code: str, language: str, *, hl_lines: Sequence[int] = ()) -> str:
    """Render ``code`` with the active highlighter.

    Object highlighters receive ``hl_lines``; plain callables only get the
    code and the language.

    Example:
        >>> set_highlighter(None)
        >>> highlight("a < b", "py")  # doctest: +SKIP
        '<pre><code class="language-py">a &lt; b</code></pre>'
    """
    active = get_highlighter()
    if active is None:
        return plain_code_block(code, language)
    method = getattr(active, "highlight", None)
    if callable(method):
        return method(code, language, hl_lines=hl_lines)
    return active(code, language)  # type: ignore[operator]


__all__ = [
    "Highlighter",
    "RosettesHighlighter",
    "get_highlighter",
    "has_highlighter",
    "highlight",
    "plain_code_block",
    "set_highlighter",
]
