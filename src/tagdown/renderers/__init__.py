"""tagdown transformers.

Transformers convert typed AST nodes into output formats.

Available Transformers:
- HtmlTransformer: Renders markup to HTML (the reference renderer)
- TextTransformer: Renders markup to plain text
- JsonTransformer: Renders the tree as a JSON document

Thread Safety:
All transformers keep per-call state local to each transform() call.
Safe for concurrent use from multiple threads.

"""

from tagdown.renderers.html import HtmlTransformer
from tagdown.renderers.json import JsonTransformer
from tagdown.renderers.protocol import Transformer
from tagdown.renderers.text import TextTransformer

__all__ = ["HtmlTransformer", "JsonTransformer", "TextTransformer", "Transformer"]
