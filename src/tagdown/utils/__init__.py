"""Utility modules for tagdown.

Provides:
- text: html_escape, escape_attribute, dedent_code for text processing
- logger: get_logger for logging
"""

from tagdown.utils.logger import get_logger
from tagdown.utils.text import dedent_code, escape_attribute, html_escape

__all__ = [
    "dedent_code",
    "escape_attribute",
    "get_logger",
    "html_escape",
]
