"""Minimal logging utilities for tagdown.

Provides a simple get_logger function that wraps the standard library logging.
The library only emits records; handlers are configured by applications
(the ``tagdown`` command configures them with ``-v``).

Example:
    >>> from tagdown.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing document")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "tagdown." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'tagdown.mymodule'
    """
    if not (name == "tagdown" or name.startswith("tagdown.")):
        name = f"tagdown.{name}"
    return logging.getLogger(name)
