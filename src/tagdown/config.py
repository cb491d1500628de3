"""ContextVar-based parse configuration for tagdown.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per Tagdown instance (or per ``parse()`` call) and read
by the parser.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # Direct parser usage
    from tagdown.config import parse_config_context, ParseConfig

    with parse_config_context(ParseConfig(strict_attributes=True)):
        nodes = Parser(source).parse()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Note: source_file is intentionally excluded. It is per-call state and
    stays on the Parser instance.

    Attributes:
        strict_attributes: Raise DuplicateAttributeError when an attribute
            name repeats on one tag. When False, duplicates are kept in
            source order.
        max_source_length: Reject sources longer than this many characters
            before lexing (None = unlimited).

    """

    strict_attributes: bool = False
    max_source_length: int | None = None

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "strict_attributes": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_attributes
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "tagdown_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton.
    """
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(strict_attributes=True)):
        ...     nodes = Parser('p(a: 1, a: 2) {}').parse()
        Traceback (most recent call last):
        ...
        tagdown.errors.DuplicateAttributeError: 1:9 Duplicate attribute 'a' on tag 'p'

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
