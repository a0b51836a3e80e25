"""Tokenizer configuration for dotdash.

Provides the immutable TokenizerConfig plus a ContextVar-held default that
tokenize() falls back to when no config is passed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and configs never leak between threads.

Usage:
    # Explicit config
    config = TokenizerConfig(delimiters="=", qualifiers='"')
    tokens = list(tokenize('"key 3"=value3', config))

    # Context default
    with tokenizer_config_context(TokenizerConfig(delimiters="\\t")):
        tokens = list(tokenize("a\\tb"))

"""

from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any

from dotdash.errors import ConfigError


def _char_set(value: Iterable[str], field: str) -> frozenset[str]:
    """Normalize a string or iterable of characters into a frozenset.

    Raises:
        ConfigError: If any member is not exactly one character.
    """
    chars = frozenset(value)
    for char in chars:
        if not isinstance(char, str) or len(char) != 1:
            raise ConfigError(f"expected single characters, got {char!r}", field=field)
    return chars


@dataclass(frozen=True, slots=True)
class TokenizerConfig:
    """Immutable tokenizer configuration.

    Character sets accept any iterable of single characters, so
    ``delimiters="=,"`` and ``delimiters={"=", ","}`` are equivalent.
    They are stored as frozensets.

    Sets may overlap. A qualifier that opens a token wins over a delimiter,
    and an escaped or doubled qualifier wins over a closing one.

    Attributes:
        delimiters: Characters that separate tokens
        qualifiers: Quote characters that suppress delimiter handling
        escapes: Characters that embed a literal qualifier when they precede it
        line_join: Inserted between physical lines of a spanning token
        double_qualifier_is_escape: Treat a doubled qualifier as one literal
        span: Let a quoted token continue onto the next line
        group_lines: Emit one LineGroup per logical line instead of tokens
        ignore_consecutive_delimiters: Don't emit empty tokens between delimiters

    """

    delimiters: frozenset[str] = frozenset(",")
    qualifiers: frozenset[str] = frozenset('"')
    escapes: frozenset[str] = frozenset()
    line_join: str = "\n"
    double_qualifier_is_escape: bool = True
    span: bool = False
    group_lines: bool = False
    ignore_consecutive_delimiters: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "delimiters", _char_set(self.delimiters, "delimiters"))
        object.__setattr__(self, "qualifiers", _char_set(self.qualifiers, "qualifiers"))
        object.__setattr__(self, "escapes", _char_set(self.escapes, "escapes"))
        if not isinstance(self.line_join, str):
            raise ConfigError(f"expected a string, got {self.line_join!r}", field="line_join")

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "TokenizerConfig":
        """Create TokenizerConfig from a mapping.

        Only includes keys that are valid TokenizerConfig fields; unknown keys
        are silently ignored. The ``no_double_qualifier`` switch is accepted
        as the inverse of ``double_qualifier_is_escape``.

        Example:
            >>> config = TokenizerConfig.from_dict({
            ...     "delimiters": "=",
            ...     "no_double_qualifier": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.double_qualifier_is_escape
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "no_double_qualifier" in config_dict and "double_qualifier_is_escape" not in filtered:
            filtered["double_qualifier_is_escape"] = not config_dict["no_double_qualifier"]
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TokenizerConfig = TokenizerConfig()

_tokenizer_config: ContextVar[TokenizerConfig] = ContextVar(
    "tokenizer_config",
    default=_DEFAULT_CONFIG,
)


def get_tokenizer_config() -> TokenizerConfig:
    """Get the default tokenizer configuration for this context."""
    return _tokenizer_config.get()


def set_tokenizer_config(config: TokenizerConfig) -> None:
    """Set the default tokenizer configuration for this context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _tokenizer_config.set(config)


def reset_tokenizer_config() -> None:
    """Reset to the module default configuration."""
    _tokenizer_config.set(_DEFAULT_CONFIG)


@contextmanager
def tokenizer_config_context(config: TokenizerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Example:
        >>> with tokenizer_config_context(TokenizerConfig(delimiters=";")):
        ...     list(tokenize("a;b"))
        ['a', 'b']

    Restores the previous config even if an exception is raised.
    """
    previous = _tokenizer_config.get()
    _tokenizer_config.set(config)
    try:
        yield
    finally:
        _tokenizer_config.set(previous)


__all__ = [
    "TokenizerConfig",
    "get_tokenizer_config",
    "set_tokenizer_config",
    "reset_tokenizer_config",
    "tokenizer_config_context",
]
