"""Exception classes for dotdash.

Provides standardized exceptions for error handling throughout dotdash.
The tokenizer and decoder never raise for malformed text; these cover
invalid parameters and unreadable inputs.
"""

from __future__ import annotations


class DotDashError(Exception):
    """Base exception for all dotdash errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(DotDashError):
    """Invalid configuration or conflicting arguments.

    Raised for multi-character delimiters, qualifiers or escapes, for
    playback timing outside the supported range, and when an encoder
    call receives both (or neither) of its text and file inputs.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize config error.

        Args:
            message: Error description
            field: Name of the offending setting (optional)
        """
        self.message = message
        self.field = field

        prefix = f"{field}: " if field else ""
        super().__init__(f"{prefix}{message}")


class SourceResolutionError(DotDashError):
    """An input file could not be resolved or read."""

    def __init__(self, path: str, reason: str = "file not found") -> None:
        """Initialize resolution error.

        Args:
            path: The path that failed to resolve
            reason: Short description of the failure
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read '{path}': {reason}")
