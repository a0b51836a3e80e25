"""Advisory diagnostics reported while decoding.

Decoding is best-effort: nothing it notices is an error. Observations are
handed to a DiagnosticSink so callers decide whether to log, collect or
ignore them. The default sink writes to the ``dotdash.morse`` logger.

Example:
    >>> from dotdash.morse import decode
    >>> from dotdash.morse.diagnostics import ListDiagnosticSink
    >>> sink = ListDiagnosticSink()
    >>> decode("...   ---   ...", sink=sink)
    ['SOS']
    >>> [d.code for d in sink]
    ['missing-terminator']
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol

from dotdash.utils.logger import get_logger

MISSING_TERMINATOR = "missing-terminator"
UNKNOWN_SYMBOL = "unknown-symbol"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One advisory observation.

    Attributes:
        code: Stable identifier, e.g. ``"unknown-symbol"``
        message: Human-readable description
        level: ``logging`` level the observation deserves
        fragment: The Morse text it concerns, if any

    """

    code: str
    message: str
    level: int = logging.WARNING
    fragment: str | None = None


class DiagnosticSink(Protocol):
    """Protocol for receivers of decoder diagnostics."""

    def emit(self, diagnostic: Diagnostic) -> None:
        """Receive one diagnostic."""
        ...


class LoggingDiagnosticSink:
    """Forwards diagnostics to a standard library logger."""

    __slots__ = ("_logger",)

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or get_logger("morse")

    def emit(self, diagnostic: Diagnostic) -> None:
        self._logger.log(diagnostic.level, "%s: %s", diagnostic.code, diagnostic.message)


class ListDiagnosticSink:
    """Collects diagnostics in memory.

    Not thread-safe; use one per decode call or guard with a lock.
    """

    __slots__ = ("diagnostics",)

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def emit(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def codes(self) -> list[str]:
        """Codes of the collected diagnostics, in order."""
        return [d.code for d in self.diagnostics]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)

    def __len__(self) -> int:
        return len(self.diagnostics)
