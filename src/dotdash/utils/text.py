"""Text processing utilities for dotdash.

Example:
    >>> from dotdash.utils.text import split_lines
    >>> list(split_lines("a\\r\\nb\\nc"))
    ['a', 'b', 'c']
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from dotdash.errors import SourceResolutionError
from dotdash.utils.logger import get_logger

logger = get_logger(__name__)

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def split_lines(lines: str | Iterable[str]) -> Iterator[str]:
    """Yield physical lines from a string or an iterable of strings.

    Each element is split on ``\\r\\n``, ``\\r`` and ``\\n``, so a single
    string with embedded breaks yields the same lines as a list holding
    one element per line. Unlike ``str.splitlines``, form feeds and other
    Unicode separators are left alone, and a trailing break yields a
    final empty line.

    Args:
        lines: A string or an iterable of strings

    Yields:
        Lines without their line break characters
    """
    if isinstance(lines, str):
        lines = (lines,)
    for element in lines:
        yield from _LINE_BREAK_RE.split(element)


def read_text(path: str | Path) -> str:
    """Read a UTF-8 input file.

    Raises:
        SourceResolutionError: If the file is missing or unreadable
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise SourceResolutionError(str(path))
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceResolutionError(str(path), reason=str(exc)) from exc
    logger.debug("Read %d characters from %s", len(text), file_path)
    return text
