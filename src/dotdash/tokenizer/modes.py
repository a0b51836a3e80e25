"""Scanner operating modes and constants.

This module defines the finite state machine modes for the tokenizer
and the character set treated as line breaks.
"""

from __future__ import annotations

from enum import Enum, auto


class ScanMode(Enum):
    """Tokenizer operating modes.

    The scanner switches between modes as qualifiers open and close:
    - NORMAL: Outside any quoted token
    - IN_QUALIFIER: Inside a token opened by a qualifier character

    """

    NORMAL = auto()
    IN_QUALIFIER = auto()


# Characters that end a physical line inside an input element
LINE_BREAKS: frozenset[str] = frozenset("\r\n")
