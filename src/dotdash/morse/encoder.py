"""Text to Morse encoding.

Each line is uppercased, phrases and Q-codes are replaced with their
shorthand, ``!CODE`` prosigns become marker words, and the line is split
into words by the tokenizer. Words are mapped character by character
through the symbol tables.

Output layout:
- three spaces after every letter, seven after every word
- the AA (new line) prosign after every line
- the AR (end of message) prosign once at the end

Unmapped characters are dropped silently. A word made only of unmapped
characters still contributes its word gap.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from dotdash.config import TokenizerConfig
from dotdash.errors import ConfigError
from dotdash.morse.pulses import to_pulses
from dotdash.morse.tables import (
    CHARACTERS,
    END_OF_MESSAGE,
    LETTER_GAP,
    NEW_LINE,
    PHRASES,
    PROSIGN_MARKERS,
    PROSIGNS,
    Q_CODES,
    WORD_GAP,
    prosign_marker,
)
from dotdash.tokenizer import tokenize
from dotdash.utils.logger import get_logger
from dotdash.utils.text import read_text, split_lines

logger = get_logger(__name__)

# A quoted run is one word; its inner spaces have no symbol and vanish
WORD_SPLIT_CONFIG = TokenizerConfig(
    delimiters=" \t",
    ignore_consecutive_delimiters=True,
)

_SUBSTITUTIONS: tuple[tuple[str, str], ...] = tuple(
    (phrase.upper(), code) for phrase, code in (*PHRASES.items(), *Q_CODES.items())
)

_PROSIGN_SUBSTITUTIONS: tuple[tuple[str, str], ...] = tuple(
    (f"!{code}", f" {prosign_marker(code)} ")
    for code in sorted(PROSIGNS, key=len, reverse=True)
)


def substitute(line: str) -> str:
    """Uppercase a line and apply phrase, Q-code and prosign substitution.

    Substitution is literal and ordered: phrases first, then Q-codes, each
    in table order, then ``!CODE`` prosigns (longest code first).

    Example:
        >>> substitute("thanks, stand by !sk")
        'TNX, QRX  <SK> '
    """
    text = line.upper()
    for phrase, code in _SUBSTITUTIONS:
        text = text.replace(phrase, code)
    for written, marker in _PROSIGN_SUBSTITUTIONS:
        text = text.replace(written, marker)
    return text


def _encode_word(word: str) -> str:
    code = PROSIGN_MARKERS.get(word)
    if code is not None:
        return PROSIGNS[code] + LETTER_GAP
    parts = []
    for char in word:
        symbol = CHARACTERS.get(char)
        if symbol is not None:
            parts.append(symbol)
            parts.append(LETTER_GAP)
    return "".join(parts)


def encode_line(line: str) -> str:
    """Encode one line of text without the line or message trailers.

    Returns:
        Morse words, each followed by a word gap. A word with no mapped
        characters leaves just its gap.
    """
    parts = []
    for word in tokenize(substitute(line), WORD_SPLIT_CONFIG):
        parts.append(_encode_word(word))
        parts.append(WORD_GAP)
    return "".join(parts).replace(WORD_GAP + LETTER_GAP, WORD_GAP)


def encode(
    lines: str | Iterable[str] | None = None,
    *,
    path: str | Path | None = None,
    binary: bool = False,
) -> str | bytes:
    """Encode text as a Morse message.

    Empty and whitespace-only lines are skipped; every other line is
    followed by the new-line prosign, even when none of its characters
    have a symbol.

    Args:
        lines: Text to encode, a string or an iterable of lines
        path: Read the lines from this UTF-8 file instead
        binary: Return the on/off pulse stream instead of the Morse string

    Returns:
        Morse string, or bytes of 0/1 pulses when binary is set

    Raises:
        ConfigError: If both or neither of lines and path are given
        SourceResolutionError: If path cannot be read

    Example:
        >>> encode("sos")
        '...   ---   ...       .-.-.-.-.'
    """
    if (lines is None) == (path is None):
        raise ConfigError("pass exactly one of lines or path", field="lines")
    if path is not None:
        lines = read_text(path)

    parts = []
    line_count = 0
    for line in split_lines(lines):
        if not line.strip():
            continue
        parts.append(encode_line(line))
        parts.append(NEW_LINE)
        line_count += 1
    parts.append(END_OF_MESSAGE)
    logger.debug("Encoded %d lines", line_count)

    morse = "".join(parts)
    return to_pulses(morse) if binary else morse


def encode_file(path: str | Path, *, binary: bool = False) -> str | bytes:
    """Encode the lines of a UTF-8 text file.

    Raises:
        SourceResolutionError: If the file cannot be read
    """
    return encode(path=path, binary=binary)
