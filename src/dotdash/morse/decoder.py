"""Morse to text decoding.

Reverses the layout written by the encoder using its fixed separators:
the message terminator is stripped, the body is split into lines on a
word gap followed by the new-line prosign, lines into words on seven
spaces and words into letters on three spaces.

Decoding is best-effort and never raises for string input. Anything it
cannot interpret is skipped and reported to a DiagnosticSink.
"""

from __future__ import annotations

import logging

from dotdash.morse.diagnostics import (
    MISSING_TERMINATOR,
    UNKNOWN_SYMBOL,
    Diagnostic,
    DiagnosticSink,
    LoggingDiagnosticSink,
)
from dotdash.morse.tables import (
    CHARACTER_DECODE,
    END_OF_MESSAGE,
    LETTER_GAP,
    LINE_SEPARATOR,
    PROSIGN_DECODE,
    WORD_GAP,
)


def decode_line(line: str, sink: DiagnosticSink | None = None) -> str:
    """Decode the words of one Morse line.

    A word that is exactly a prosign code renders as ``[Label]``.

    Example:
        >>> decode_line("-...   -.--   .       ...---...")
        'BYE [Distress]'
    """
    if sink is None:
        sink = LoggingDiagnosticSink()

    words = []
    for word in line.split(WORD_GAP):
        word = word.strip(" ")
        label = PROSIGN_DECODE.get(word)
        if label is not None:
            words.append(f"[{label}]")
            continue

        chars = []
        for fragment in word.split(LETTER_GAP):
            fragment = fragment.strip(" ")
            if not fragment:
                continue
            char = CHARACTER_DECODE.get(fragment)
            if char is None:
                sink.emit(
                    Diagnostic(
                        code=UNKNOWN_SYMBOL,
                        message=f"no character for {fragment!r}",
                        level=logging.DEBUG,
                        fragment=fragment,
                    )
                )
                continue
            chars.append(char)
        if chars:
            words.append("".join(chars))
    return " ".join(words)


def _has_terminator(morse: str) -> bool:
    """True when the message ends with AR as its own symbol.

    AR counts when it is the whole message, follows a space, or follows
    the new-line prosign that ends the last line. A character whose code
    merely ends in ``.-.-.`` (such as ``;``) does not.
    """
    if not morse.endswith(END_OF_MESSAGE):
        return False
    body = morse[: -len(END_OF_MESSAGE)]
    return not body or body.endswith((" ", LINE_SEPARATOR))


def decode(morse: str, *, sink: DiagnosticSink | None = None) -> list[str]:
    """Decode a Morse message into display lines.

    Args:
        morse: Morse string as produced by encode()
        sink: Receives advisory diagnostics (logs to ``dotdash.morse`` if None)

    Returns:
        One decoded string per encoded line

    Example:
        >>> decode("....   ..       .-.-.-.-.")
        ['HI']
    """
    if sink is None:
        sink = LoggingDiagnosticSink()

    if _has_terminator(morse):
        body = morse[: -len(END_OF_MESSAGE)]
    else:
        sink.emit(
            Diagnostic(
                code=MISSING_TERMINATOR,
                message="message does not end with the end-of-message prosign",
                fragment=morse[-len(END_OF_MESSAGE) :],
            )
        )
        body = morse

    return [
        decode_line(line, sink)
        for line in body.split(LINE_SEPARATOR)
        if line.strip()
    ]
