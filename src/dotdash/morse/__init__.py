"""Morse code codec built on the dotdash tokenizer.

Structure:
morse/
├── __init__.py          # Re-exports encode, decode, to_pulses, play
├── tables.py            # Symbol tables, prosigns, phrases, Q-codes
├── encoder.py           # Text -> Morse
├── decoder.py           # Morse -> text
├── pulses.py            # Morse -> 0/1 pulses, tone device boundary
└── diagnostics.py       # Advisory diagnostics and sinks

Usage:
    >>> from dotdash.morse import decode, encode
    >>> decode(encode("bye world !sos"))
    ['BYE WORLD [Distress]']

"""

from dotdash.morse.decoder import decode, decode_line
from dotdash.morse.diagnostics import (
    Diagnostic,
    DiagnosticSink,
    ListDiagnosticSink,
    LoggingDiagnosticSink,
)
from dotdash.morse.encoder import encode, encode_file, encode_line, substitute
from dotdash.morse.pulses import ToneDevice, play, to_pulses

__all__ = [
    "Diagnostic",
    "DiagnosticSink",
    "ListDiagnosticSink",
    "LoggingDiagnosticSink",
    "ToneDevice",
    "decode",
    "decode_line",
    "encode",
    "encode_file",
    "encode_line",
    "play",
    "substitute",
    "to_pulses",
]
