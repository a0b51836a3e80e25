"""
dotdash: Delimited-Text Tokenizer and Morse Codec

A character-level tokenizer for delimited text with quoting, escapes and
multi-line quoted tokens, plus a Morse code encoder/decoder that uses it
to split words. Zero runtime dependencies.

Quick Start:
    >>> from dotdash import TokenizerConfig, tokenize
    >>> config = TokenizerConfig(delimiters="=", qualifiers='"')
    >>> list(tokenize('"key 3"=value3', config))
    ['key 3', 'value3']

    >>> from dotdash import decode, encode
    >>> decode(encode("hello world"))
    ['HELLO WORLD']

Binary output:
    >>> list(encode("e", binary=True))[:2]
    [1, 0]
"""

from dotdash.config import (
    TokenizerConfig,
    get_tokenizer_config,
    reset_tokenizer_config,
    set_tokenizer_config,
    tokenizer_config_context,
)
from dotdash.errors import ConfigError, DotDashError, SourceResolutionError
from dotdash.morse import (
    Diagnostic,
    DiagnosticSink,
    ListDiagnosticSink,
    LoggingDiagnosticSink,
    ToneDevice,
    decode,
    decode_line,
    encode,
    encode_file,
    encode_line,
    play,
    to_pulses,
)
from dotdash.tokenizer import LineGroup, ScanMode, Tokenizer, tokenize

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Tokenizer
    "tokenize",
    "Tokenizer",
    "LineGroup",
    "ScanMode",
    # Configuration (ContextVar-based default)
    "TokenizerConfig",
    "get_tokenizer_config",
    "set_tokenizer_config",
    "reset_tokenizer_config",
    "tokenizer_config_context",
    # Morse codec
    "encode",
    "encode_file",
    "encode_line",
    "decode",
    "decode_line",
    "to_pulses",
    "play",
    "ToneDevice",
    # Diagnostics
    "Diagnostic",
    "DiagnosticSink",
    "ListDiagnosticSink",
    "LoggingDiagnosticSink",
    # Errors
    "DotDashError",
    "ConfigError",
    "SourceResolutionError",
]
