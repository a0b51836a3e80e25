"""State-machine tokenizer for delimited text.

Splits lines into tokens on configurable delimiters, honouring quoting
(qualifiers), escapes, doubled qualifiers and quoted tokens that span
several lines.

Architecture:
tokenizer/
├── __init__.py          # Re-exports Tokenizer, tokenize, LineGroup, ScanMode
├── core.py              # Tokenizer class (scanner + emission)
├── modes.py             # ScanMode enum, line break characters
└── tokens.py            # LineGroup, Token alias

Usage:
    >>> from dotdash.tokenizer import tokenize
    >>> from dotdash.config import TokenizerConfig
    >>> list(tokenize('a,"b,c",d', TokenizerConfig()))
    ['a', 'b,c', 'd']

"""

from dotdash.tokenizer.core import Tokenizer, tokenize
from dotdash.tokenizer.modes import LINE_BREAKS, ScanMode
from dotdash.tokenizer.tokens import LineGroup, Token

__all__ = ["LINE_BREAKS", "LineGroup", "ScanMode", "Token", "Tokenizer", "tokenize"]
