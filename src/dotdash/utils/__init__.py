"""Utility modules for dotdash.

Provides:
- logger: get_logger for namespaced logging
- text: split_lines for line normalisation, read_text for input files
"""

from dotdash.utils.logger import get_logger
from dotdash.utils.text import read_text, split_lines

__all__ = [
    "get_logger",
    "read_text",
    "split_lines",
]
