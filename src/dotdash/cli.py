"""Command-line interface for dotdash.

Usage:
    dotdash tokenize [FILE] [-d DELIMS] [-q QUALS] [-e ESCAPES] [--span] ...
    dotdash encode [TEXT ...] [--file PATH] [--binary]
    dotdash decode [MORSE] [--file PATH]

Without a positional argument or --file, input is read from stdin.
Delimiter, qualifier and escape options accept backslash escapes such
as ``\\t``.
"""

from __future__ import annotations

import argparse
import codecs
import json
import logging
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from dotdash import __version__
from dotdash.config import TokenizerConfig
from dotdash.errors import DotDashError
from dotdash.morse import decode, encode
from dotdash.tokenizer import LineGroup, tokenize
from dotdash.utils.logger import get_logger
from dotdash.utils.text import read_text, split_lines

logger = get_logger(__name__)


def _unescape(value: str) -> str:
    return codecs.decode(value, "unicode_escape")


def _iter_stripped(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield line.rstrip("\r\n")


def _file_lines(path: str) -> list[str]:
    """Lines of a file, without the empty one after a final line break."""
    lines = list(split_lines(read_text(path)))
    if lines and not lines[-1]:
        lines.pop()
    return lines


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        prog="dotdash",
        description="Tokenize delimited text and encode or decode Morse code.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    tok = subparsers.add_parser("tokenize", help="Split delimited text into tokens")
    tok.add_argument("file", nargs="?", help="Input file (default: stdin)")
    tok.add_argument("-d", "--delimiters", default=",", help="Delimiter characters")
    tok.add_argument("-q", "--qualifiers", default='"', help="Qualifier (quote) characters")
    tok.add_argument("-e", "--escapes", default="", help="Escape characters")
    tok.add_argument("--line-join", default="\\n", help="Joins lines of a spanning token")
    tok.add_argument(
        "--no-double-qualifier",
        action="store_true",
        help="Don't treat a doubled qualifier as a literal one",
    )
    tok.add_argument("--span", action="store_true", help="Let quoted tokens span lines")
    tok.add_argument("--group-lines", action="store_true", help="Print one JSON array per line")
    tok.add_argument(
        "--ignore-consecutive",
        action="store_true",
        help="Don't emit empty tokens between consecutive delimiters",
    )
    tok.add_argument("--json", action="store_true", help="Print tokens as JSON strings")

    enc = subparsers.add_parser("encode", help="Encode text as Morse code")
    enc.add_argument("text", nargs="*", help="Lines of text (default: stdin)")
    enc.add_argument("--file", help="Read text from a file")
    enc.add_argument("--binary", action="store_true", help="Print the 0/1 pulse stream")

    dec = subparsers.add_parser("decode", help="Decode Morse code to text")
    dec.add_argument("morse", nargs="?", help="Morse message (default: stdin)")
    dec.add_argument("--file", help="Read the message from a file")

    return parser


def _run_tokenize(args: argparse.Namespace, out: TextIO) -> None:
    config = TokenizerConfig(
        delimiters=_unescape(args.delimiters),
        qualifiers=_unescape(args.qualifiers),
        escapes=_unescape(args.escapes),
        line_join=_unescape(args.line_join),
        double_qualifier_is_escape=not args.no_double_qualifier,
        span=args.span,
        group_lines=args.group_lines,
        ignore_consecutive_delimiters=args.ignore_consecutive,
    )
    if args.file:
        lines: Sequence[str] | Iterator[str] = _file_lines(args.file)
    else:
        lines = _iter_stripped(sys.stdin)

    for item in tokenize(lines, config):
        if isinstance(item, LineGroup):
            out.write(json.dumps(list(item.tokens)) + "\n")
        elif args.json:
            out.write(json.dumps(item) + "\n")
        else:
            out.write(item + "\n")


def _run_encode(args: argparse.Namespace, out: TextIO) -> None:
    if args.file and args.text:
        raise DotDashError("pass text or --file, not both")
    if args.file:
        result = encode(path=args.file, binary=args.binary)
    else:
        result = encode(args.text or list(_iter_stripped(sys.stdin)), binary=args.binary)

    if isinstance(result, bytes):
        out.write("".join(str(pulse) for pulse in result) + "\n")
    else:
        out.write(result + "\n")


def _run_decode(args: argparse.Namespace, out: TextIO) -> None:
    if args.file:
        morse = read_text(args.file)
    elif args.morse is not None:
        morse = args.morse
    else:
        morse = sys.stdin.read()
    for line in decode(morse.rstrip("\r\n")):
        out.write(line + "\n")


_COMMANDS = {
    "tokenize": _run_tokenize,
    "encode": _run_encode,
    "decode": _run_decode,
}


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments (default: sys.argv[1:])
        out: Output stream (default: sys.stdout)

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        _COMMANDS[args.command](args, out or sys.stdout)
    except DotDashError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0
