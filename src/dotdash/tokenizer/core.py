"""Delimited-text scanner with qualifier and escape handling.

Implements an index-driven state machine over each input element. A single
cursor only moves forward; look-ahead is limited to the next character and
skip-ahead (after a closing qualifier) never rewinds.

Embedded line breaks inside an element behave exactly like the boundary
between two elements, so ``"a\\nb"`` and ``["a", "b"]`` tokenize alike.

Thread Safety:
Tokenizer instances are single-use. Create one per input.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from dotdash.config import TokenizerConfig, get_tokenizer_config
from dotdash.tokenizer.modes import LINE_BREAKS, ScanMode
from dotdash.tokenizer.tokens import LineGroup, Token


class Tokenizer:
    """State-machine tokenizer over one or more input lines.

    Input elements are pulled lazily, so a generator of lines can be
    tokenized while it is still being produced. A quoted token left open
    at the end of an element either continues into the next element
    (``span``) or is closed there.

    Usage:
            >>> config = TokenizerConfig(delimiters="=", qualifiers='"')
            >>> list(Tokenizer('"key 3"=value3', config).tokenize())
            ['key 3', 'value3']

            >>> grouped = TokenizerConfig(group_lines=True)
            >>> list(Tokenizer(["a,b", "c"], grouped).tokenize())
            [LineGroup(['a', 'b'], line 1), LineGroup(['c'], line 2)]

    Thread Safety:
        Tokenizer instances are single-use. Create one per input.

    """

    __slots__ = (
        "_lines",
        "_config",
        "_mode",
        "_qualifier",  # Active qualifier character, "" when none
        "_buffer",
        "_group",
        "_group_lineno",
        "_token_lineno",  # Physical line the buffered token started on
        "_lineno",
        "_pending_join",  # Spanning token waits for the next element
    )

    def __init__(
        self,
        lines: str | Iterable[str],
        config: TokenizerConfig | None = None,
    ) -> None:
        """Initialize tokenizer with input lines.

        Args:
            lines: A single string or an iterable of strings
            config: Tokenizer configuration (context default if None)
        """
        self._lines: Iterable[str] = (lines,) if isinstance(lines, str) else lines
        self._config = config if config is not None else get_tokenizer_config()
        self._mode = ScanMode.NORMAL
        self._qualifier: str = ""
        self._buffer: list[str] = []
        self._group: list[Token] = []
        self._group_lineno: int = 1
        self._token_lineno: int = 1
        self._lineno: int = 1
        self._pending_join: bool = False

    def tokenize(self) -> Iterator[Token | LineGroup]:
        """Tokenize all input lines.

        Yields:
            Token strings, or LineGroup objects when group_lines is set

        Complexity: O(n) where n = total input length
        """
        for line in self._lines:
            yield from self._scan_line(line)
            yield from self._end_line()
            self._lineno += 1

        if self._mode is ScanMode.IN_QUALIFIER:
            yield from self._emit(self._close_qualifier())
        elif self._buffer:
            yield from self._emit(self._take())
        self._pending_join = False
        yield from self._flush_group()

    # =========================================================================
    # Scanning
    # =========================================================================

    def _scan_line(self, line: str) -> Iterator[Token | LineGroup]:
        """Scan one input element character by character."""
        config = self._config
        if self._pending_join:
            self._buffer.append(config.line_join)
            self._pending_join = False

        pos = 0
        line_len = len(line)
        while pos < line_len:
            char = line[pos]

            if self._mode is ScanMode.IN_QUALIFIER:
                qualifier = self._qualifier
                if char in LINE_BREAKS:
                    if config.span:
                        self._buffer.append(config.line_join)
                        pos = self._consume_line_break(line, pos)
                        continue
                    yield from self._emit(self._close_qualifier())
                    yield from self._flush_group()
                    while pos < line_len and line[pos] in LINE_BREAKS:
                        pos = self._consume_line_break(line, pos)
                    continue

                next_char = line[pos + 1] if pos + 1 < line_len else ""
                if next_char == qualifier and (
                    char in config.escapes
                    or (char == qualifier and config.double_qualifier_is_escape)
                ):
                    self._buffer.append(qualifier)
                    pos += 2
                    continue

                if char == qualifier:
                    yield from self._emit(self._close_qualifier())
                    pos = self._skip_after_close(line, pos + 1)
                    continue

                self._buffer.append(char)
                pos += 1
                continue

            if not self._buffer:
                self._token_lineno = self._lineno

            if char in config.qualifiers and self._buffer_is_blank():
                self._buffer.clear()
                self._qualifier = char
                self._mode = ScanMode.IN_QUALIFIER
                pos += 1
            elif char in config.delimiters:
                if self._buffer or not config.ignore_consecutive_delimiters:
                    yield from self._emit(self._take())
                pos += 1
            elif char in LINE_BREAKS:
                if self._buffer:
                    yield from self._emit(self._take())
                yield from self._flush_group()
                pos = self._consume_line_break(line, pos)
            else:
                self._buffer.append(char)
                pos += 1

    def _end_line(self) -> Iterator[Token | LineGroup]:
        """Handle the end of an input element."""
        if self._mode is ScanMode.IN_QUALIFIER:
            if self._config.span:
                self._pending_join = True
                return
            yield from self._emit(self._close_qualifier())
        elif self._buffer:
            yield from self._emit(self._take())
        yield from self._flush_group()

    def _skip_after_close(self, line: str, pos: int) -> int:
        """Drop characters after a closing qualifier.

        Stops before a line break, or just after the next delimiter.

        Returns:
            Position of the first character still to scan.
        """
        delimiters = self._config.delimiters
        line_len = len(line)
        while pos < line_len:
            char = line[pos]
            if char in LINE_BREAKS:
                return pos
            pos += 1
            if char in delimiters:
                return pos
        return pos

    def _consume_line_break(self, line: str, pos: int) -> int:
        """Advance past one line break sequence (``\\r\\n`` counts once)."""
        if line[pos] == "\r" and pos + 1 < len(line) and line[pos + 1] == "\n":
            pos += 1
        self._lineno += 1
        return pos + 1

    # =========================================================================
    # Token and group emission
    # =========================================================================

    def _buffer_is_blank(self) -> bool:
        return all(char.isspace() for char in self._buffer)

    def _take(self) -> Token:
        """Return the buffered token and reset the buffer."""
        token = "".join(self._buffer)
        self._buffer.clear()
        return token

    def _close_qualifier(self) -> Token:
        self._mode = ScanMode.NORMAL
        self._qualifier = ""
        return self._take()

    def _emit(self, token: Token) -> Iterator[Token]:
        """Yield a token, or hold it in the line group when grouping."""
        if not self._config.group_lines:
            yield token
            return
        if not self._group:
            self._group_lineno = self._token_lineno
        self._group.append(token)

    def _flush_group(self) -> Iterator[LineGroup]:
        if self._group:
            yield LineGroup(tokens=tuple(self._group), lineno=self._group_lineno)
            self._group.clear()


def tokenize(
    lines: str | Iterable[str],
    config: TokenizerConfig | None = None,
) -> Iterator[Token | LineGroup]:
    """Tokenize delimited text.

    Args:
        lines: A single string or an iterable of strings (consumed lazily)
        config: Tokenizer configuration (context default if None)

    Returns:
        Lazy iterator of token strings, or LineGroup objects when the
        config enables group_lines

    Example:
        >>> config = TokenizerConfig(delimiters="= ", qualifiers="",
        ...                          ignore_consecutive_delimiters=True)
        >>> list(tokenize("key1=value1", config))
        ['key1', 'value1']
    """
    return Tokenizer(lines, config).tokenize()
