"""LineGroup definition for grouped tokenizer output.

Tokens are plain strings. When line grouping is enabled the tokenizer
yields one LineGroup per logical input line instead.

Thread Safety:
LineGroup is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias

Token: TypeAlias = str


@dataclass(frozen=True, slots=True)
class LineGroup:
    """The tokens of one logical input line.

    A logical line may cover several physical lines when a spanning
    qualifier kept a token open across them.

    Attributes:
        tokens: Tokens in input order
        lineno: Physical line (1-indexed) the group started on

    """

    tokens: tuple[Token, ...]
    lineno: int = 1

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        return f"LineGroup({list(self.tokens)!r}, line {self.lineno})"
