"""Property-based tests for tokenizer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

import re

from hypothesis import given, settings
from hypothesis import strategies as st

from dotdash.config import TokenizerConfig
from dotdash.tokenizer import LineGroup, tokenize

# Small alphabet so delimiters, quotes, escapes and breaks collide often
TRICKY_TEXT = st.text(alphabet='ab ,;"\'\\\r\n\t', max_size=80)

configs = st.builds(
    TokenizerConfig,
    delimiters=st.sampled_from([",", ", ", ";\t", ""]),
    qualifiers=st.sampled_from(['"', "'\"", "", ","]),
    escapes=st.sampled_from(["", "\\"]),
    line_join=st.sampled_from(["\n", " ", ""]),
    double_qualifier_is_escape=st.booleans(),
    span=st.booleans(),
    group_lines=st.booleans(),
    ignore_consecutive_delimiters=st.booleans(),
)


class TestNoExceptions:
    """Malformed input degrades, it never raises."""

    @given(TRICKY_TEXT, configs)
    @settings(max_examples=300)
    def test_any_input_any_config(self, text: str, config: TokenizerConfig) -> None:
        result = list(tokenize(text, config))
        expected_type = LineGroup if config.group_lines else str
        assert all(isinstance(item, expected_type) for item in result)

    @given(st.lists(TRICKY_TEXT, max_size=5), configs)
    @settings(max_examples=100)
    def test_list_input(self, lines: list[str], config: TokenizerConfig) -> None:
        list(tokenize(lines, config))


class TestLineBreakEquivalence:
    """Embedded line breaks behave exactly like element boundaries."""

    @given(TRICKY_TEXT, configs)
    @settings(max_examples=300)
    def test_string_equals_split_lines(self, text: str, config: TokenizerConfig) -> None:
        as_string = list(tokenize(text, config))
        as_lines = list(tokenize(re.split(r"\r\n|\r|\n", text), config))
        assert as_string == as_lines


class TestDeterminism:
    """Tokenizing the same input twice gives identical results."""

    @given(TRICKY_TEXT, configs)
    @settings(max_examples=50)
    def test_repeated_tokenization_identical(self, text: str, config: TokenizerConfig) -> None:
        assert list(tokenize(text, config)) == list(tokenize(text, config))


class TestContentPreservation:
    """Without quoting, no character other than separators is lost."""

    @given(st.text(alphabet="abc ,;\n", max_size=80))
    @settings(max_examples=100)
    def test_unquoted_tokens_concatenate_to_input(self, text: str) -> None:
        config = TokenizerConfig(delimiters=",;", qualifiers="")
        tokens = list(tokenize(text, config))
        assert "".join(tokens) == re.sub(r"[,;\n]", "", text)

    @given(st.text(alphabet="abc ,;\n", max_size=80))
    @settings(max_examples=100)
    def test_ignore_consecutive_never_emits_empty(self, text: str) -> None:
        config = TokenizerConfig(
            delimiters=",;",
            qualifiers="",
            ignore_consecutive_delimiters=True,
        )
        assert all(token for token in tokenize(text, config))

    @given(st.lists(st.text(alphabet="abc ", min_size=1, max_size=10), min_size=1, max_size=6))
    @settings(max_examples=100)
    def test_joined_fields_split_back(self, fields: list[str]) -> None:
        config = TokenizerConfig(delimiters=",", qualifiers="")
        assert list(tokenize(",".join(fields), config)) == fields
