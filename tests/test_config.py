"""Tests for TokenizerConfig and the ContextVar-based default config.

Validates normalisation, validation, thread isolation and context
manager behaviour.
"""

from concurrent.futures import ThreadPoolExecutor
from threading import Barrier

import pytest

from dotdash import (
    ConfigError,
    TokenizerConfig,
    get_tokenizer_config,
    reset_tokenizer_config,
    set_tokenizer_config,
    tokenize,
    tokenizer_config_context,
)


class TestTokenizerConfigDataclass:
    """Test TokenizerConfig frozen dataclass behaviour."""

    def test_default_values(self) -> None:
        config = TokenizerConfig()
        assert config.delimiters == frozenset(",")
        assert config.qualifiers == frozenset('"')
        assert config.escapes == frozenset()
        assert config.line_join == "\n"
        assert config.double_qualifier_is_escape is True
        assert config.span is False
        assert config.group_lines is False
        assert config.ignore_consecutive_delimiters is False

    def test_immutability(self) -> None:
        config = TokenizerConfig()
        with pytest.raises(AttributeError):
            config.span = True  # type: ignore[misc]

    def test_strings_normalised_to_sets(self) -> None:
        config = TokenizerConfig(delimiters="=,=", qualifiers="'\"", escapes="\\")
        assert config.delimiters == frozenset({"=", ","})
        assert config.qualifiers == frozenset({"'", '"'})
        assert config.escapes == frozenset({"\\"})

    def test_iterables_accepted(self) -> None:
        config = TokenizerConfig(delimiters=["\t", " "])
        assert config.delimiters == frozenset({"\t", " "})

    def test_equal_configs_compare_equal(self) -> None:
        assert TokenizerConfig(delimiters="ab") == TokenizerConfig(delimiters=["b", "a"])

    def test_multi_character_delimiter_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            TokenizerConfig(delimiters=["::"])
        assert exc_info.value.field == "delimiters"

    def test_multi_character_qualifier_rejected(self) -> None:
        with pytest.raises(ConfigError):
            TokenizerConfig(qualifiers=['""'])

    def test_multi_character_escape_rejected(self) -> None:
        with pytest.raises(ConfigError):
            TokenizerConfig(escapes=["\\\\"])

    def test_line_join_must_be_string(self) -> None:
        with pytest.raises(ConfigError):
            TokenizerConfig(line_join=None)  # type: ignore[arg-type]


class TestFromDict:
    """TokenizerConfig.from_dict()."""

    def test_unknown_keys_ignored(self) -> None:
        config = TokenizerConfig.from_dict({"delimiters": ";", "colour": "blue"})
        assert config.delimiters == frozenset(";")

    def test_no_double_qualifier_switch(self) -> None:
        config = TokenizerConfig.from_dict({"no_double_qualifier": True})
        assert config.double_qualifier_is_escape is False

    def test_explicit_field_wins_over_switch(self) -> None:
        config = TokenizerConfig.from_dict(
            {"no_double_qualifier": True, "double_qualifier_is_escape": True}
        )
        assert config.double_qualifier_is_escape is True

    def test_empty_dict_gives_defaults(self) -> None:
        assert TokenizerConfig.from_dict({}) == TokenizerConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_tokenizer_config()

    def test_default_config(self) -> None:
        assert get_tokenizer_config() == TokenizerConfig()

    def test_set_and_get(self) -> None:
        custom = TokenizerConfig(delimiters=";")
        set_tokenizer_config(custom)
        assert get_tokenizer_config() is custom

    def test_reset(self) -> None:
        set_tokenizer_config(TokenizerConfig(delimiters=";"))
        reset_tokenizer_config()
        assert get_tokenizer_config() == TokenizerConfig()

    def test_tokenize_uses_context_default(self) -> None:
        set_tokenizer_config(TokenizerConfig(delimiters=";"))
        assert list(tokenize("a;b,c")) == ["a", "b,c"]


class TestConfigContext:
    """tokenizer_config_context() context manager."""

    def test_context_applies_and_restores(self) -> None:
        with tokenizer_config_context(TokenizerConfig(delimiters="|")):
            assert list(tokenize("a|b")) == ["a", "b"]
        assert get_tokenizer_config() == TokenizerConfig()

    def test_restored_after_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with tokenizer_config_context(TokenizerConfig(delimiters="|")):
                raise RuntimeError("boom")
        assert get_tokenizer_config() == TokenizerConfig()

    def test_nested_contexts(self) -> None:
        outer = TokenizerConfig(delimiters="|")
        inner = TokenizerConfig(delimiters=";")
        with tokenizer_config_context(outer):
            with tokenizer_config_context(inner):
                assert get_tokenizer_config() is inner
            assert get_tokenizer_config() is outer

    def test_config_captured_when_tokenize_is_called(self) -> None:
        with tokenizer_config_context(TokenizerConfig(delimiters="|")):
            it = tokenize("a|b")
        assert list(it) == ["a", "b"]


class TestThreadIsolation:
    """Each thread sees its own default config."""

    def test_threads_do_not_share_defaults(self) -> None:
        barrier = Barrier(4)

        def work(delimiter: str) -> list:
            with tokenizer_config_context(TokenizerConfig(delimiters=delimiter)):
                barrier.wait()
                return list(tokenize("a;b|c,d"))

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(work, [";", "|", ",", "#"]))

        assert results == [
            ["a", "b|c,d"],
            ["a;b", "c,d"],
            ["a;b|c", "d"],
            ["a;b|c,d"],
        ]
