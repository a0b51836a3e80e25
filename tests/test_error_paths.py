"""Error-path tests.

Exercises exception formatting and hierarchy, and confirms that malformed
text degrades gracefully instead of raising.
"""

from pathlib import Path

import pytest

from dotdash import decode, tokenize
from dotdash.config import TokenizerConfig
from dotdash.errors import ConfigError, DotDashError, SourceResolutionError
from dotdash.morse import ListDiagnosticSink
from dotdash.utils.text import read_text

# =========================================================================
# ConfigError
# =========================================================================


class TestConfigError:
    """Verify ConfigError formatting and hierarchy."""

    def test_message_only(self) -> None:
        err = ConfigError("bad value")
        assert str(err) == "bad value"
        assert err.field is None

    def test_with_field(self) -> None:
        err = ConfigError("must be between 50 and 500", field="unit_ms")
        assert str(err) == "unit_ms: must be between 50 and 500"
        assert err.field == "unit_ms"

    def test_is_dotdash_error(self) -> None:
        assert isinstance(ConfigError("x"), DotDashError)


# =========================================================================
# SourceResolutionError
# =========================================================================


class TestSourceResolutionError:
    """Verify SourceResolutionError formatting and hierarchy."""

    def test_default_reason(self) -> None:
        err = SourceResolutionError("notes.txt")
        assert err.path == "notes.txt"
        assert "notes.txt" in str(err)
        assert "file not found" in str(err)

    def test_read_text_missing_file(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing.txt"
        with pytest.raises(SourceResolutionError) as exc_info:
            read_text(missing)
        assert exc_info.value.path == str(missing)

    def test_read_text_undecodable_file(self, tmp_path: Path) -> None:
        source = tmp_path / "binary.txt"
        source.write_bytes(b"\xff\xfe\x00")
        with pytest.raises(SourceResolutionError):
            read_text(source)

    def test_custom_reason(self) -> None:
        err = SourceResolutionError("notes.txt", reason="permission denied")
        assert "permission denied" in str(err)

    def test_is_dotdash_error(self) -> None:
        assert isinstance(SourceResolutionError("x"), DotDashError)


# =========================================================================
# Graceful degradation
# =========================================================================


class TestMalformedInput:
    """Malformed input never raises."""

    @pytest.mark.parametrize(
        "text",
        ['"', '""', '"""', '"a', 'a"', '"a"b"c', "\r", "\n\n", '"\r\n', ",,,"],
    )
    def test_tokenizer_tolerates_bad_quoting(self, text: str) -> None:
        for span in (False, True):
            list(tokenize(text, TokenizerConfig(span=span, escapes="\\")))

    @pytest.mark.parametrize("morse", ["", " ", "-", "......", "x", ".-.-", "       .-.-   "])
    def test_decoder_tolerates_anything(self, morse: str) -> None:
        assert isinstance(decode(morse, sink=ListDiagnosticSink()), list)
