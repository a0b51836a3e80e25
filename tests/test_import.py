"""Verify package imports work correctly."""


def test_import_dotdash() -> None:
    """Test that dotdash can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import dotdash

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert dotdash.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from dotdash import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_exported() -> None:
    """Every name in __all__ resolves."""
    import dotdash

    for name in dotdash.__all__:
        assert hasattr(dotdash, name), name


def test_logger_namespace() -> None:
    from dotdash.utils import get_logger

    assert get_logger("morse").name == "dotdash.morse"
    assert get_logger("dotdash.cli").name == "dotdash.cli"
    assert get_logger("dotdash").name == "dotdash"
