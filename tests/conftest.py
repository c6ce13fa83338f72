"""Shared test fixtures for the Roster test suite."""

import os
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

# Tests run against the in-memory store unless a test wires up Redis itself
os.environ.setdefault("ROSTER_ENV", "test")
os.environ.setdefault("ROSTER_STORAGE__BACKEND", "inmemory")


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "debug = true",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


@pytest.fixture
def student_fields() -> dict[str, str]:
    """The seven fields of a valid student."""
    return {
        "name": "Ana",
        "course": "CS",
        "age": "20",
        "address": "X",
        "email": "a@x.com",
        "phone": "555",
        "gender": "F",
    }


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str], Path]:
    """Factory fixture writing CSV text to a file that stands in for an upload."""

    counter = iter(range(1_000_000))

    def _write(content: str) -> Path:
        path = tmp_path / f"upload-{next(counter)}.csv"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear the settings cache before and after each test."""
    from roster.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Undo logging configuration so later tests don't write to a closed capture stream."""
    import structlog

    yield
    structlog.reset_defaults()
