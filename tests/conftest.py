from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for sample texts and configuration dictionaries.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
SAMPLE_TEXT = (
    "The quick brown fox jumps over the lazy dog.\n"
    "The dog sleeps! Does the fox care?\n"
    "Nobody knows why the fox left.\n"
)


@pytest.fixture
def sample_text() -> str:
    """Return a short multi-line text where 'the' is the most frequent word."""
    return SAMPLE_TEXT


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Write the sample text to disk and return its path."""
    f = tmp_path / "sample.txt"
    f.write_text(SAMPLE_TEXT, encoding="utf-8")
    return f


@pytest.fixture
def mock_config_dict(sample_file: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'wordtally.domain.config'.
    """
    return {
        "input_path": str(sample_file),
        "encoding": "utf-8",
        "top_n": 10,
        "sort_alphabetically": False,
        "show_sentence": True,
        "log_level": "INFO",
        "log_file": "",
    }


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user data directory at a temporary home."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("LOCALAPPDATA", str(home))
    return home


@pytest.fixture(autouse=True)
def _release_logging(capsys):
    """Stop any queue listener a test started, before output capture is torn down."""
    yield
    from wordtally.infra.logging import shutdown_logging
    shutdown_logging()
