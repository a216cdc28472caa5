from __future__ import annotations

"""
Unit tests for domain models and errors.
"""

import dataclasses

import pytest

from wordtally.domain.errors import InputUnavailableError
from wordtally.domain.models import (
    AnalysisResult,
    RankedEntry,
    WordTally,
    create_error_result,
)


def test_ranked_entry_is_immutable() -> None:
    entry = RankedEntry("cat", 3)

    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.count = 4  # type: ignore[misc]


def test_word_tally_unique() -> None:
    assert WordTally({"a": 2, "b": 1}, 3).unique == 2
    assert WordTally().unique == 0


def test_error_result_has_no_statistics() -> None:
    result = create_error_result("boom", input_path="/tmp/x.txt")

    assert isinstance(result, AnalysisResult)
    assert result.ok is False
    assert result.error == "boom"
    assert result.total_words == 0
    assert result.top_words == []
    assert result.last_sentence == ""


def test_input_unavailable_error_message() -> None:
    err = InputUnavailableError("book.txt", "disk on fire")

    assert isinstance(err, OSError)
    assert "book.txt" in str(err)
    assert err.reason == "disk on fire"
