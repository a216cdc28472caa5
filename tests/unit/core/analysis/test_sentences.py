from __future__ import annotations

"""
Unit tests for the sentence locator and whole-word matching.
"""

import pytest

from wordtally.core.analysis.sentences import (
    contains_whole_word,
    ends_sentence,
    last_sentence_containing,
)


def test_whole_word_match_skips_substrings() -> None:
    text = "The catalog is big. The cat sat. Scatter now."

    assert last_sentence_containing([text], "cat") == "The cat sat."


def test_no_match_returns_empty_string() -> None:
    assert last_sentence_containing(["One thing. Another thing."], "zebra") == ""


def test_last_matching_sentence_wins() -> None:
    lines = ["A dog barked. ", "Then the dog ran! ", "Cats slept."]

    assert last_sentence_containing(lines, "dog") == "Then the dog ran!"


def test_match_is_case_insensitive_but_keeps_original_text() -> None:
    assert last_sentence_containing(["Where is THE Fox?"], "fox") == "Where is THE Fox?"
    assert last_sentence_containing(["Where is the fox?"], "FOX") == "Where is the fox?"


def test_sentence_spans_multiple_lines() -> None:
    lines = ["This sentence starts here\n", "and ends with a target.\n"]

    assert last_sentence_containing(lines, "target") == (
        "This sentence starts here\nand ends with a target."
    )


def test_words_at_line_break_do_not_merge() -> None:
    lines = ["the end of a line is cat\n", "alog continues.\n"]

    assert last_sentence_containing(lines, "catalog") == ""
    assert last_sentence_containing(lines, "cat") != ""


def test_trailing_text_without_terminator_is_ignored() -> None:
    assert last_sentence_containing(["Done. the cat never stops"], "cat") == ""


def test_accumulator_resets_after_non_matching_sentence() -> None:
    lines = ["cat. ", "dog. "]

    assert last_sentence_containing(lines, "cat") == "cat."


def test_terminator_inside_a_separator_run() -> None:
    assert last_sentence_containing(["Really?! the cat) ok."], "cat") == "the cat) ok."


def test_target_is_treated_literally() -> None:
    lines = ["Regex like c.t should not match cat. ", "Here c+t is plain text."]

    assert last_sentence_containing(lines, "c+t") == "Here c+t is plain text."
    assert last_sentence_containing(lines, ".*") == ""


def test_empty_input() -> None:
    assert last_sentence_containing([], "cat") == ""


def test_sample_text(sample_text: str) -> None:
    lines = sample_text.splitlines(keepends=True)

    assert last_sentence_containing(lines, "the") == "Nobody knows why the fox left."
    assert last_sentence_containing(lines, "dog") == "The dog sleeps!"


@pytest.mark.parametrize("text, word, expected", [
    ("cat", "cat", True),
    ("the cat sat", "cat", True),
    ("(cat)", "cat", True),
    ("catalog", "cat", False),
    ("scatter", "cat", False),
    ("bobcat cat", "cat", True),
    ("well-known", "known", False),
    ("well-known", "well-known", True),
    ("anything", "", False),
])
def test_contains_whole_word(text: str, word: str, expected: bool) -> None:
    assert contains_whole_word(text, word) is expected


def test_ends_sentence() -> None:
    assert ends_sentence(". ")
    assert ends_sentence("?!")
    assert ends_sentence(",\n.")
    assert not ends_sentence(", ")
