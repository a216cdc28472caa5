from __future__ import annotations

"""
Word/Separator Tokenization Engine.

Splits a line into maximal runs of characters that share the same
classification: either every character belongs to the separator set, or
none does. Consecutive tokens of a line always alternate between the two
classes and together reproduce the line exactly.
"""

from typing import Iterator

from wordtally.domain.constants import SEPARATORS

# -----------------------------------------------------------------------------
# CHARACTER CLASSIFICATION
# -----------------------------------------------------------------------------

def is_separator(ch: str) -> bool:
    """Return True if the character belongs to the fixed separator set."""
    return ch in SEPARATORS


def is_word(token: str) -> bool:
    """
    Decide whether a token is a word.

    Tokens are single-class, so inspecting the first character is enough.
    """
    return bool(token) and not is_separator(token[0])

# -----------------------------------------------------------------------------
# TOKEN EXTRACTION
# -----------------------------------------------------------------------------

def next_token(text: str, position: int) -> str:
    """
    Extract the word or separator run that starts at a given index.

    Args:
        text: Source line.
        position: Starting index, 0 <= position < len(text).

    Returns:
        str: The maximal single-class substring beginning at position.

    Raises:
        ValueError: If text is empty or position is out of range.
    """
    if not isinstance(text, str) or not text:
        raise ValueError("next_token requires a non-empty string")
    if not 0 <= position < len(text):
        raise ValueError(f"position {position} out of range for text of length {len(text)}")

    separator_run = is_separator(text[position])
    end = position + 1
    while end < len(text) and is_separator(text[end]) == separator_run:
        end += 1
    return text[position:end]


def iter_tokens(line: str) -> Iterator[str]:
    """
    Yield every token of a line from left to right.

    Args:
        line: Source line; an empty line yields nothing.

    Yields:
        str: Successive tokens partitioning the line.
    """
    index = 0
    while index < len(line):
        token = next_token(line, index)
        index += len(token)
        yield token
