from __future__ import annotations

"""
Sentence Locator.

Reassembles tokens into sentences terminated by '.', '!' or '?' and finds the
last sentence, in document order, that contains a target word as a whole word.

A whole-word match is a literal occurrence of the target whose neighbouring
characters are either the string edge or separator characters. The target is
never interpreted as a pattern.
"""

import logging
from typing import Iterable, List

from wordtally.core.processing.tokenizer import is_separator, iter_tokens
from wordtally.domain.constants import SENTENCE_TERMINATORS

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# MATCHING PRIMITIVES
# -----------------------------------------------------------------------------

def ends_sentence(token: str) -> bool:
    """Return True if the token contains a sentence terminator anywhere."""
    return any(ch in SENTENCE_TERMINATORS for ch in token)


def contains_whole_word(text: str, word: str) -> bool:
    """
    Test whether word occurs in text bounded by separators or string edges.

    Args:
        text: Haystack, compared as given.
        word: Literal needle; an empty needle never matches.

    Returns:
        bool: True on the first bounded occurrence.
    """
    if not word:
        return False

    start = text.find(word)
    while start != -1:
        end = start + len(word)
        left_ok = start == 0 or is_separator(text[start - 1])
        right_ok = end == len(text) or is_separator(text[end])
        if left_ok and right_ok:
            return True
        start = text.find(word, start + 1)
    return False

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def last_sentence_containing(lines: Iterable[str], target_word: str) -> str:
    """
    Locate the last sentence containing target_word as a whole word.

    Tokens keep their original case inside the accumulated sentence; only the
    comparison is done in lowercase. The accumulator is cleared after every
    terminator whether or not the sentence matched. Text after the final
    terminator is never considered.

    Args:
        lines: Text lines, ideally with their line terminators preserved.
        target_word: Word to look for.

    Returns:
        str: The matching sentence stripped of surrounding whitespace, or ""
             when no sentence matches.
    """
    needle = target_word.lower()
    pending: List[str] = []
    best = ""

    for line in lines:
        for token in iter_tokens(line):
            pending.append(token)
            if not ends_sentence(token):
                continue

            sentence = "".join(pending)
            if contains_whole_word(sentence.lower(), needle):
                best = sentence
            pending = []

    if not best:
        logger.debug(f"No sentence contains '{target_word}'.")
    return best.strip()
