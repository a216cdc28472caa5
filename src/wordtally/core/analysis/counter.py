from __future__ import annotations

"""
Word Frequency Counter.

Consumes a sequence of lines, tokenizes each one and builds a case-insensitive
frequency table. Every call starts from an empty table; the table returned is
owned by the caller.
"""

import logging
from typing import Dict, Iterable

from wordtally.core.processing.tokenizer import is_word, iter_tokens
from wordtally.domain.models import WordTally

logger = logging.getLogger(__name__)


def count_words(lines: Iterable[str]) -> WordTally:
    """
    Count every word occurrence across the given lines.

    Separator tokens are discarded. Words are lowercased before being
    tallied. Errors raised by the line source propagate unchanged, so a
    faulty source never produces a truncated tally.

    Args:
        lines: Finite sequence of text lines (may be empty).

    Returns:
        WordTally: Frequency table plus total word count.
    """
    table: Dict[str, int] = {}
    total = 0

    for line in lines:
        for token in iter_tokens(line):
            if not is_word(token):
                continue
            word = token.lower()
            total += 1
            table[word] = table.get(word, 0) + 1

    logger.debug(f"Counted {total} words ({len(table)} unique).")
    return WordTally(table=table, total=total)
