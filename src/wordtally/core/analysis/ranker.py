from __future__ import annotations

"""
Frequency Ranking.

Orders frequency table entries by descending count, breaking ties with a
case-insensitive alphabetical comparison. Ranking never mutates the table.
"""

from typing import List, Mapping, Tuple

from wordtally.domain.models import RankedEntry


def _rank_key(item: Tuple[str, int]) -> Tuple[int, str, str]:
    word, count = item
    return -count, word.lower(), word


def rank_entries(table: Mapping[str, int]) -> List[RankedEntry]:
    """
    Build the full ranked view of a frequency table.

    Args:
        table: Word to count mapping.

    Returns:
        List[RankedEntry]: One entry per table key, most frequent first.
    """
    return [RankedEntry(word, count) for word, count in sorted(table.items(), key=_rank_key)]


def top_n(table: Mapping[str, int], n: int) -> List[RankedEntry]:
    """
    Return the n highest ranked entries.

    Asking for more entries than the table holds returns every entry.

    Args:
        table: Word to count mapping.
        n: Requested number of entries.

    Returns:
        List[RankedEntry]: At most n entries in rank order.
    """
    if n <= 0:
        return []
    return rank_entries(table)[:n]


def sort_alphabetically(entries: List[RankedEntry]) -> List[RankedEntry]:
    """Re-order ranked entries by word, ignoring case."""
    return sorted(entries, key=lambda e: (e.word.lower(), e.word))
