from __future__ import annotations

"""
Analysis Domain Data Models.

Defines the value objects exchanged between the counting core, the analysis
engine and the interface layer. Every model is immutable except the frequency
table itself, which is owned by the caller once returned.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RankedEntry:
    """A single (word, count) pair taken from a frequency table."""
    word: str
    count: int


@dataclass(frozen=True)
class WordTally:
    """
    Outcome of a single counting pass.

    Attributes:
        table: Lowercased word to occurrence count.
        total: Number of word occurrences seen (not unique words).
    """
    table: Dict[str, int] = field(default_factory=dict)
    total: int = 0

    @property
    def unique(self) -> int:
        return len(self.table)


@dataclass(frozen=True)
class AnalysisResult:
    """
    Unified result object of a complete analysis run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_path: Absolute path of the analysed file.
        total_words: Count of every word occurrence.
        unique_words: Count of distinct lowercased words.
        top_words: Ranked head of the frequency table.
        top_word: The single most frequent word, empty when there is none.
        last_sentence: Last sentence containing the top word.
        alphabetical: The top words re-sorted alphabetically.
        summary: Technical execution metadata.
    """
    ok: bool
    error: str

    input_path: str

    total_words: int = 0
    unique_words: int = 0
    top_words: List[RankedEntry] = field(default_factory=list)
    top_word: str = ""
    last_sentence: str = ""
    alphabetical: List[RankedEntry] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        input_path: str = "",
        summary: Optional[Dict[str, Any]] = None,
) -> AnalysisResult:
    """
    Build a failed AnalysisResult carrying no partial statistics.

    Args:
        error: Human readable failure description.
        input_path: Path that was being analysed.
        summary: Optional diagnostic metadata.

    Returns:
        AnalysisResult: Result with ok=False.
    """
    return AnalysisResult(
        ok=False,
        error=error,
        input_path=input_path,
        summary=summary or {},
    )
