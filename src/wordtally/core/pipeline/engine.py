from __future__ import annotations

"""
Analysis Engine Orchestrator.

Coordinates a full run: buffers the input once, counts word frequencies,
ranks them, picks the most frequent word and locates the last sentence that
contains it. The counting and sentence passes replay the same buffered lines
and share no state.
"""

import logging
import os
from typing import Any, Dict

from wordtally.core.analysis.counter import count_words
from wordtally.core.analysis.ranker import sort_alphabetically, top_n
from wordtally.core.analysis.sentences import last_sentence_containing
from wordtally.core.pipeline.components.reader import read_lines
from wordtally.domain.config import get_default_config
from wordtally.domain.errors import InputUnavailableError
from wordtally.domain.models import AnalysisResult, create_error_result

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def run_analysis(config: Dict[str, Any]) -> AnalysisResult:
    """
    Execute the word frequency analysis described by a validated config.

    Read faults are reported as a failed result; no partial statistics are
    returned alongside them.

    Args:
        config: Normalized configuration (see validate_config).

    Returns:
        AnalysisResult: Outcome of the run.
    """
    cfg = get_default_config()
    cfg.update(config or {})

    input_path = cfg["input_path"]
    if not input_path or not os.path.isfile(input_path):
        msg = f"Input file does not exist: {input_path}"
        logger.error(msg)
        return create_error_result(msg, input_path=input_path)

    logger.info(f"Analysing '{input_path}'")

    try:
        lines = read_lines(input_path, encoding=cfg["encoding"])
    except InputUnavailableError as e:
        return create_error_result(str(e), input_path=input_path, summary={"reason": e.reason})

    tally = count_words(lines)
    top_words = top_n(tally.table, cfg["top_n"])
    top_word = top_words[0].word if top_words else ""

    last_sentence = ""
    if top_word and cfg["show_sentence"]:
        last_sentence = last_sentence_containing(lines, top_word)

    alphabetical = sort_alphabetically(top_words) if cfg["sort_alphabetically"] else []

    logger.info(f"Analysis complete: {tally.total} words, {tally.unique} unique.")

    return AnalysisResult(
        ok=True,
        error="",
        input_path=input_path,
        total_words=tally.total,
        unique_words=tally.unique,
        top_words=top_words,
        top_word=top_word,
        last_sentence=last_sentence,
        alphabetical=alphabetical,
        summary={
            "lines": len(lines),
            "requested_top": cfg["top_n"],
            "encoding": cfg["encoding"],
        },
    )
