from __future__ import annotations

"""
Resilient File Reading Component.

Streams text lines from disk and converts low-level I/O faults into
InputUnavailableError, so callers can tell a broken source apart from a
normal end of file. Line terminators are preserved.
"""

import logging
from typing import Iterator, List

from wordtally.domain.constants import DEFAULT_ENCODING
from wordtally.domain.errors import InputUnavailableError

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# STREAM READING OPERATIONS
# -----------------------------------------------------------------------------

def stream_file_content(
        file_path: str,
        encoding: str = DEFAULT_ENCODING,
        errors: str = "replace",
) -> Iterator[str]:
    """
    Generate a line-by-line stream of file content.

    Undecodable byte sequences are substituted with placeholder characters
    by default; pass errors="strict" to treat them as read faults instead.

    Args:
        file_path: Path to the target file.
        encoding: Text encoding of the file.
        errors: Codec error handling strategy.

    Yields:
        str: Lines from the file, terminators included.

    Raises:
        InputUnavailableError: If the file cannot be opened or a read fails.
    """
    try:
        with open(file_path, "r", encoding=encoding, errors=errors) as f:
            for line in f:
                yield line
    except (OSError, UnicodeError, LookupError) as e:
        logger.error(f"Read failure on '{file_path}': {e}")
        raise InputUnavailableError(file_path, str(e)) from e


def read_lines(
        file_path: str,
        encoding: str = DEFAULT_ENCODING,
        errors: str = "replace",
) -> List[str]:
    """
    Buffer the whole file so it can be replayed by independent passes.

    Args:
        file_path: Path to the target file.
        encoding: Text encoding of the file.
        errors: Codec error handling strategy.

    Returns:
        List[str]: Every line of the file.

    Raises:
        InputUnavailableError: If the file cannot be fully read.
    """
    lines = list(stream_file_content(file_path, encoding=encoding, errors=errors))
    logger.debug(f"Buffered {len(lines)} lines from '{file_path}'.")
    return lines
