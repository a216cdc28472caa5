from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Provides centralized access to the character classes that drive tokenization,
the sentence terminators used by the locator, and application-wide defaults.
"""

from typing import FrozenSet

APP_NAME = "WordTally"
CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# CHARACTER CLASSES
# -----------------------------------------------------------------------------

SEPARATOR_CHARS = " \t\n\r,.!?[]';:/()<>"
SEPARATORS: FrozenSet[str] = frozenset(SEPARATOR_CHARS)

SENTENCE_TERMINATORS: FrozenSet[str] = frozenset(".!?")

# -----------------------------------------------------------------------------
# RUNTIME DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_TOP_N = 10
DEFAULT_ENCODING = "utf-8"
