from __future__ import annotations

"""
Domain Error Types.
"""


class InputUnavailableError(OSError):
    """
    The line source could not produce further lines.

    Raised for faults while opening or reading the input, never for a
    normal end of stream.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Input unavailable '{path}': {reason}")
        self.path = path
        self.reason = reason
