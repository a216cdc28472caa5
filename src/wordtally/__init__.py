"""WordTally: word frequency and last-sentence reporting for text files."""

__version__ = "1.0.0"
