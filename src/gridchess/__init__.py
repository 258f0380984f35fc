"""Rules engine for chess played on rectangular boards of any size."""

__version__ = "0.1.0"
