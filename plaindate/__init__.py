"""Calendar dates without a time of day, day-count durations and month lengths."""

__version__ = "0.1.0"
__all__ = ["date", "duration", "gregorian"]