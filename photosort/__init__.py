"""Photo Sort - files photos into a date-based archive using their embedded capture date."""

__version__ = "0.1.0"
