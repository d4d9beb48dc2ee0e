"""journal-streak: daily journal with streak tracking."""

__version__ = "0.1.0"
