"""Parse, view and summarize tournament standings."""

__version__ = "0.1.0"
