"""Classic algorithms: conversions, number checks, sorting, searching and strings."""

__version__ = "0.1.0"