"""Classic algorithms, data structures and small numerical routines."""

__version__ = "0.1.0"