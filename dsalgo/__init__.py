"""Classic data structures, algorithms, and bitmap filtering and edge detection."""

__version__ = "0.1.0"