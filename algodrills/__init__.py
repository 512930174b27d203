"""Classic algorithm and data-structure solutions grouped by technique."""

__version__ = "0.1.0"