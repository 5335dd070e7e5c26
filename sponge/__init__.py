"""Wrapping 32-bit TCP sequence numbers and their conversion to absolute sequence numbers."""

__version__ = "0.1.0"
__all__ = ["wrapping_integers"]