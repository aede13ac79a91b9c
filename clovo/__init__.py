"""Clovo: password strength analysis, secure generation and similarity checks."""

__version__ = "0.1.0"
