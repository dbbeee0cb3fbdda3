"""Weighted index sampling over integer and floating-point weights."""

__version__ = "0.1.0"