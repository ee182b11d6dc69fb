"""Vibe Cart - demo shopping cart backend."""

__version__ = "1.0.0"
