"""Polygraphic cipher engines."""

from cipher_suite.services.engines.polygraphic.playfair import PlayfairEngine

__all__ = [
    "PlayfairEngine",
]
