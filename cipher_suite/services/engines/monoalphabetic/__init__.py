"""Monoalphabetic cipher engines."""

from cipher_suite.services.engines.monoalphabetic.caesar import CaesarEngine

__all__ = [
    "CaesarEngine",
]
